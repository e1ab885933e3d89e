import yaml


class RegParmException(Exception):
    exit_code: int = 1


def file_dump_yaml(filepath: str, data) -> None:
    try:
        with open(filepath, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)
    except (IOError, yaml.YAMLError) as exc:
        raise RegParmException(f'Failed to dump YAML to "{filepath}": {exc}.') from exc


def file_load_yaml(filepath: str):
    try:
        with open(filepath, "r") as f:
            return yaml.safe_load(f)
    except (IOError, yaml.YAMLError) as exc:
        raise RegParmException(f'Failed to load YAML from "{filepath}": {exc}') from exc


def strip_quotes(s: str) -> str:
    """
    Returns s without one enclosing pair of double quotes, if it has one.
    """

    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        return s[1:-1]

    return s


def is_power_of_2(x: int) -> bool:
    return x > 0 and (x & (x - 1)) == 0


def is_in_range(x: int, lo: int, hi: int) -> bool:
    return lo <= x <= hi

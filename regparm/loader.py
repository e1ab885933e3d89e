"""
Parameter File Loader.

Reads parameter files in order, parses each one into a stream of events and
forwards them to the configuration context:

- every parameter assignment, whatever section it is in, goes to
  ExtParameters.assign(name, value) with the raw token texts
- every annotation command becomes an AnnotateCommand appended to the context

Later files override earlier ones for the same name (list parameters keep
accumulating). A missing file or a file with syntax errors stops loading
immediately; nothing from a file with syntax errors is applied.
"""

import sys
import typing

from .common import RegParmException
from .context import ExtParameters
from .annotate import process_annotation_command
from .params.errors import syntax_error
from .parse import ParseEvent, RuleKind, SyntaxIssue, parse_text

STDIN_PATH = "-"


class ParameterFileError(RegParmException):
    """Base class for failures that stop parameter loading."""

    def __init__(self, filepath: str, message: str):
        super().__init__(message)
        self.filepath = filepath


class ParameterFileNotFoundError(ParameterFileError):
    exit_code = 1

    def __init__(self, filepath: str):
        super().__init__(filepath, f'parameter file not found: "{filepath}"')


class ParameterFileReadError(ParameterFileError):
    exit_code = 2


class ParameterSyntaxError(ParameterFileError):
    exit_code = 8

    def __init__(self, filepath: str, issues: typing.List[SyntaxIssue]):
        lines = [ syntax_error(filepath, i.line, i.column, i.message) for i in issues ]
        super().__init__(filepath, "Parameter file parser errors detected.\n" + "\n".join(lines))
        self.issues = list(issues)


def _assign(ctx: ExtParameters, event: ParseEvent) -> None:
    name, _, value = event.texts
    ctx.assign(name, value)


def _annotate(ctx: ExtParameters, event: ParseEvent) -> None:
    ctx.add_annotation(process_annotation_command(event.texts))


_HANDLERS = { kind: _assign for kind in RuleKind if kind.is_assignment }
_HANDLERS[RuleKind.ANNOTATION_COMMAND] = _annotate


def apply_events(ctx: ExtParameters, events: typing.Iterable[ParseEvent]) -> None:
    for event in events:
        _HANDLERS[event.kind](ctx, event)


def load_parameters_from_text(ctx: ExtParameters, text: str, source: str = "<string>") -> None:
    """
    Parse text as a parameter file and apply it to ctx.

    Raises:
        ParameterSyntaxError: If the text has syntax errors. Nothing is applied.
    """
    events, issues = parse_text(text)
    if issues:
        raise ParameterSyntaxError(source, issues)

    apply_events(ctx, events)


def _read_text(filepath: str) -> str:
    if filepath == STDIN_PATH:
        return sys.stdin.read()

    try:
        with open(filepath, "r") as f:
            return f.read()
    except FileNotFoundError as exc:
        raise ParameterFileNotFoundError(filepath) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ParameterFileReadError(filepath, f'Failed to read parameter file "{filepath}": {exc}') from exc


def read_parameters(ctx: ExtParameters, filepath: str) -> None:
    """Read one parameter file ("-" for standard input) into ctx."""
    source = "standard input" if filepath == STDIN_PATH else filepath
    ctx.diagnostics.info(f"reading parameters from {source}...")

    load_parameters_from_text(ctx, _read_text(filepath), source)


def load_parameters(ctx: ExtParameters, parm_files: typing.Sequence[str]) -> None:
    """
    Read parameters from each file in order.

    With no files, an advisory is reported and ctx keeps its defaults.

    Raises:
        ParameterFileError: On the first file that cannot be read or parsed.
    """
    ctx.parm_files = parm_files

    if len(parm_files) == 0:
        ctx.diagnostics.warn("No parameters file specified.  Default or inline defined parameters will be used.")

    for filepath in parm_files:
        read_parameters(ctx, filepath)

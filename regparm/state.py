import dataclasses


@dataclasses.dataclass
class RegParmConfig:
    strict: bool = False
    quiet:  bool = False

    @staticmethod
    def from_dict(d: dict):
        """ Create a RegParmConfig object from a dictionary. Keys that are not
            fields of RegParmConfig (e.g. other argparse results) are ignored. """
        r = RegParmConfig()

        for field in dataclasses.fields(RegParmConfig):
            if field.name in d:
                setattr(r, field.name, d[field.name])

        return r

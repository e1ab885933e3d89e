import argparse

from .state import RegParmConfig


def parse(argv=None, config: RegParmConfig = None):
    if config is None:
        config = RegParmConfig()

    parser = argparse.ArgumentParser(
        prog="regparm",
        description="""\
Load register compiler control parameter files, in the order given, and report \
the resulting parameter values and model annotation commands. Later files override \
earlier ones. Use '-' to read a parameter file from standard input.""",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("parm_files", metavar="PARMS_FILE", nargs="*", default=[],
                        help="Parameter files to load, in order.")

    parser.add_argument(   "--strict", action="store_true",                 help="Report unknown parameter names as errors.")
    parser.add_argument("--no-strict", action="store_false", dest="strict", help="Silently ignore unknown parameter names.")
    parser.add_argument("-q", "--quiet", action="store_true",               help="Only report errors through the exit status.")
    parser.add_argument(   "--no-quiet", action="store_false", dest="quiet", help="Show the parameter table and advisories.")
    parser.add_argument("--dump", metavar="FILE", type=str, default=None,   help="Write the loaded parameters to FILE as YAML.")

    parser.set_defaults(strict=config.strict, quiet=config.quiet)

    return parser.parse_args(argv)

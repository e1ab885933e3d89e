"""
Model Annotation Commands.

Parameter files may carry property overrides aimed at register or field
instances (or component types) of the compiled model:

    annotate {
        set_field_property width = "8" instances "top.reg0.f0"
        set_reg_property "sw" = "r" components "status_reg"
    }

Each command is captured as an AnnotateCommand and appended, in encounter
order, to the configuration context. Nothing here checks that the property or
path make sense; that is up to the model annotation pass.
"""

import dataclasses
from enum import Enum, unique
from typing import Sequence

from .common import RegParmException


class AnnotationCommandError(RegParmException):
    """Raised when an annotation command event does not have the expected shape."""


@unique
class CompType(Enum):
    REG = "reg"
    FIELD = "field"


SET_COMMANDS = {
    "set_reg_property": CompType.REG,
    "set_field_property": CompType.FIELD,
}

PATH_MODES = ("instances", "components")


@dataclasses.dataclass(frozen=True)
class AnnotateCommand:
    """A deferred property override."""
    target: CompType
    path_uses_components: bool
    path: str
    property_name: str
    property_value: str

    def to_dict(self) -> dict:
        return {
            "command": f"set_{self.target.value}_property",
            "property": self.property_name,
            "value": self.property_value,
            "path_mode": "components" if self.path_uses_components else "instances",
            "path": self.path,
        }

    def __str__(self) -> str:
        mode = "components" if self.path_uses_components else "instances"
        return (f"set_{self.target.value}_property {self.property_name} = "
                f"\"{self.property_value}\" {mode} \"{self.path}\"")


def _unquote(text: str) -> str:
    return text.replace('"', "")


def process_annotation_command(tokens: Sequence[str]) -> AnnotateCommand:
    """
    Build an AnnotateCommand from the token texts of one command.

    tokens is positional: (command, property, '=', value, path_mode, path).
    Double quotes are removed from property, value and path.

    Raises:
        AnnotationCommandError: If the tokens do not form a set command.
    """
    if len(tokens) != 6:
        raise AnnotationCommandError(
            f"annotation command needs 6 tokens, got {len(tokens)}: {' '.join(tokens)}")

    cmd_name, prop, _, value, mode, path = tokens

    if cmd_name not in SET_COMMANDS:
        raise AnnotationCommandError(f"unsupported annotation command '{cmd_name}'")
    if mode not in PATH_MODES:
        raise AnnotationCommandError(f"annotation path mode must be 'instances' or 'components', got '{mode}'")

    return AnnotateCommand(
        target=SET_COMMANDS[cmd_name],
        path_uses_components=(mode == "components"),
        path=_unquote(path),
        property_name=_unquote(prop),
        property_value=_unquote(value),
    )

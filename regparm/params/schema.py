"""
Parameter Schema Definitions.

This module defines the core types of the control parameter schema:
- ParamType: The value kinds a generic parameter can hold, and how text is
  coerced into each of them
- Category: The parameter file section a parameter belongs to
- ParamDef: Defines a single parameter (name, type, default, validator, ...)

A ParamDef carries no value of its own. Current values live in the
configuration context (regparm.context.ExtParameters), which asks the
definition to coerce each assignment.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..common import RegParmException, strip_quotes
from ..regnumber import RegNumber, RegNumberFormatError


class ParamValidationError(RegParmException):
    """Raised when an assignment cannot be coerced or fails domain validation."""


class ParamType(Enum):
    """
    Value kinds of generic parameters.

    - BOOL: 'true' or 'false' (case-sensitive)
    - INT: Decimal integer
    - STR: Text, with one enclosing pair of double quotes removed
    - STR_LIST: Ordered list of text values; each assignment appends
    - REG_NUMBER: Register address literal (see regparm.regnumber)
    """
    BOOL = "bool"
    INT = "int"
    STR = "str"
    STR_LIST = "str_list"
    REG_NUMBER = "reg_number"

    @property
    def description(self) -> str:
        """Human readable description used in error messages."""
        return {
            ParamType.BOOL: "a boolean (true or false)",
            ParamType.INT: "an integer",
            ParamType.STR: "a string",
            ParamType.STR_LIST: "a string",
            ParamType.REG_NUMBER: "a register number (e.g. 0x1000 or 32'h1000)",
        }[self]

    @property
    def accumulates(self) -> bool:
        return self == ParamType.STR_LIST

    def parse(self, text: str) -> Any:
        """
        Convert assignment text into a value of this type.

        For STR_LIST this returns the single item to append.

        Raises:
            ParamValidationError: If text is not a valid literal for this type.
        """
        if self == ParamType.BOOL:
            if text == "true":
                return True
            if text == "false":
                return False
            raise ParamValidationError(f"'{text}' is not {self.description}")

        if self == ParamType.INT:
            return parse_int(text)

        if self in (ParamType.STR, ParamType.STR_LIST):
            return strip_quotes(text)

        try:
            return RegNumber.parse(text)
        except RegNumberFormatError as exc:
            raise ParamValidationError(str(exc)) from exc


INT_RANGE = (-2**31, 2**31 - 1)


def parse_int(text: str) -> int:
    """Parse a signed 32-bit decimal integer, raising ParamValidationError on failure."""
    try:
        value = int(text.strip(), 10)
    except (AttributeError, ValueError) as exc:
        raise ParamValidationError(f"'{text}' is not an integer") from exc

    if not INT_RANGE[0] <= value <= INT_RANGE[1]:
        raise ParamValidationError(f"'{text}' is out of 32-bit integer range")

    return value


class Category(Enum):
    """
    Parameter file sections.

    The value of each member is the section header used in parameter files.
    """
    GLOBAL = "global"
    RDL_IN = "input rdl"
    JSPEC_IN = "input jspec"
    SYSTEMVERILOG_OUT = "output systemverilog"
    RDL_OUT = "output rdl"
    JSPEC_OUT = "output jspec"
    REGLIST_OUT = "output reglist"
    UVMREGS_OUT = "output uvmregs"
    BENCH_OUT = "output bench"


# (param_def, current_value, text, diagnostics) -> new value
Validator = Callable[["ParamDef", Any, str, Any], Any]


@dataclass
class ParamDef:
    """
    Definition of a single generic control parameter.

    Attributes:
        name: Parameter name as used in parameter files (e.g., "leaf_address_size")
        param_type: Value kind (BOOL, INT, STR, STR_LIST, REG_NUMBER)
        default: Compiled-in default (None means unset)
        category: Parameter file section the parameter belongs to
        description: Human-readable description for docs and dumps
        validator: Optional replacement for the plain type coercion. It is
            called with the definition, the current value, the assignment text
            and the diagnostic sink, and returns the new value or raises
            ParamValidationError.
    """
    name: str
    param_type: ParamType
    default: Any = None
    category: Category = Category.GLOBAL
    description: str = ""
    validator: Optional[Validator] = None

    def initial_value(self) -> Any:
        """Return a fresh copy of the default, so list defaults are never shared."""
        if self.param_type.accumulates and self.default is None:
            return []
        return copy.copy(self.default)

    def coerce(self, current: Any, text: str, diagnostics=None) -> Any:
        """
        Compute the value an assignment of text produces.

        Returns:
            The new value. For STR_LIST parameters this is a new list holding
            the current items followed by the assigned item.

        Raises:
            ParamValidationError: If the text is rejected. current is untouched.
        """
        if self.validator is not None:
            return self.validator(self, current, text, diagnostics)

        value = self.param_type.parse(text)
        if self.param_type.accumulates:
            return list(current or []) + [value]
        return value

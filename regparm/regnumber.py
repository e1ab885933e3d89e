"""
Register Address Numbers.

RegNumber is the arbitrary-precision value type used for base addresses and
address bounds. It is parsed from the numeric literal forms accepted in
parameter files:

    1234          decimal
    0x1f00        hexadecimal (C style)
    'h1f00        unsized Verilog literal (h, d, b or o radix)
    40'h1f00      sized Verilog literal (value must fit in the given width)

Underscores may be used as digit separators in every form. The radix and
width a number was written with are kept so it can be echoed back in the same
style.
"""

import re
import functools
from enum import Enum
from typing import Optional

from .common import RegParmException


class RegNumberFormatError(RegParmException, ValueError):
    """Raised when text is not a valid register number literal."""


class NumBase(Enum):
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def verilog_tag(self) -> str:
        return {NumBase.BIN: "b", NumBase.OCT: "o", NumBase.DEC: "d", NumBase.HEX: "h"}[self]


_VERILOG_BASES = {"b": NumBase.BIN, "o": NumBase.OCT, "d": NumBase.DEC, "h": NumBase.HEX}

_VERILOG_RE = re.compile(r"^(\d+)?'([bodhBODH])([0-9a-fA-F_]+)$")
_HEX_RE     = re.compile(r"^0[xX]([0-9a-fA-F_]+)$")
_DEC_RE     = re.compile(r"^([0-9_]+)$")


@functools.total_ordering
class RegNumber:
    """A non-negative integer with the radix and optional width it was written in."""

    __slots__ = ("value", "width", "base", "verilog")

    def __init__(self, value: int = 0, width: Optional[int] = None,
                 base: NumBase = NumBase.HEX, verilog: bool = False):
        if value < 0:
            raise RegNumberFormatError(f"register number must be non-negative, got {value}")
        if width is not None and width <= 0:
            raise RegNumberFormatError(f"register number width must be positive, got {width}")

        self.value   = int(value)
        self.width   = width
        self.base    = base
        self.verilog = verilog or width is not None

    @classmethod
    def parse(cls, text: str) -> "RegNumber":
        """
        Parse a numeric literal into a RegNumber.

        Raises:
            RegNumberFormatError: If text is not a recognised literal, or a sized
                literal does not fit in its width.
        """
        s = text.strip() if text is not None else ""

        match = _VERILOG_RE.match(s)
        if match:
            width_s, radix, digits = match.groups()
            base = _VERILOG_BASES[radix.lower()]
            value = cls._digits_to_int(digits, base, text)
            width = int(width_s) if width_s is not None else None
            if width is not None and width == 0:
                raise RegNumberFormatError(f"invalid register number width in '{text}'")
            if width is not None and value.bit_length() > width:
                raise RegNumberFormatError(f"value of '{text}' does not fit in {width} bits")
            return cls(value, width=width, base=base, verilog=True)

        match = _HEX_RE.match(s)
        if match:
            return cls(cls._digits_to_int(match.group(1), NumBase.HEX, text), base=NumBase.HEX)

        match = _DEC_RE.match(s)
        if match:
            return cls(cls._digits_to_int(match.group(1), NumBase.DEC, text), base=NumBase.DEC)

        raise RegNumberFormatError(f"invalid register number '{text}'")

    @staticmethod
    def _digits_to_int(digits: str, base: NumBase, text: str) -> int:
        digits = digits.replace("_", "")
        if not digits:
            raise RegNumberFormatError(f"invalid register number '{text}'")
        try:
            return int(digits, base.value)
        except ValueError as exc:
            raise RegNumberFormatError(f"invalid register number '{text}'") from exc

    def to_literal(self) -> str:
        """Render the number in the style it was written in."""
        if self.verilog:
            digits = self._format_digits()
            width = "" if self.width is None else str(self.width)
            return f"{width}'{self.base.verilog_tag}{digits}"
        if self.base == NumBase.DEC:
            return str(self.value)
        return f"0x{self._format_digits()}"

    def _format_digits(self) -> str:
        return {
            NumBase.BIN: "{:b}", NumBase.OCT: "{:o}", NumBase.DEC: "{:d}", NumBase.HEX: "{:x}",
        }[self.base].format(self.value)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, RegNumber):
            return self.value == other.value
        if isinstance(other, int) and not isinstance(other, bool):
            return self.value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (RegNumber, int)):
            return self.value < int(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.to_literal()

    def __repr__(self) -> str:
        return f"RegNumber({self.to_literal()!r})"

"""
Legacy and Enumerated Parameters.

Parameters whose value space is a closed enumeration are not stored in the
generic registry. Each is resolved from its assignment text through a fixed
choice table with a fallback member for unrecognised text (never an error).
Deprecated aliases map a boolean onto one of these enumerations and always
emit an advisory naming the replacement.

    name                         sets                          fallback
    ---------------------------  ----------------------------  --------
    root_decoder_interface       root_decoder_interface        PARALLEL
    secondary_decoder_interface  secondary_decoder_interface   NONE
    block_select_mode            block_select_mode             ALWAYS
    child_info_mode              child_info_mode               PERL
    root_has_leaf_interface *    root_decoder_interface        PARALLEL
    use_external_select *        block_select_mode             INTERNAL
    external_decode_is_root *    (nothing)

    * deprecated
"""

import dataclasses
from enum import Enum, unique
from typing import Dict, Optional

from .errors import deprecated_param_warning


@unique
class DecodeInterface(Enum):
    NONE = "none"
    LEAF = "leaf"
    SERIAL8 = "serial8"
    RING8 = "ring8"
    RING16 = "ring16"
    RING32 = "ring32"
    PARALLEL = "parallel"
    ENGINE1 = "engine1"


@unique
class BlockSelectMode(Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"
    ALWAYS = "always"


@unique
class ChildInfoMode(Enum):
    PERL = "perl"
    MODULE = "module"


@dataclasses.dataclass
class LegacyState:
    """Current values of the enumerated parameters."""
    root_decoder_interface: DecodeInterface = DecodeInterface.LEAF
    secondary_decoder_interface: DecodeInterface = DecodeInterface.NONE
    block_select_mode: BlockSelectMode = BlockSelectMode.EXTERNAL
    child_info_mode: ChildInfoMode = ChildInfoMode.PERL

    def reset(self) -> None:
        for field in dataclasses.fields(self):
            setattr(self, field.name, field.default)

    def items(self):
        return dataclasses.asdict(self).items()


@dataclasses.dataclass(frozen=True)
class LegacyParam:
    """
    One entry of the legacy dispatch table.

    Attributes:
        name: Name as written in parameter files
        attr: LegacyState attribute the assignment sets (None: sets nothing)
        choices: Exact assignment text -> enumeration member
        fallback: Member used when the text matches no choice
        deprecated: Whether using this name emits an advisory
        replacement: What to use instead, quoted into the advisory
    """
    name: str
    attr: Optional[str] = None
    choices: Dict[str, Enum] = dataclasses.field(default_factory=dict)
    fallback: Optional[Enum] = None
    deprecated: bool = False
    replacement: Optional[str] = None

    def resolve(self, text: str) -> Optional[Enum]:
        return self.choices.get(text, self.fallback)


_DI = DecodeInterface

_INTERFACE_CHOICES = {
    "leaf": _DI.LEAF,
    "serial8": _DI.SERIAL8,
    "ring8": _DI.RING8,
    "ring16": _DI.RING16,
    "ring32": _DI.RING32,
}

LEGACY_PARAMS: Dict[str, LegacyParam] = {p.name: p for p in [
    LegacyParam(
        "root_decoder_interface", "root_decoder_interface",
        choices=dict(_INTERFACE_CHOICES),
        fallback=_DI.PARALLEL,
    ),
    LegacyParam(
        "secondary_decoder_interface", "secondary_decoder_interface",
        # "paallel" is the historically accepted spelling; "parallel" falls back to NONE.
        choices={**_INTERFACE_CHOICES, "paallel": _DI.PARALLEL, "engine1": _DI.ENGINE1},
        fallback=_DI.NONE,
    ),
    LegacyParam(
        "block_select_mode", "block_select_mode",
        choices={"internal": BlockSelectMode.INTERNAL, "external": BlockSelectMode.EXTERNAL},
        fallback=BlockSelectMode.ALWAYS,
    ),
    LegacyParam(
        "child_info_mode", "child_info_mode",
        choices={"module": ChildInfoMode.MODULE},
        fallback=ChildInfoMode.PERL,
    ),
    LegacyParam(
        "root_has_leaf_interface", "root_decoder_interface",
        choices={"true": _DI.LEAF},
        fallback=_DI.PARALLEL,
        deprecated=True,
        replacement="'root_decoder_interface = leaf'",
    ),
    LegacyParam(
        "use_external_select", "block_select_mode",
        choices={"true": BlockSelectMode.EXTERNAL},
        fallback=BlockSelectMode.INTERNAL,
        deprecated=True,
        replacement="'block_select_mode'",
    ),
    LegacyParam(
        "external_decode_is_root",
        deprecated=True,
    ),
]}

LEGACY_PARAM_NAMES = tuple(LEGACY_PARAMS.keys())


def resolve_legacy(state: LegacyState, name: str, text: str, diagnostics=None) -> bool:
    """
    Apply an assignment to a legacy or enumerated parameter.

    Args:
        state: Enumerated parameter values to update
        name: Parameter name
        text: Assignment text
        diagnostics: Sink for deprecation advisories

    Returns:
        True if name is handled here, False if it is not a legacy parameter.
    """
    param = LEGACY_PARAMS.get(name)
    if param is None:
        return False

    if param.attr is not None:
        setattr(state, param.attr, param.resolve(text))

    if param.deprecated and diagnostics is not None:
        diagnostics.warn(deprecated_param_warning(name, param.replacement))

    return True

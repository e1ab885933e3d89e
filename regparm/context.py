"""
Configuration Context.

ExtParameters holds every control parameter value for one compiler run:
the generic parameters defined in REGISTRY, the enumerated/legacy ones, the
captured annotation commands and the list of parameter files they came from.

It is constructed once by the caller, filled by regparm.loader, and then
handed to every generator that needs configuration:

    ctx = ExtParameters(Diagnostics())
    load_parameters(ctx, ["chip.parms", "override.parms"])

    if ctx.has_rdl_process_components:
        ...
    width = ctx.leaf_address_size
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .params import REGISTRY, ParamValidationError
from .params.definitions import MAX_INTERNAL_REG_REPS
from .params.errors import type_error, unknown_param_error
from .params.legacy import LegacyState, DecodeInterface, BlockSelectMode, ChildInfoMode, resolve_legacy
from .params.suggest import suggest_parameter
from .annotate import AnnotateCommand
from .diagnostics import Diagnostics
from .regnumber import RegNumber
from .state import RegParmConfig


class ExtParameters:  # pylint: disable=too-many-public-methods
    """Control parameter values, enumerated settings and annotation commands."""

    def __init__(self, diagnostics: Optional[Diagnostics] = None, config: Optional[RegParmConfig] = None):
        self.config = config if config is not None else RegParmConfig()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics(quiet=self.config.quiet)
        self._values: Dict[str, Any] = {}
        self._legacy = LegacyState()
        self._annotations: List[AnnotateCommand] = []
        self._parm_files: List[str] = []
        self.init()

    def init(self) -> None:
        """Reset every parameter to its compiled-in default."""
        self._values = {name: param.initial_value() for name, param in REGISTRY.all_params.items()}
        self._legacy.reset()
        self._annotations = []
        self._parm_files = []

    # ------------------------------------------------------------ generic access

    def get(self, name: str) -> Any:
        """
        Return the current value of a generic parameter.

        Raises:
            KeyError: If name is not a generic parameter. Call sites use fixed
                names, so this is a programming error.
        """
        if name not in self._values:
            raise KeyError(f"'{name}' is not a generic control parameter.")
        value = self._values[name]
        # List values are handed out as copies; only set() may extend them.
        return list(value) if isinstance(value, list) else value

    def set(self, name: str, text: str) -> bool:
        """
        Assign text to a generic parameter.

        On success the value is replaced (or, for list parameters, extended).
        On failure an error diagnostic is reported and the value is kept.

        Returns:
            True if the assignment was accepted.
        """
        param = REGISTRY.all_params.get(name)
        if param is None:
            raise KeyError(f"'{name}' is not a generic control parameter.")

        try:
            new_value = param.coerce(self._values[name], text, self.diagnostics)
        except ParamValidationError as exc:
            self.diagnostics.error(self._validation_message(name, param, text, exc))
            return False

        self._values[name] = new_value
        return True

    @staticmethod
    def _validation_message(name, param, text, exc) -> str:
        if param.validator is not None:
            return str(exc)
        return type_error(name, param.param_type.description, text)

    def has_list(self, name: str) -> bool:
        """True if a list parameter has at least one item."""
        return len(self.get(name)) > 0

    def is_set(self, name: str) -> bool:
        """True if a parameter holds a value (nullable parameters default to None)."""
        return self.get(name) is not None

    def assign(self, name: str, text: str) -> None:
        """
        Single entry point for parameter file assignments.

        Generic parameters are tried first, then the legacy/enumerated ones.
        Unknown names are ignored, or reported as errors in strict mode.
        """
        if name in REGISTRY:
            self.set(name, text)
        elif resolve_legacy(self._legacy, name, text, self.diagnostics):
            pass
        elif self.config.strict:
            self.diagnostics.error(unknown_param_error(name, list(suggest_parameter(name))))

    # ------------------------------------------------------------- annotations

    def add_annotation(self, cmd: AnnotateCommand) -> None:
        self._annotations.append(cmd)

    @property
    def annotations(self) -> Tuple[AnnotateCommand, ...]:
        """Annotation commands in file and encounter order."""
        return tuple(self._annotations)

    def get_annotations(self) -> Tuple[AnnotateCommand, ...]:
        return self.annotations

    # ------------------------------------------------------------- file list

    @property
    def parm_files(self) -> List[str]:
        return list(self._parm_files)

    @parm_files.setter
    def parm_files(self, files: Sequence[str]) -> None:
        self._parm_files = list(files)

    # ------------------------------------------------------------- dumps

    def items(self) -> Iterator[Tuple[str, Any]]:
        """(name, value) for every parameter: generic ones in registry order, then enumerated ones."""
        yield from self._values.items()
        yield from self._legacy.items()

    def to_dict(self) -> Dict[str, Any]:
        """Plain data snapshot, suitable for YAML."""
        def plain(value):
            if isinstance(value, RegNumber):
                return value.to_literal()
            if isinstance(value, (DecodeInterface, BlockSelectMode, ChildInfoMode)):
                return value.value
            if isinstance(value, list):
                return list(value)
            return value

        return {
            "parameters": {name: plain(value) for name, value in self.items()},
            "annotations": [cmd.to_dict() for cmd in self._annotations],
            "parameter_files": self.parm_files,
        }

    # ------------------------------------------------------------- global

    @property
    def max_internal_reg_reps(self) -> int:
        return MAX_INTERNAL_REG_REPS

    @property
    def min_data_size(self) -> int:
        """Minimum register data width in bits."""
        return self.get("min_data_size")

    @property
    def primary_base_address(self) -> RegNumber:
        return self.get("base_address")

    @property
    def secondary_base_address(self) -> Optional[RegNumber]:
        return self.get("secondary_base_address")

    @property
    def secondary_low_address(self) -> Optional[RegNumber]:
        return self.get("secondary_low_address")

    @property
    def secondary_high_address(self) -> Optional[RegNumber]:
        return self.get("secondary_high_address")

    @property
    def has_secondary_base_address(self) -> bool:
        return self.is_set("secondary_base_address")

    @property
    def has_secondary_low_address(self) -> bool:
        return self.is_set("secondary_low_address")

    @property
    def has_secondary_high_address(self) -> bool:
        return self.is_set("secondary_high_address")

    @property
    def secondary_on_child_addrmaps(self) -> bool:
        return self.get("secondary_on_child_addrmaps")

    @property
    def use_js_address_alignment(self) -> bool:
        return self.get("use_js_address_alignment")

    @property
    def suppress_alignment_warnings(self) -> bool:
        return self.get("suppress_alignment_warnings")

    @property
    def allow_unordered_addresses(self) -> bool:
        return self.get("allow_unordered_addresses")

    @property
    def default_base_map_name(self) -> str:
        return self.get("default_base_map_name")

    @property
    def debug_mode(self) -> int:
        """Non-zero indicates debug."""
        return self.get("debug_mode")

    # ------------------------------------------------------------- rdl input

    @property
    def has_rdl_process_components(self) -> bool:
        return self.has_list("process_component")

    @property
    def rdl_process_components(self) -> List[str]:
        return self.get("process_component")

    @property
    def rdl_resolve_reg_category(self) -> bool:
        return self.get("resolve_reg_category")

    @property
    def rdl_restrict_defined_property_names(self) -> bool:
        return self.get("restrict_defined_property_names")

    # ------------------------------------------------------------- jspec input

    @property
    def has_jspec_process_typedefs(self) -> bool:
        return self.has_list("process_typedef")

    @property
    def jspec_process_typedefs(self) -> List[str]:
        return self.get("process_typedef")

    @property
    def jspec_root_regset_is_addrmap(self) -> bool:
        return self.get("root_regset_is_addrmap")

    @property
    def jspec_root_is_external_decode(self) -> bool:
        return self.get("root_is_external_decode")

    @property
    def jspec_external_replication_threshold(self) -> int:
        return self.get("external_replication_threshold")

    # ------------------------------------------------------------- systemverilog output

    @property
    def leaf_address_size(self) -> int:
        return self.get("leaf_address_size")

    @property
    def root_decoder_interface(self) -> DecodeInterface:
        return self._legacy.root_decoder_interface

    @property
    def secondary_decoder_interface(self) -> DecodeInterface:
        return self._legacy.secondary_decoder_interface

    @property
    def block_select_mode(self) -> BlockSelectMode:
        return self._legacy.block_select_mode

    @property
    def child_info_mode(self) -> ChildInfoMode:
        return self._legacy.child_info_mode

    @property
    def systemverilog_base_addr_is_parameter(self) -> bool:
        return self.get("base_addr_is_parameter")

    @property
    def systemverilog_module_tag(self) -> str:
        return self.get("module_tag")

    @property
    def systemverilog_use_gated_logic_clock(self) -> bool:
        return self.get("use_gated_logic_clock")

    @property
    def systemverilog_gated_logic_access_delay(self) -> int:
        return self.get("gated_logic_access_delay")

    @property
    def systemverilog_export_start_end(self) -> bool:
        return self.get("export_start_end")

    @property
    def systemverilog_always_generate_iwrap(self) -> bool:
        return self.get("always_generate_iwrap")

    @property
    def systemverilog_suppress_no_reset_warnings(self) -> bool:
        return self.get("suppress_no_reset_warnings")

    @property
    def systemverilog_generate_child_addrmaps(self) -> bool:
        return self.get("generate_child_addrmaps")

    @property
    def systemverilog_ring_inter_node_delay(self) -> int:
        return self.get("ring_inter_node_delay")

    @property
    def systemverilog_bbv5_timeout_input(self) -> bool:
        return self.get("bbv5_timeout_input")

    @property
    def systemverilog_include_default_coverage(self) -> bool:
        return self.get("include_default_coverage")

    # ------------------------------------------------------------- rdl output

    @property
    def rdl_root_component_is_instanced(self) -> bool:
        return self.get("root_component_is_instanced")

    @property
    def rdl_output_jspec_attributes(self) -> bool:
        return self.get("output_jspec_attributes")

    # ------------------------------------------------------------- jspec output

    @property
    def jspec_root_regset_is_instanced(self) -> bool:
        return self.get("root_regset_is_instanced")

    @property
    def jspec_include_files(self) -> List[str]:
        return self.get("add_js_include")

    @property
    def jspec_no_root_enum_defs(self) -> bool:
        return self.get("no_root_enum_defs")

    # ------------------------------------------------------------- reglist output

    @property
    def reglist_display_external_regs(self) -> bool:
        return self.get("display_external_regs")

    @property
    def reglist_show_reg_type(self) -> bool:
        return self.get("show_reg_type")

    @property
    def reglist_match_instance(self) -> Optional[str]:
        return self.get("match_instance")

    @property
    def reglist_show_fields(self) -> bool:
        return self.get("show_fields")

    # ------------------------------------------------------------- uvmregs output

    @property
    def uvmregs_suppress_no_category_warnings(self) -> bool:
        return self.get("suppress_no_category_warnings")

    @property
    def uvmregs_is_mem_threshold(self) -> int:
        return self.get("is_mem_threshold")

    @property
    def uvmregs_include_address_coverage(self) -> bool:
        return self.get("include_address_coverage")

    @property
    def uvmregs_max_reg_coverage_bins(self) -> int:
        return self.get("max_reg_coverage_bins")

    # ------------------------------------------------------------- bench output

    @property
    def has_test_commands(self) -> bool:
        return self.has_list("add_test_command")

    @property
    def test_commands(self) -> List[str]:
        return self.get("add_test_command")

    @property
    def bench_generate_external_regs(self) -> bool:
        return self.get("generate_external_regs")

    @property
    def bench_only_output_dut_instances(self) -> bool:
        return self.get("only_output_dut_instances")

    @property
    def bench_total_test_time(self) -> int:
        return self.get("total_test_time")

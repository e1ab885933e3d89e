"""
Control Parameter Definitions.

Registers every generic control parameter with REGISTRY, grouped by the
parameter file section it belongs to, then freezes the registry.

Two parameters carry validators beyond plain type coercion:
- min_data_size: must be a power of 2 in [32, 1024]
- debug_mode: any integer, non-zero values raise an advisory
"""

from .schema import ParamDef, ParamType, Category, ParamValidationError, parse_int
from .registry import REGISTRY
from .errors import (
    invalid_min_data_size,
    unparsable_min_data_size,
    unparsable_debug_mode,
    debug_mode_advisory,
)
from ..common import is_power_of_2, is_in_range
from ..regnumber import RegNumber

# Max internal register replications allowed (not settable from parameter files)
MAX_INTERNAL_REG_REPS = 4096

MIN_DATA_SIZE_RANGE = (32, 1024)


def _validate_min_data_size(_param, current, text, _diagnostics):
    try:
        value = parse_int(text)
    except ParamValidationError as exc:
        raise ParamValidationError(unparsable_min_data_size(current)) from exc

    if not is_power_of_2(value) or not is_in_range(value, *MIN_DATA_SIZE_RANGE):
        raise ParamValidationError(invalid_min_data_size(value))

    return value


def _validate_debug_mode(_param, current, text, diagnostics):
    try:
        value = parse_int(text)
    except ParamValidationError as exc:
        raise ParamValidationError(unparsable_debug_mode(current)) from exc

    if value != 0 and diagnostics is not None:
        diagnostics.warn(debug_mode_advisory())

    return value


def _r(category, name, ptype, default=None, description="", validator=None):
    """Register a parameter in the given section."""
    REGISTRY.register(ParamDef(
        name=name,
        param_type=ptype,
        default=default,
        category=category,
        description=description,
        validator=validator,
    ))


def _load():  # pylint: disable=too-many-statements
    """Load all parameter definitions."""
    BOOL, INT, STR = ParamType.BOOL, ParamType.INT, ParamType.STR
    STR_LIST, REG_NUMBER = ParamType.STR_LIST, ParamType.REG_NUMBER

    # --- global ---
    c = Category.GLOBAL
    _r(c, "min_data_size", INT, 32, "Minimum register data width in bits (power of 2, 32..1024)",
       validator=_validate_min_data_size)
    _r(c, "base_address", REG_NUMBER, RegNumber(0), "Base address of the root address map")
    _r(c, "secondary_base_address", REG_NUMBER, None, "Base address of the secondary decoder interface")
    _r(c, "secondary_low_address", REG_NUMBER, None, "Lowest address reachable via the secondary interface")
    _r(c, "secondary_high_address", REG_NUMBER, None, "Highest address reachable via the secondary interface")
    _r(c, "secondary_on_child_addrmaps", BOOL, False, "Create secondary interfaces on child address map decoders")
    _r(c, "use_js_address_alignment", BOOL, True, "Align addresses using jspec rules")
    _r(c, "suppress_alignment_warnings", BOOL, False)
    _r(c, "default_base_map_name", STR, "")
    _r(c, "allow_unordered_addresses", BOOL, False)
    _r(c, "debug_mode", INT, 0, "Non-zero enables non-standard debug behavior",
       validator=_validate_debug_mode)

    # --- rdl input ---
    c = Category.RDL_IN
    _r(c, "process_component", STR_LIST, [], "Names of rdl components to process")
    _r(c, "resolve_reg_category", BOOL, False, "Deduce register categories from rdl settings")
    _r(c, "restrict_defined_property_names", BOOL, True, "User defined properties must start with 'p_'")

    # --- jspec input ---
    c = Category.JSPEC_IN
    _r(c, "process_typedef", STR_LIST, [], "Names of jspec typedefs to process")
    _r(c, "root_regset_is_addrmap", BOOL, False)
    _r(c, "root_is_external_decode", BOOL, True)
    _r(c, "external_replication_threshold", INT, MAX_INTERNAL_REG_REPS,
       "Replication count above which register sets are decoded externally")

    # --- systemverilog output ---
    c = Category.SYSTEMVERILOG_OUT
    _r(c, "leaf_address_size", INT, 40, "Width of the leaf interface address bus")
    _r(c, "base_addr_is_parameter", BOOL, False)
    _r(c, "module_tag", STR, "", "Suffix appended to generated module names")
    _r(c, "use_gated_logic_clock", BOOL, False)
    _r(c, "gated_logic_access_delay", INT, 6)
    _r(c, "export_start_end", BOOL, False)
    _r(c, "always_generate_iwrap", BOOL, False)
    _r(c, "suppress_no_reset_warnings", BOOL, False)
    _r(c, "generate_child_addrmaps", BOOL, False)
    _r(c, "ring_inter_node_delay", INT, 0)
    _r(c, "bbv5_timeout_input", BOOL, False)
    _r(c, "include_default_coverage", BOOL, False)

    # --- rdl output ---
    c = Category.RDL_OUT
    _r(c, "root_component_is_instanced", BOOL, True)
    _r(c, "output_jspec_attributes", BOOL, False)

    # --- jspec output ---
    c = Category.JSPEC_OUT
    _r(c, "root_regset_is_instanced", BOOL, True)
    _r(c, "add_js_include", STR_LIST, [], "Files to include in generated jspec output")
    _r(c, "no_root_enum_defs", BOOL, False)

    # --- reglist output ---
    c = Category.REGLIST_OUT
    _r(c, "display_external_regs", BOOL, True)
    _r(c, "show_reg_type", BOOL, False)
    _r(c, "match_instance", STR, None, "Only list instances matching this pattern")
    _r(c, "show_fields", BOOL, False)

    # --- uvmregs output ---
    c = Category.UVMREGS_OUT
    _r(c, "suppress_no_category_warnings", BOOL, False)
    _r(c, "is_mem_threshold", INT, 1000, "Register count above which a block is modeled as memory")
    _r(c, "include_address_coverage", BOOL, False)
    _r(c, "max_reg_coverage_bins", INT, 128)

    # --- bench output ---
    c = Category.BENCH_OUT
    _r(c, "add_test_command", STR_LIST, [], "Commands added to the generated test bench")
    _r(c, "generate_external_regs", BOOL, False)
    _r(c, "only_output_dut_instances", BOOL, False)
    _r(c, "total_test_time", INT, 5000)


_load()
REGISTRY.freeze()

"""
Unit tests for context.py module.

Tests ExtParameters defaults, assignment dispatch and strict mode.
"""

import unittest
from ..context import ExtParameters
from ..diagnostics import Diagnostics
from ..state import RegParmConfig
from ..annotate import AnnotateCommand, CompType
from ..params import REGISTRY
from ..params.legacy import DecodeInterface, BlockSelectMode, ChildInfoMode
from ..regnumber import RegNumber


def make_context(strict: bool = False) -> ExtParameters:
    return ExtParameters(Diagnostics(quiet=True), RegParmConfig(strict=strict, quiet=True))


class TestDefaults(unittest.TestCase):
    """A fresh context holds every compiled-in default."""

    def test_every_param_has_default(self):
        ctx = make_context()
        for name, param in REGISTRY.all_params.items():
            self.assertEqual(ctx.get(name), param.initial_value(), name)

    def test_typed_getters(self):
        ctx = make_context()
        self.assertEqual(ctx.primary_base_address, RegNumber(0))
        self.assertIsNone(ctx.secondary_base_address)
        self.assertFalse(ctx.has_secondary_base_address)
        self.assertFalse(ctx.has_secondary_low_address)
        self.assertFalse(ctx.has_secondary_high_address)
        self.assertEqual(ctx.leaf_address_size, 40)
        self.assertEqual(ctx.min_data_size, 32)
        self.assertEqual(ctx.debug_mode, 0)
        self.assertEqual(ctx.root_decoder_interface, DecodeInterface.LEAF)
        self.assertEqual(ctx.secondary_decoder_interface, DecodeInterface.NONE)
        self.assertEqual(ctx.block_select_mode, BlockSelectMode.EXTERNAL)
        self.assertEqual(ctx.child_info_mode, ChildInfoMode.PERL)
        self.assertEqual(ctx.uvmregs_is_mem_threshold, 1000)
        self.assertEqual(ctx.uvmregs_max_reg_coverage_bins, 128)
        self.assertEqual(ctx.bench_total_test_time, 5000)
        self.assertEqual(ctx.jspec_external_replication_threshold, ctx.max_internal_reg_reps)
        self.assertFalse(ctx.has_rdl_process_components)
        self.assertFalse(ctx.has_jspec_process_typedefs)
        self.assertFalse(ctx.has_test_commands)
        self.assertEqual(ctx.annotations, ())
        self.assertEqual(ctx.parm_files, [])

    def test_get_unknown_raises(self):
        ctx = make_context()
        with self.assertRaises(KeyError):
            ctx.get("no_such_parameter")


class TestSet(unittest.TestCase):
    """Tests for ExtParameters.set."""

    def setUp(self):
        self.ctx = make_context()

    def test_min_data_size_powers_of_two(self):
        for n in (32, 64, 128, 256, 512, 1024):
            self.assertTrue(self.ctx.set("min_data_size", str(n)))
            self.assertEqual(self.ctx.min_data_size, n)
        self.assertEqual(self.ctx.diagnostics.records, [])

    def test_min_data_size_rejected_keeps_prior(self):
        self.ctx.set("min_data_size", "128")
        for n in (8, 96, 2048, 31):
            self.assertFalse(self.ctx.set("min_data_size", str(n)))
            self.assertEqual(self.ctx.min_data_size, 128)
        self.assertEqual(len(self.ctx.diagnostics.errors), 4)

    def test_debug_mode(self):
        self.assertTrue(self.ctx.set("debug_mode", "0"))
        self.assertEqual(self.ctx.diagnostics.warnings, [])
        self.assertTrue(self.ctx.set("debug_mode", "2"))
        self.assertEqual(self.ctx.debug_mode, 2)
        self.assertEqual(len(self.ctx.diagnostics.warnings), 1)

    def test_invalid_boolean_keeps_prior(self):
        self.assertFalse(self.ctx.set("show_fields", "True"))
        self.assertFalse(self.ctx.reglist_show_fields)
        self.assertEqual(self.ctx.diagnostics.errors,
                         ["'show_fields' must be a boolean (true or false), got 'True'"])

    def test_invalid_integer_keeps_prior(self):
        self.assertFalse(self.ctx.set("leaf_address_size", "0x20"))
        self.assertEqual(self.ctx.leaf_address_size, 40)
        self.assertEqual(len(self.ctx.diagnostics.errors), 1)

    def test_reg_number(self):
        self.assertTrue(self.ctx.set("secondary_base_address", "0x8000"))
        self.assertTrue(self.ctx.has_secondary_base_address)
        self.assertEqual(self.ctx.secondary_base_address, RegNumber(0x8000))
        self.assertFalse(self.ctx.set("secondary_base_address", "8000h"))
        self.assertEqual(self.ctx.secondary_base_address, RegNumber(0x8000))

    def test_string_quotes_removed(self):
        self.ctx.set("module_tag", '"_v2"')
        self.assertEqual(self.ctx.systemverilog_module_tag, "_v2")

    def test_list_accumulates(self):
        self.ctx.set("process_component", "a")
        self.ctx.set("process_component", '"b"')
        self.assertEqual(self.ctx.rdl_process_components, ["a", "b"])
        self.assertTrue(self.ctx.has_rdl_process_components)

    def test_list_getters_return_copies(self):
        self.ctx.set("add_test_command", "run_all")
        self.ctx.test_commands.append("injected")
        self.ctx.get("process_component").append("injected")
        self.assertEqual(self.ctx.get("add_test_command"), ["run_all"])
        self.assertEqual(self.ctx.rdl_process_components, [])
        self.assertFalse(self.ctx.has_rdl_process_components)

    def test_integer_out_of_range_keeps_prior(self):
        self.assertFalse(self.ctx.set("leaf_address_size", "99999999999999999999"))
        self.assertFalse(self.ctx.set("total_test_time", "2147483648"))
        self.assertEqual(self.ctx.leaf_address_size, 40)
        self.assertEqual(self.ctx.bench_total_test_time, 5000)
        self.assertEqual(len(self.ctx.diagnostics.errors), 2)

    def test_string_escape_kept(self):
        self.ctx.set("module_tag", r'"a\"b"')
        self.assertEqual(self.ctx.systemverilog_module_tag, r'a\"b')

    def test_set_unknown_raises(self):
        with self.assertRaises(KeyError):
            self.ctx.set("root_decoder_interface", "leaf")


class TestAssign(unittest.TestCase):
    """Tests for the assign dispatch entry point."""

    def test_generic_first(self):
        ctx = make_context()
        ctx.assign("total_test_time", "100")
        self.assertEqual(ctx.bench_total_test_time, 100)

    def test_legacy_second(self):
        ctx = make_context()
        ctx.assign("root_decoder_interface", "ring16")
        self.assertEqual(ctx.root_decoder_interface, DecodeInterface.RING16)
        self.assertEqual(ctx.diagnostics.records, [])

    def test_root_has_leaf_interface(self):
        ctx = make_context()
        ctx.assign("root_decoder_interface", "serial8")
        ctx.assign("root_has_leaf_interface", "true")
        self.assertEqual(ctx.root_decoder_interface, DecodeInterface.LEAF)
        self.assertEqual(len(ctx.diagnostics.warnings), 1)

    def test_unknown_ignored_silently(self):
        ctx = make_context()
        ctx.assign("leaf_adress_size", "12")
        self.assertEqual(ctx.diagnostics.records, [])
        self.assertEqual(ctx.leaf_address_size, 40)

    def test_unknown_strict_reports_with_suggestion(self):
        ctx = make_context(strict=True)
        ctx.assign("leaf_adress_size", "12")
        self.assertEqual(len(ctx.diagnostics.errors), 1)
        self.assertIn("Unknown parameter 'leaf_adress_size'", ctx.diagnostics.errors[0])
        self.assertIn("leaf_address_size", ctx.diagnostics.errors[0])

    def test_strict_does_not_affect_known_names(self):
        ctx = make_context(strict=True)
        ctx.assign("block_select_mode", "internal")
        ctx.assign("show_fields", "true")
        self.assertEqual(ctx.diagnostics.records, [])


class TestInitAndDump(unittest.TestCase):
    """Tests for init(), annotations and to_dict()."""

    def test_init_resets_everything(self):
        ctx = make_context()
        ctx.assign("process_component", "a")
        ctx.assign("child_info_mode", "module")
        ctx.add_annotation(AnnotateCommand(CompType.REG, False, "top.r", "sw", "r"))
        ctx.parm_files = ["a.parms"]

        ctx.init()

        self.assertEqual(ctx.rdl_process_components, [])
        self.assertEqual(ctx.child_info_mode, ChildInfoMode.PERL)
        self.assertEqual(ctx.get_annotations(), ())
        self.assertEqual(ctx.parm_files, [])

    def test_to_dict(self):
        ctx = make_context()
        ctx.assign("base_address", "40'h100")
        ctx.assign("add_js_include", "x.js")
        ctx.assign("secondary_decoder_interface", "engine1")
        ctx.add_annotation(AnnotateCommand(CompType.FIELD, True, "my_reg", "reset", "0"))

        data = ctx.to_dict()

        self.assertEqual(data["parameters"]["base_address"], "40'h100")
        self.assertEqual(data["parameters"]["add_js_include"], ["x.js"])
        self.assertEqual(data["parameters"]["secondary_decoder_interface"], "engine1")
        self.assertEqual(data["parameters"]["block_select_mode"], "external")
        self.assertIsNone(data["parameters"]["secondary_low_address"])
        self.assertEqual(data["annotations"], [{
            "command": "set_field_property",
            "property": "reset",
            "value": "0",
            "path_mode": "components",
            "path": "my_reg",
        }])

    def test_items_covers_generic_and_enumerated(self):
        ctx = make_context()
        names = [name for name, _ in ctx.items()]
        self.assertEqual(len(names), len(REGISTRY.all_params) + 4)
        self.assertIn("child_info_mode", names)


if __name__ == "__main__":
    unittest.main()

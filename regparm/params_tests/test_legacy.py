"""
Unit tests for params/legacy.py module.

Tests enumerated parameter resolution and deprecated aliases.
"""

import unittest
from ..params.legacy import (
    LegacyState,
    LEGACY_PARAMS,
    DecodeInterface,
    BlockSelectMode,
    ChildInfoMode,
    resolve_legacy,
)
from ..diagnostics import Diagnostics


class TestResolveLegacy(unittest.TestCase):
    """Tests for resolve_legacy."""

    def setUp(self):
        self.state = LegacyState()
        self.diagnostics = Diagnostics(quiet=True)

    def resolve(self, name, text):
        return resolve_legacy(self.state, name, text, self.diagnostics)

    def test_defaults(self):
        self.assertEqual(self.state.root_decoder_interface, DecodeInterface.LEAF)
        self.assertEqual(self.state.secondary_decoder_interface, DecodeInterface.NONE)
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.EXTERNAL)
        self.assertEqual(self.state.child_info_mode, ChildInfoMode.PERL)

    def test_unknown_name_not_handled(self):
        self.assertFalse(self.resolve("leaf_address_size", "12"))
        self.assertFalse(self.resolve("no_such_thing", "x"))
        self.assertEqual(self.diagnostics.records, [])

    def test_root_decoder_interface_choices(self):
        for text, member in [
            ("leaf", DecodeInterface.LEAF),
            ("serial8", DecodeInterface.SERIAL8),
            ("ring8", DecodeInterface.RING8),
            ("ring16", DecodeInterface.RING16),
            ("ring32", DecodeInterface.RING32),
            ("parallel", DecodeInterface.PARALLEL),
            ("anything", DecodeInterface.PARALLEL),
        ]:
            self.assertTrue(self.resolve("root_decoder_interface", text))
            self.assertEqual(self.state.root_decoder_interface, member, text)
        self.assertEqual(self.diagnostics.records, [])

    def test_secondary_decoder_interface_choices(self):
        for text, member in [
            ("leaf", DecodeInterface.LEAF),
            ("ring32", DecodeInterface.RING32),
            ("paallel", DecodeInterface.PARALLEL),
            ("engine1", DecodeInterface.ENGINE1),
            ("parallel", DecodeInterface.NONE),
            ("bogus", DecodeInterface.NONE),
        ]:
            self.resolve("secondary_decoder_interface", text)
            self.assertEqual(self.state.secondary_decoder_interface, member, text)

    def test_block_select_mode(self):
        self.resolve("block_select_mode", "internal")
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.INTERNAL)
        self.resolve("block_select_mode", "external")
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.EXTERNAL)
        self.resolve("block_select_mode", "foo")
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.ALWAYS)
        self.assertEqual(self.diagnostics.records, [])

    def test_child_info_mode(self):
        self.resolve("child_info_mode", "module")
        self.assertEqual(self.state.child_info_mode, ChildInfoMode.MODULE)
        self.resolve("child_info_mode", "perl5")
        self.assertEqual(self.state.child_info_mode, ChildInfoMode.PERL)

    def test_root_has_leaf_interface_deprecated(self):
        self.resolve("root_decoder_interface", "ring16")
        self.resolve("root_has_leaf_interface", "true")
        self.assertEqual(self.state.root_decoder_interface, DecodeInterface.LEAF)
        self.assertEqual(len(self.diagnostics.warnings), 1)
        self.assertIn("'root_decoder_interface = leaf'", self.diagnostics.warnings[0])

        self.resolve("root_has_leaf_interface", "false")
        self.assertEqual(self.state.root_decoder_interface, DecodeInterface.PARALLEL)
        self.assertEqual(len(self.diagnostics.warnings), 2)

    def test_use_external_select_deprecated(self):
        self.resolve("use_external_select", "false")
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.INTERNAL)
        self.resolve("use_external_select", "true")
        self.assertEqual(self.state.block_select_mode, BlockSelectMode.EXTERNAL)
        self.assertEqual(len(self.diagnostics.warnings), 2)
        self.assertIn("'block_select_mode'", self.diagnostics.warnings[0])

    def test_external_decode_is_root_advisory_only(self):
        before = dict(self.state.items())
        self.assertTrue(self.resolve("external_decode_is_root", "true"))
        self.assertEqual(dict(self.state.items()), before)
        self.assertEqual(len(self.diagnostics.warnings), 1)
        self.assertIn("external_decode_is_root", self.diagnostics.warnings[0])

    def test_reset(self):
        self.resolve("child_info_mode", "module")
        self.resolve("block_select_mode", "internal")
        self.state.reset()
        self.assertEqual(self.state, LegacyState())

    def test_only_aliases_are_deprecated(self):
        deprecated = {name for name, p in LEGACY_PARAMS.items() if p.deprecated}
        self.assertEqual(deprecated, {"root_has_leaf_interface", "use_external_select", "external_decode_is_root"})


if __name__ == "__main__":
    unittest.main()

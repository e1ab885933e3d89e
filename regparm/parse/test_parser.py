"""
Unit tests for parse/parser.py module.
"""

import unittest
from .parser import RuleKind, parse_text


class TestParserEvents(unittest.TestCase):
    """Well-formed input produces one event per statement."""

    def test_assignments_in_sections(self):
        events, errors = parse_text("""
            global { debug_mode = 0 base_address = 0x10 }
            input jspec { process_typedef = "t1" }
            output uvmregs { include_address_coverage = true }
        """)

        self.assertEqual(errors, [])
        self.assertEqual([(e.kind, e.texts) for e in events], [
            (RuleKind.GLOBAL, ("debug_mode", "=", "0")),
            (RuleKind.GLOBAL, ("base_address", "=", "0x10")),
            (RuleKind.JSPEC_IN, ("process_typedef", "=", '"t1"')),
            (RuleKind.UVMREGS_OUT, ("include_address_coverage", "=", "true")),
        ])

    def test_every_section_header(self):
        text = "\n".join(f"{kind.value} {{ x = 1 }}" for kind in RuleKind if kind.is_assignment)
        events, errors = parse_text(text)

        self.assertEqual(errors, [])
        self.assertEqual([e.kind for e in events], [k for k in RuleKind if k.is_assignment])

    def test_annotation_commands(self):
        events, errors = parse_text("""
            annotate {
                set_field_property width = "8" instances "top.reg0.f0"
                set_reg_property "sw" = "r" components "ctrl"
            }
        """)

        self.assertEqual(errors, [])
        self.assertEqual([e.kind for e in events], [RuleKind.ANNOTATION_COMMAND] * 2)
        self.assertEqual(events[0].texts,
                         ("set_field_property", "width", "=", '"8"', "instances", '"top.reg0.f0"'))
        self.assertEqual(events[1].line, 4)

    def test_empty_input(self):
        self.assertEqual(parse_text(""), ([], []))
        self.assertEqual(parse_text("// only a comment\n"), ([], []))

    def test_empty_section(self):
        self.assertEqual(parse_text("output bench { }"), ([], []))


class TestParserErrors(unittest.TestCase):
    """Malformed input reports errors and keeps parsing."""

    def test_missing_equals_recovers(self):
        events, errors = parse_text("global {\n a 1\n b = 2\n}")

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line, 2)
        self.assertEqual([e.texts for e in events], [("b", "=", "2")])

    def test_missing_value_recovers_at_next_statement(self):
        events, errors = parse_text("global {\n a =\n}\nglobal { c = 3 }")

        self.assertEqual(len(errors), 1)
        self.assertEqual([e.texts for e in events], [("c", "=", "3")])

    def test_unknown_section(self):
        events, errors = parse_text("output vhdl { a = 1 }\nglobal { b = 2 }")

        self.assertEqual(len(errors), 1)
        self.assertIn("'vhdl'", errors[0].message)
        self.assertEqual([e.texts for e in events], [("b", "=", "2")])

    def test_stray_statement_at_top_level(self):
        events, errors = parse_text("a = 1\nglobal { b = 2 }")

        self.assertEqual(len(errors), 1)
        self.assertEqual([e.texts for e in events], [("b", "=", "2")])

    def test_unclosed_block(self):
        events, errors = parse_text("global { a = 1")

        self.assertEqual(len(errors), 1)
        self.assertIn("'}'", errors[0].message)
        self.assertIn("end of file", errors[0].message)
        self.assertEqual([e.texts for e in events], [("a", "=", "1")])

    def test_bad_annotation_command(self):
        events, errors = parse_text("""annotate {
            set_reg_property sw = r instances "x"
            set_reg_property sw = "r" instances "y"
        }""")

        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line, 2)
        self.assertEqual([e.texts[-1] for e in events], ['"y"'])

    def test_assignment_not_allowed_in_annotate(self):
        _, errors = parse_text('annotate { debug_mode = 1 }')
        self.assertEqual(len(errors), 1)

    def test_lexical_errors_included_and_sorted(self):
        _, errors = parse_text("global { a 1 }\nglobal { b = 2; }")

        self.assertEqual([e.line for e in errors], [1, 2])


if __name__ == "__main__":
    unittest.main()

import io
import unittest
from contextlib import redirect_stderr

from cdefines_enum.errors import GenerationError
from cdefines_enum.parser.names import CaseMode, normalize_name
from cdefines_enum.parser.scanner import scan_defines
from cdefines_enum.parser.symbols import SymbolTable, build_symbol_table


def build(text, prefix="", suffix="", case_mode=CaseMode.NONE):
    def normalize(name):
        return normalize_name(name, prefix, suffix, case_mode)
    return build_symbol_table(scan_defines(text), normalize)


class TestBuildSymbolTable(unittest.TestCase):

    def test_distinct_literals(self):
        table = build("#define SYS_OPEN 2\n#define SYS_READ 0\n",
                      prefix="SYS_", case_mode=CaseMode.LOWER)
        self.assertEqual(table.symbols, {"open": 2, "read": 0})
        self.assertFalse(table.has_duplicates)

    def test_alias(self):
        table = build("#define A 1\n#define B A\n")
        self.assertEqual(table.symbols, {"A": 1, "B": 1})
        self.assertTrue(table.has_duplicates)

    def test_alias_resolved_through_normalization(self):
        table = build("#define ERR_AGAIN 11\n#define ERR_WOULDBLOCK ERR_AGAIN\n",
                      prefix="ERR_", case_mode=CaseMode.LOWER)
        self.assertEqual(table.symbols, {"again": 11, "wouldblock": 11})
        self.assertTrue(table.has_duplicates)

    def test_alias_of_alias(self):
        table = build("#define A 3\n#define B A\n#define C B\n")
        self.assertEqual(table.symbols["C"], 3)

    def test_forward_reference(self):
        with self.assertRaisesRegex(GenerationError, "A is defined ahead of B"):
            build("#define A B\n#define B 1\n")

    def test_unknown_reference(self):
        with self.assertRaisesRegex(GenerationError, "line 2: X is defined ahead of 10UL"):
            build("#define A 1\n#define X 10UL\n")

    def test_duplicate_values_without_alias(self):
        table = build("#define A 0x10\n#define B 020\n#define C 16\n")
        self.assertEqual(table.symbols, {"A": 16, "B": 16, "C": 16})
        self.assertTrue(table.has_duplicates)

    def test_last_write_wins_on_normalized_collision(self):
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            table = build("#define SYS_open 1\n#define SYS_OPEN 2\n",
                          prefix="SYS_", case_mode=CaseMode.LOWER)
        self.assertEqual(table.symbols, {"open": 2})
        self.assertFalse(table.has_duplicates)
        self.assertIn("Warning", stderr.getvalue())

    def test_empty(self):
        table = build("/* nothing here */\n")
        self.assertEqual(table, SymbolTable())

    def test_custom_parser(self):
        def parse(token):
            return 42 if token == "ANSWER" else None

        table = build_symbol_table(scan_defines("#define A ANSWER\n"), lambda name: name, parse)
        self.assertEqual(table.symbols, {"A": 42})
        self.assertFalse(table.has_duplicates)


if __name__ == '__main__':
    unittest.main()

"""
Tests for lexer diagnostics and error recovery helpers.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from mppl.lexer.lexer import Lexer
from mppl.lexer.errors import (
    ERROR_CODES, ErrorRecovery, IntegerOverflowError, LexerError, LexerWarning,
    create_unrecognized_symbol_warning, create_unterminated_string_warning,
    create_lone_slash_warning
)


class TestDiagnostics(unittest.TestCase):

    def test_overflow_error_report(self):
        error = IntegerOverflowError("4294967296", "prog.mpl", 7, 17)
        report = str(error)

        self.assertIsInstance(error, LexerError)
        self.assertTrue(report.startswith("ERROR[L007]: Integer literal out of range: '4294967296'"))
        self.assertIn("--> prog.mpl[7:17]", report)
        self.assertIn("help: Unsigned integers must be at most 4294967295.", report)

    def test_warning_report_lists_suggestions(self):
        lexer = Lexer("x & y")
        lexer.tokenize()
        warning = lexer.warnings[0]
        report = str(warning)

        self.assertIsInstance(warning, LexerWarning)
        self.assertEqual(warning.code, "L001")
        self.assertTrue(report.startswith("WARNING[L001]: Unrecognized symbol: '&'"))
        self.assertIn("--> <unknown>[2:3]", report)
        self.assertIn("    - and\n", report)

    def test_non_printable_symbol_help(self):
        lexer = Lexer("\x07")
        lexer.tokenize()

        self.assertIn("U+0007", lexer.warnings[0].diagnostic.help_text)

    def test_unknown_character_help(self):
        warning = create_unrecognized_symbol_warning("?", "<string>", 0, 1)

        self.assertEqual(warning.diagnostic.suggestions, [])
        self.assertIn("'?' is not valid", warning.diagnostic.help_text)

    def test_unterminated_string_warning(self):
        warning = create_unterminated_string_warning("f", 3, 9)

        self.assertEqual(warning.diagnostic.severity, "warning")
        self.assertEqual((warning.diagnostic.start, warning.diagnostic.end), (3, 9))

    def test_lone_slash_warning_span(self):
        warning = create_lone_slash_warning("f", 5)

        self.assertEqual((warning.diagnostic.start, warning.diagnostic.end), (5, 6))
        self.assertEqual(warning.diagnostic.suggestions, ["div"])

    def test_every_emitted_code_is_registered(self):
        lexer = Lexer("? 'open")
        lexer.tokenize()
        brace = Lexer("{ open")
        brace.tokenize()
        slash = Lexer("/ x */")
        slash.tokenize()

        codes = [d.code for lx in (lexer, brace, slash) for d in lx.warnings]
        self.assertEqual(codes, ["L001", "L002", "L011", "L012"])
        for code in codes:
            self.assertIn(code, ERROR_CODES)

    def test_get_diagnostics_lists_errors_first(self):
        lexer = Lexer("? 99999999999")
        lexer.tokenize()
        diagnostics = lexer.get_diagnostics()

        self.assertIsInstance(diagnostics[0], IntegerOverflowError)
        self.assertIsInstance(diagnostics[1], LexerWarning)


class TestSymbolSuggestions(unittest.TestCase):
    """Suggestions attached to unrecognized symbols the lexer emits."""

    def suggestions_for(self, source: str):
        lexer = Lexer(source)
        lexer.tokenize()
        return [w.diagnostic.suggestions for w in lexer.warnings]

    def test_borrowed_operators(self):
        self.assertEqual(self.suggestions_for("a ! b"), [["not"]])
        self.assertEqual(self.suggestions_for("a % b"), [["div"]])
        self.assertEqual(self.suggestions_for("a | b"), [["or"]])

    def test_doubled_operator_is_two_unknown_characters(self):
        self.assertEqual(self.suggestions_for("a && b"), [["and"], ["and"]])

    def test_not_equal_spelling_splits_before_equal(self):
        lexer = Lexer("a != b")
        tokens = lexer.tokenize()

        self.assertEqual(tokens[1].value, "!")
        self.assertEqual(self.suggestions_for("a != b"), [["not"]])

    def test_no_suggestion_for_other_characters(self):
        self.assertEqual(self.suggestions_for("?"), [[]])
        self.assertEqual(ErrorRecovery.suggest_symbol_corrections("?"), [])

    def test_suggestions_are_copies(self):
        ErrorRecovery.suggest_symbol_corrections("!").append("oops")

        self.assertEqual(ErrorRecovery.suggest_symbol_corrections("!"), ["not"])


if __name__ == '__main__':
    unittest.main()

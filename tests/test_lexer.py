"""
Test suite for the exprcc lexer.

Tests cover:
- Integer literals and operator recognition
- Multi-character operators emitted as single tokens
- Source locations across lines
- Invalid characters and caret rendering
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprcc.lexer import Lexer, LexerError, TokenType, tokenize_string, tokenize_file


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def _types(self, source: str):
        return [token.type for token in tokenize_string(source)]

    def _lexemes(self, source: str):
        return [token.lexeme for token in tokenize_string(source)]

    def test_numbers_and_operators(self):
        tokens = tokenize_string("1 + 23")

        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.NUMBER, TokenType.RESERVED, TokenType.NUMBER, TokenType.EOF]
        )
        self.assertEqual([t.value for t in tokens], [1, None, 23, None])
        self.assertEqual([t.lexeme for t in tokens], ["1", "+", "23", ""])

    def test_all_single_character_operators(self):
        self.assertEqual(
            self._lexemes("+-*/()<>"),
            ["+", "-", "*", "/", "(", ")", "<", ">", ""]
        )

    def test_multi_character_operators_are_atomic(self):
        self.assertEqual(
            self._lexemes("<= >= < > == !="),
            ["<=", ">=", "<", ">", "==", "!=", ""]
        )
        self.assertEqual(self._lexemes("1<=2"), ["1", "<=", "2", ""])

    def test_empty_source_yields_only_eof(self):
        tokens = tokenize_string("")

        self.assertEqual(len(tokens), 1)
        self.assertTrue(tokens[0].is_eof)
        self.assertEqual(tokens[0].location.offset, 0)

    def test_whitespace_only_source(self):
        self.assertEqual(self._types(" \t\n "), [TokenType.EOF])

    def test_locations_track_lines_and_columns(self):
        tokens = tokenize_string("1\n+ 2", "expr.txt")

        locations = [(t.location.line, t.location.column, t.location.offset) for t in tokens]
        self.assertEqual(locations, [(1, 1, 0), (2, 1, 2), (2, 3, 4), (2, 4, 5)])
        self.assertEqual(str(tokens[1].location), "expr.txt:2:1")

    def test_eof_sits_after_last_character(self):
        tokens = tokenize_string("12")
        self.assertEqual(tokens[-1].location.offset, 2)

    def test_large_integer_literal(self):
        tokens = tokenize_string("12345678901234567890")
        self.assertEqual(tokens[0].value, 12345678901234567890)

    def test_invalid_character(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 + a")

        error = ctx.exception
        self.assertEqual(error.location.offset, 4)
        self.assertEqual(error.diagnostic.code, "L001")
        self.assertIn("invalid token", str(error))

    def test_lone_equals_suggests_comparison(self):
        with self.assertRaises(LexerError) as ctx:
            tokenize_string("1 = 1")

        self.assertIn("Use '==' for comparison", ctx.exception.diagnostic.suggestions)

    def test_unicode_digit_is_rejected(self):
        with self.assertRaises(LexerError):
            tokenize_string("2²")

    def test_lexer_can_be_rerun(self):
        lexer = Lexer("1+2")
        first = lexer.tokenize()
        second = lexer.tokenize()
        self.assertEqual(first, second)

    def test_tokenize_file(self):
        import tempfile

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "expr.txt")
            with open(path, "w", encoding="utf-8") as f:
                f.write("(1+2)\n")

            tokens = tokenize_file(path)

        self.assertEqual([t.lexeme for t in tokens], ["(", "1", "+", "2", ")", ""])
        self.assertEqual(tokens[0].location.filename, path)


class TestDiagnosticRendering(unittest.TestCase):
    """Test the caret rendering used by the error sink."""

    def test_caret_points_at_offending_character(self):
        source = "1 + a"
        with self.assertRaises(LexerError) as ctx:
            tokenize_string(source)

        rendered = ctx.exception.diagnostic.render(source)
        lines = rendered.splitlines()

        self.assertEqual(lines[0], "ERROR[L001]: invalid token")
        self.assertEqual(lines[2], "1 + a")
        self.assertEqual(lines[3], "    ^ invalid token")

    def test_caret_on_second_line(self):
        source = "1 +\n 2 $"
        with self.assertRaises(LexerError) as ctx:
            tokenize_string(source)

        lines = ctx.exception.diagnostic.render(source).splitlines()
        self.assertEqual(lines[2], " 2 $")
        self.assertEqual(lines[3], "   ^ invalid token")

    def test_caret_keeps_tabs_from_source_line(self):
        source = "\t1 +\t\t$"
        with self.assertRaises(LexerError) as ctx:
            tokenize_string(source)

        lines = ctx.exception.diagnostic.render(source).splitlines()
        self.assertEqual(lines[2], source)
        self.assertEqual(lines[3], "\t   \t\t^ invalid token")


if __name__ == '__main__':
    unittest.main()

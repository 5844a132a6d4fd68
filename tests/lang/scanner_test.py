import io
import unittest

from lox.lang.error import ErrorHandler, ScanError
from lox.lang.scanner import Scanner
from lox.lang.token import Token, TokenType


def scan(source):
    error_handler = ErrorHandler(out=io.StringIO())
    return Scanner(source, error_handler).scan_tokens(), error_handler


def types(source):
    tokens, __ = scan(source)
    return [token.type for token in tokens]


class ScannerTestCase(unittest.TestCase):

    def test_empty_source(self):
        should_pass = ["", "   ", "\t\r", "// only a comment"]
        for case in should_pass:
            tokens, error_handler = scan(case)
            self.assertEqual([Token(TokenType.EOF, "", None, 1)], tokens, case)
            self.assertFalse(error_handler.had_error, case)

    def test_punctuation(self):
        self.assertEqual([
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
            TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
            TokenType.STAR, TokenType.SLASH, TokenType.EOF
        ], types("(){},.-+;*/"))

    def test_longest_match(self):
        cases = {
            "!=": [TokenType.BANG_EQUAL],
            "==": [TokenType.EQUAL_EQUAL],
            "<=": [TokenType.LESS_EQUAL],
            ">=": [TokenType.GREATER_EQUAL],
            "! =": [TokenType.BANG, TokenType.EQUAL],
            "===": [TokenType.EQUAL_EQUAL, TokenType.EQUAL],
            "<>": [TokenType.LESS, TokenType.GREATER],
            "!!": [TokenType.BANG, TokenType.BANG],
        }
        for case, expected in cases.items():
            self.assertEqual(expected + [TokenType.EOF], types(case), case)

    def test_comments(self):
        cases = {
            "1 // 2 + 3": [TokenType.NUMBER],
            "1 / 2": [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER],
            "// a\n2": [TokenType.NUMBER],
        }
        for case, expected in cases.items():
            self.assertEqual(expected + [TokenType.EOF], types(case), case)

    def test_lines(self):
        tokens, __ = scan("var a;\n\nprint a;\n")
        self.assertEqual([1, 1, 1, 3, 3, 3, 4], [token.line for token in tokens])

    def test_numbers(self):
        cases = {
            "123": 123.0,
            "45.67": 45.67,
            "0": 0.0,
            "007": 7.0,
        }
        for case, expected in cases.items():
            tokens, __ = scan(case)
            self.assertEqual(Token(TokenType.NUMBER, case, expected, 1), tokens[0], case)

        # no leading dot, no trailing dot, no sign
        self.assertEqual([TokenType.DOT, TokenType.NUMBER, TokenType.EOF], types(".5"))
        self.assertEqual([TokenType.NUMBER, TokenType.DOT, TokenType.EOF], types("5."))
        self.assertEqual([TokenType.MINUS, TokenType.NUMBER, TokenType.EOF], types("-5"))
        self.assertEqual([TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF], types("1.e5"))

    def test_strings(self):
        tokens, error_handler = scan("\"hello world\"")
        self.assertEqual(Token(TokenType.STRING, "\"hello world\"", "hello world", 1), tokens[0])
        self.assertFalse(error_handler.had_error)

        tokens, __ = scan("\"a\nb\" x")
        self.assertEqual("a\nb", tokens[0].literal)
        self.assertEqual(2, tokens[1].line)

        tokens, __ = scan("\"\"")
        self.assertEqual("", tokens[0].literal)

    def test_unterminated_string(self):
        error_handler = ErrorHandler(out=io.StringIO())
        scanner = Scanner("var s = \"abc;", error_handler)
        tokens = scanner.scan_tokens()
        self.assertTrue(error_handler.had_error)
        self.assertEqual([TokenType.VAR, TokenType.IDENTIFIER, TokenType.EQUAL, TokenType.EOF],
                         [token.type for token in tokens])

        error, = error_handler.errors
        self.assertIsInstance(error, ScanError)
        self.assertEqual([error], scanner.errors)
        self.assertEqual("[line 1] Error: Unterminated string.", str(error))

    def test_identifiers_and_keywords(self):
        keywords = ["and", "class", "else", "false", "for", "fun", "if", "nil", "or", "print", "return", "super",
                    "this", "true", "var", "while"]
        for case in keywords:
            tokens, __ = scan(case)
            self.assertEqual(TokenType[case.upper()], tokens[0].type, case)
            self.assertEqual(case, tokens[0].lexeme, case)
            self.assertIsNone(tokens[0].literal, case)

        should_be_identifiers = ["x", "_", "_private", "snake_case", "camelCase", "a1b2", "orchid", "variable",
                                 "Print", "nil_"]
        for case in should_be_identifiers:
            tokens, __ = scan(case)
            self.assertEqual(Token(TokenType.IDENTIFIER, case, None, 1), tokens[0], case)
            self.assertEqual(2, len(tokens), case)

        self.assertEqual([TokenType.NUMBER, TokenType.IDENTIFIER, TokenType.EOF], types("1abc"))

    def test_unexpected_character(self):
        should_fail = ["@", "#", "1 $ 2", "é", "a ^ b", "x ~"]
        for case in should_fail:
            tokens, error_handler = scan(case)
            self.assertTrue(error_handler.had_error, case)
            self.assertEqual("Unexpected character.", error_handler.errors[0].msg, case)
            self.assertIs(TokenType.EOF, tokens[-1].type, case)

        # scanning carries on after the bad character
        tokens, error_handler = scan("1 @ 2\n#")
        self.assertEqual([TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF], [token.type for token in tokens])
        self.assertEqual([1, 2], [error.line for error in error_handler.errors])

    def test_single_eof(self):
        should_pass = ["", "var x = 1;", "\"open", "@@@", "1\n2\n3\n"]
        for case in should_pass:
            tokens, __ = scan(case)
            self.assertTrue(tokens, case)
            self.assertEqual(1, [token.type for token in tokens].count(TokenType.EOF), case)
            self.assertIs(TokenType.EOF, tokens[-1].type, case)
            self.assertEqual(case.count("\n") + 1, tokens[-1].line, case)

    def test_rescan_lexemes(self):
        should_pass = [
            "var average = (min + max) / 2;",
            "print !(1 >= 2) == true; // compare",
            "print \"hi\" != nil;\nvar x_1 = -3.25 * 4 <= 5;",
        ]
        for case in should_pass:
            tokens, __ = scan(case)
            rescanned, __ = scan(" ".join(token.lexeme for token in tokens))
            self.assertEqual([(t.type, t.lexeme, t.literal) for t in tokens],
                             [(t.type, t.lexeme, t.literal) for t in rescanned], case)


if __name__ == '__main__':
    unittest.main()

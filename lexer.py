"""
Lexer for Lox expressions.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (e.g. `nil`, `true`, `var`, `while`), identifiers,
    string and number literals, single- and two-character operators (`!=`,
    `==`, `<=`, `>=`) and punctuation, and skips whitespace and single-line
    comments starting with `//`.

Examples:
    Input:  '(1 + 2.5) >= "x" // done'
    Tokens: [LPAREN, NUMBER(1.0), PLUS, NUMBER(2.5), RPAREN, GTE, STRING('x'), EOF]

Implementation notes:
- The lexer is a single left-to-right pass. `self.start` marks where the
    current token began and `self.pos` is the next unconsumed character, so
    every lexeme is the exact slice `text[start:pos]`.
- `self.current_char` is the one-character lookahead and `peek_char()` the
    second; numbers need both to decide whether a `.` belongs to them.
- Scanning never fails. Unterminated strings and characters outside the
    language produce no token; each one is recorded as a `ScanError` in
    `self.errors` for the caller to report or ignore.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import KEYWORDS, Token, TokenType


class ScanError(SyntaxError):
    """A lexical problem that was skipped over while scanning."""

    def __init__(self, message: str, line: int):
        super().__init__(message)
        self.message = message
        self.line = line


def _is_digit(char: Optional[str]) -> bool:
    # str.isdigit() also accepts superscripts and other scripts' digits,
    # which float() rejects.
    return char is not None and char in "0123456789"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.start = 0
        self.pos = 0
        self.line = 1
        self.current_char = self.text[self.pos] if self.text else None
        self.errors: List[ScanError] = []

    def error(self, message: str = "") -> ScanError:
        return ScanError(message, self.line)

    def advance(self) -> str:
        """Consume the current character and return it."""
        char = self.current_char
        if char == "\n":
            self.line += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None
        return char

    def peek_char(self) -> Optional[str]:
        """Look at the character after the current one without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def match(self, expected: str) -> bool:
        """Consume the current character only if it is `expected`."""
        if self.current_char != expected:
            return False
        self.advance()
        return True

    def make_token(self, token_type: TokenType, literal=None) -> Token:
        return Token(token_type, self.text[self.start : self.pos], literal, self.line)

    def skip_comment(self) -> None:
        """Skip the rest of a `//` comment, leaving the newline in place."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

    def string(self) -> Optional[Token]:
        """Scan a string literal; the opening quote is already consumed."""
        # Strings may span lines; `advance` keeps the line counter in step.
        while self.current_char is not None and self.current_char != '"':
            self.advance()

        if self.current_char is None:
            self.errors.append(self.error("Unterminated string."))
            return None

        self.advance()  # closing quote
        value = self.text[self.start + 1 : self.pos - 1]
        return self.make_token(TokenType.STRING, value)

    def number(self) -> Token:
        """Scan a number literal; the first digit is already consumed."""
        while _is_digit(self.current_char):
            self.advance()

        # A fractional part needs at least one digit after the dot.
        if self.current_char == "." and _is_digit(self.peek_char()):
            self.advance()
            while _is_digit(self.current_char):
                self.advance()

        return self.make_token(TokenType.NUMBER, float(self.text[self.start : self.pos]))

    def identifier(self) -> Token:
        """Scan an identifier or keyword; the first letter is already consumed."""
        while self.current_char is not None and self.current_char.isalnum():
            self.advance()

        text = self.text[self.start : self.pos]
        return self.make_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            self.start = self.pos
            char = self.advance()

            match char:
                case " " | "\r" | "\t" | "\n":
                    continue
                case "(":
                    return self.make_token(TokenType.LPAREN)
                case ")":
                    return self.make_token(TokenType.RPAREN)
                case "{":
                    return self.make_token(TokenType.LBRACE)
                case "}":
                    return self.make_token(TokenType.RBRACE)
                case ",":
                    return self.make_token(TokenType.COMMA)
                case ".":
                    return self.make_token(TokenType.DOT)
                case "-":
                    return self.make_token(TokenType.MINUS)
                case "+":
                    return self.make_token(TokenType.PLUS)
                case ";":
                    return self.make_token(TokenType.SEMICOLON)
                case "*":
                    return self.make_token(TokenType.STAR)
                case "!":
                    return self.make_token(
                        TokenType.NEQ if self.match("=") else TokenType.NOT
                    )
                case "=":
                    return self.make_token(
                        TokenType.EQ if self.match("=") else TokenType.ASSIGN
                    )
                case "<":
                    return self.make_token(
                        TokenType.LTE if self.match("=") else TokenType.LT
                    )
                case ">":
                    return self.make_token(
                        TokenType.GTE if self.match("=") else TokenType.GT
                    )
                case "/":
                    if self.match("/"):
                        self.skip_comment()
                        continue
                    return self.make_token(TokenType.SLASH)
                case '"':
                    token = self.string()
                    if token is None:
                        continue
                    return token

            if _is_digit(char):
                return self.number()

            if char.isalpha():
                return self.identifier()

            self.errors.append(self.error(f"Unexpected character '{char}'."))

        self.start = self.pos
        return Token(TokenType.EOF, "", None, self.line)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens

"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, the fixed `KEYWORDS` table, and a small immutable `Token`
dataclass holding the kind, the exact source lexeme, the decoded literal
(strings and numbers only) and the source line. Tokens are the atomic units
produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional


class TokenType(Enum):
    # Parentheses and braces
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Punctuation
    COMMA = auto()
    DOT = auto()
    SEMICOLON = auto()

    # Arithmetic operators
    MINUS = auto()
    PLUS = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character operators
    NOT = auto()
    NEQ = auto()
    ASSIGN = auto()
    EQ = auto()
    GT = auto()
    GTE = auto()
    LT = auto()
    LTE = auto()

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Dict[str, TokenType] = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str = ""
    literal: Optional[str | float] = None
    line: int = 1

    def __repr__(self) -> str:
        if self.literal is None:
            return f"Token({self.type}, {self.lexeme!r}, line={self.line})"
        return f"Token({self.type}, {self.lexeme!r}, {self.literal!r}, line={self.line})"

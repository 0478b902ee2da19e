"""
Parser for Lox expressions.

Overview and approach:
- This parser is a small hand-written recursive-descent parser. Each grammar
    rule is one method, and each method calls the method for the next
    tighter-binding rule:

        expression  → equality
        equality    → comparison ( ( "!=" | "==" ) comparison )*
        comparison  → term ( ( ">" | ">=" | "<" | "<=" ) term )*
        term        → factor ( ( "-" | "+" ) factor )*
        factor      → unary ( ( "/" | "*" ) unary )*
        unary       → ( "!" | "-" ) unary | primary
        primary     → NUMBER | STRING | "true" | "false" | "nil"
                    | "(" expression ")"

Key points:
- Binary levels share `parse_binary()`: parse one operand at the next level,
    then keep folding `BinaryNode(left, op, right)` while the current token
    is one of this level's operators. Folding onto the previous result makes
    every binary operator left-associative: `1 - 2 - 3` is `(1 - 2) - 3`.
- `parse_unary()` calls itself before falling back to `parse_primary()`,
    so prefix operators nest to the right: `!-x` is `!(-x)`.
- The first error raises `ParseError` and aborts the whole parse; there is
    no synchronization or recovery.
- Parsing stops after one complete expression. Any tokens left over are not
    consumed and are not an error.

Examples:
    Parser(Lexer("1 + 2 * 3").tokenize()).parse_expression()
    -> BinaryNode(+, LiteralNode(1.0), BinaryNode(*, 2.0, 3.0))
"""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple
from tokens import Token, TokenType
from ast_nodes import *


class ParseError(SyntaxError):
    """The grammar could not match at `token`."""

    def __init__(self, message: str, token: Token):
        super().__init__(message)
        self.message = message
        self.token = token


class Parser:
    EQUALITY_OPERATORS: Tuple[TokenType, ...] = (TokenType.NEQ, TokenType.EQ)
    COMPARISON_OPERATORS: Tuple[TokenType, ...] = (
        TokenType.GT,
        TokenType.GTE,
        TokenType.LT,
        TokenType.LTE,
    )
    TERM_OPERATORS: Tuple[TokenType, ...] = (TokenType.MINUS, TokenType.PLUS)
    FACTOR_OPERATORS: Tuple[TokenType, ...] = (TokenType.SLASH, TokenType.STAR)
    UNARY_OPERATORS: Tuple[TokenType, ...] = (TokenType.NOT, TokenType.MINUS)

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0
        self.current = tokens[0] if tokens else Token(TokenType.EOF)

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.current)

    def advance(self) -> Token:
        """Consume the current token and return it. Never moves past EOF."""
        token = self.current
        if token.type == TokenType.EOF:
            return token

        self.pos += 1
        if self.pos < len(self.tokens):
            self.current = self.tokens[self.pos]
        else:
            self.current = Token(TokenType.EOF, "", None, token.line)
        return token

    def match(self, *token_types: TokenType) -> Optional[Token]:
        """Consume and return the current token if it has one of the given types."""
        if self.current.type in token_types:
            return self.advance()
        return None

    def expect(self, expected_type: TokenType, message: str) -> Token:
        """Expect and consume a token of the given type."""
        if self.current.type == expected_type:
            return self.advance()
        raise self.error(message)

    def parse_binary(
        self, operand: Callable[[], ASTNode], operators: Tuple[TokenType, ...]
    ) -> ASTNode:
        """Parse one left-associative level: operand ( op operand )*"""
        left = operand()

        while True:
            operator = self.match(*operators)
            if operator is None:
                break

            right = operand()
            left = BinaryNode(
                left=left, operator=operator, right=right, line=operator.line
            )

        return left

    def parse_expression(self) -> ASTNode:
        """Parse an expression."""
        return self.parse_equality()

    def parse_equality(self) -> ASTNode:
        return self.parse_binary(self.parse_comparison, self.EQUALITY_OPERATORS)

    def parse_comparison(self) -> ASTNode:
        return self.parse_binary(self.parse_term, self.COMPARISON_OPERATORS)

    def parse_term(self) -> ASTNode:
        return self.parse_binary(self.parse_factor, self.TERM_OPERATORS)

    def parse_factor(self) -> ASTNode:
        return self.parse_binary(self.parse_unary, self.FACTOR_OPERATORS)

    def parse_unary(self) -> ASTNode:
        """Parse prefix `!` and `-`, nesting to the right."""
        operator = self.match(*self.UNARY_OPERATORS)
        if operator is not None:
            right = self.parse_unary()
            return UnaryNode(operator=operator, right=right, line=operator.line)
        return self.parse_primary()

    def parse_primary(self) -> ASTNode:
        """Parse literals and parenthesized expressions."""
        token = self.current

        match token.type:
            case TokenType.NUMBER:
                self.advance()
                # The lexer only emits digit runs with an optional fraction,
                # so this conversion cannot fail.
                return LiteralNode(value=float(token.lexeme), line=token.line)

            case TokenType.STRING:
                self.advance()
                return LiteralNode(value=token.literal, line=token.line)

            case TokenType.TRUE:
                self.advance()
                return LiteralNode(value=True, line=token.line)

            case TokenType.FALSE:
                self.advance()
                return LiteralNode(value=False, line=token.line)

            case TokenType.NIL:
                self.advance()
                return LiteralNode(value=None, line=token.line)

            case TokenType.LPAREN:
                self.advance()  # Consume '('
                expr = self.parse_expression()
                self.expect(TokenType.RPAREN, "Expect ')' after expression.")
                return GroupingNode(expression=expr, line=token.line)

            case _:
                raise self.error("Expect expression.")

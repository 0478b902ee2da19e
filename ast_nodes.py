"""AST node definitions for Lox expressions.

This module defines the expression node dataclasses built by the parser and
walked by the interpreter and printers. The `NodeType` enum identifies node
kinds and is used by the JSON exporter.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`) and the source `line` the node came from.
- Nodes are frozen: a tree never changes once the parser has built it.
- Operator nodes keep the whole operator `Token` rather than just its
    symbol, so runtime errors can report the lexeme and line.
- Literal values use the same Python objects as runtime values: `float`,
    `str`, `True`/`False` and `None` for nil.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Union
from tokens import Token, TokenType


LiteralValue = Union[float, str, bool, None]


class NodeType(Enum):
    LITERAL = auto()
    GROUPING = auto()
    UNARY = auto()
    BINARY = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = 0


@dataclass(frozen=True)
class LiteralNode(ASTNode):
    type: NodeType = NodeType.LITERAL
    value: LiteralValue = None


@dataclass(frozen=True)
class GroupingNode(ASTNode):
    type: NodeType = NodeType.GROUPING
    expression: ASTNode = field(default_factory=lambda: LiteralNode())


@dataclass(frozen=True)
class UnaryNode(ASTNode):
    type: NodeType = NodeType.UNARY
    operator: Token = field(default_factory=lambda: Token(TokenType.EOF))
    right: ASTNode = field(default_factory=lambda: LiteralNode())


@dataclass(frozen=True)
class BinaryNode(ASTNode):
    type: NodeType = NodeType.BINARY
    left: ASTNode = field(default_factory=lambda: LiteralNode())
    operator: Token = field(default_factory=lambda: Token(TokenType.EOF))
    right: ASTNode = field(default_factory=lambda: LiteralNode())

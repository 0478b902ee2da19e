import dataclasses

import pytest

from main import parse_expression, scan
from ast_nodes import *
from tokens import TokenType


SOURCES = [
    "1 + 2 * 3",
    '"multi\nline" + "x"\n== "y"',
    "(\n1\n)\n-\n-2",
    "!nil // trailing comment\n",
    "@ # 1",
]


def _walk(node):
    yield node
    match node:
        case BinaryNode(left=left, right=right):
            yield from _walk(left)
            yield from _walk(right)
        case UnaryNode(right=right):
            yield from _walk(right)
        case GroupingNode(expression=expr):
            yield from _walk(expr)


@pytest.mark.parametrize("src", SOURCES)
def test_token_lines_never_decrease(src):
    lines = [t.line for t in scan(src)]
    assert lines == sorted(lines)


@pytest.mark.parametrize("src", SOURCES)
def test_exactly_one_eof_at_end(src):
    types = [t.type for t in scan(src)]
    assert types[-1] == TokenType.EOF
    assert types.count(TokenType.EOF) == 1


def test_parsed_nodes_are_well_formed():
    ast = parse_expression(scan("-(1 + 2) * 3 == !nil"))
    for node in _walk(ast):
        assert isinstance(node, ASTNode)
        if isinstance(node, (BinaryNode, UnaryNode)):
            assert node.operator.type != TokenType.EOF
            assert node.line == node.operator.line


def test_nodes_and_tokens_are_immutable():
    ast = parse_expression(scan("1 + 2"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        ast.left = LiteralNode(value=5.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ast.operator.lexeme = "-"

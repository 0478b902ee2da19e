"""Convert expression trees into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node: the node kind, its source
line and its key fields. Operator tokens are reduced to their lexeme and
token type name. Literal values map directly onto JSON (`nil` becomes
`null`); non-finite numbers are written as strings since JSON has no
spelling for them.
"""

import math
from typing import Any, Dict, Optional
from ast_nodes import *
from tokens import Token


def _token_to_json(token: Token) -> Dict[str, Any]:
    return {"type": token.type.name, "lexeme": token.lexeme, "line": token.line}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    if t == NodeType.LITERAL and isinstance(node, LiteralNode):
        value = node.value
        if isinstance(value, float) and not math.isfinite(value):
            value = str(value)
        return {"node_type": "Literal", "line": node.line, "value": value}
    if t == NodeType.GROUPING and isinstance(node, GroupingNode):
        return {
            "node_type": "Grouping",
            "line": node.line,
            "expression": ast_to_json(node.expression),
        }
    if t == NodeType.UNARY and isinstance(node, UnaryNode):
        return {
            "node_type": "Unary",
            "line": node.line,
            "operator": _token_to_json(node.operator),
            "right": ast_to_json(node.right),
        }
    if t == NodeType.BINARY and isinstance(node, BinaryNode):
        return {
            "node_type": "Binary",
            "line": node.line,
            "operator": _token_to_json(node.operator),
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
        }

    raise TypeError(f"Cannot convert {node!r} to JSON")

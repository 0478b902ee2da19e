"""Tree-walking evaluator for Lox expressions.

`evaluate(node)` walks an expression tree built by the parser and returns a
runtime value. Runtime values are plain Python objects:

    number -> float
    string -> str
    bool   -> bool
    nil    -> None

There is no environment: the core only evaluates single expressions.

Operators are dispatched with one structural `match` over
`(operator type, left value, right value)`. Only the pairings listed there
are defined; anything else, including every cross-type comparison, raises
`UnsupportedOperatorError` carrying the operator token.
"""

import math
from typing import Union
from ast_nodes import *
from tokens import Token, TokenType


Value = Union[float, str, bool, None]


class LoxRuntimeError(RuntimeError):
    """A runtime failure tied to the token where it happened."""

    def __init__(self, token: Token, message: str = ""):
        super().__init__(message)
        self.token = token
        self.message = message


class UnsupportedOperatorError(LoxRuntimeError):
    def __init__(self, token: Token, *operands: Value):
        kinds = " and ".join(type_name(v) for v in operands)
        message = f"Unsupported operand type(s) for '{token.lexeme}'"
        if kinds:
            message += f": {kinds}"
        super().__init__(token, message)
        self.operands = operands


def type_name(value: Value) -> str:
    match value:
        case bool():
            return "bool"
        case float():
            return "number"
        case str():
            return "string"
        case None:
            return "nil"
        case _:
            return type(value).__name__


def stringify(value: Value) -> str:
    """Render a runtime value the way Lox prints it."""
    match value:
        case None:
            return "nil"
        case bool():
            return "true" if value else "false"
        case float() if value == 0.0 and math.copysign(1.0, value) < 0:
            return "-0"
        case float() if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        case float():
            return repr(value)
        case _:
            return str(value)


def _divide(left: float, right: float) -> float:
    # Python raises ZeroDivisionError; Lox follows IEEE 754.
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _eval_unary(node: UnaryNode) -> Value:
    right = evaluate(node.right)

    match (node.operator.type, right):
        # Only strictly positive numbers count as true, so `!0` and `!-1`
        # are both true.
        case (TokenType.NOT, float()):
            return not right > 0.0
        case (TokenType.NOT, bool()):
            return not right
        case (TokenType.NOT, None):
            return False
        case (TokenType.NOT, _):
            return True
        case (TokenType.MINUS, float()):
            return -right
        case _:
            raise UnsupportedOperatorError(node.operator, right)


def _eval_binary(node: BinaryNode) -> Value:
    left = evaluate(node.left)
    right = evaluate(node.right)

    match (node.operator.type, left, right):
        case (TokenType.MINUS, float(), float()):
            return left - right
        case (TokenType.SLASH, float(), float()):
            return _divide(left, right)
        case (TokenType.STAR, float(), float()):
            return left * right
        case (TokenType.PLUS, float(), float()):
            return left + right
        case (TokenType.PLUS, str(), str()):
            return left + right
        case (TokenType.GT, float(), float()):
            return left > right
        case (TokenType.GTE, float(), float()):
            return left >= right
        case (TokenType.LT, float(), float()):
            return left < right
        case (TokenType.LTE, float(), float()):
            return left <= right
        case (TokenType.EQ, float(), float()) | (TokenType.EQ, str(), str()):
            return left == right
        case (TokenType.EQ, None, None):
            return True
        # `!=` answers the same question as `==`; see DESIGN.md.
        case (TokenType.NEQ, float(), float()) | (TokenType.NEQ, str(), str()):
            return left == right
        case _:
            raise UnsupportedOperatorError(node.operator, left, right)


def evaluate(node: ASTNode) -> Value:
    """Evaluate an expression tree to a runtime value."""
    match node:
        case LiteralNode(value=v):
            return v
        case GroupingNode(expression=expr):
            return evaluate(expr)
        case UnaryNode():
            return _eval_unary(node)
        case BinaryNode():
            return _eval_binary(node)
        case _:
            raise RuntimeError(f"Unhandled expression node type: {node}")

"""Pretty-printers for expression trees.

Provides two renderings:

- `PrettyPrinter.display(node)` gives the compact parenthesized prefix form,
    e.g. `1 + (2 * 3)` becomes `(+ 1 (group (* 2 3)))`. Operators print their
    original lexeme; numbers print like runtime values (`2`, `2.5`).
- `PrettyPrinter.print_ast(node, indent, prefix)` renders a readable
    multi-line tree with source lines, for debugging and the `--print-ast`
    driver flag.

Examples:
    PrettyPrinter.display(expr)
    PrettyPrinter.print_ast(expr)
"""

from __future__ import annotations
from ast_nodes import *
from ast_interpreter import stringify


class PrettyPrinter:
    @staticmethod
    def display(node: ASTNode) -> str:
        """Render an expression in parenthesized prefix form."""
        match node:
            case BinaryNode(left=left, operator=op, right=right):
                return (
                    f"({op.lexeme} {PrettyPrinter.display(left)} "
                    f"{PrettyPrinter.display(right)})"
                )
            case UnaryNode(operator=op, right=right):
                return f"({op.lexeme} {PrettyPrinter.display(right)})"
            case GroupingNode(expression=expr):
                return f"(group {PrettyPrinter.display(expr)})"
            case LiteralNode(value=v):
                return stringify(v)
            case _:
                raise TypeError(f"Cannot display {node!r}")

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        match node:
            case LiteralNode(value=str() as v, line=line):
                lines.append(f"{indent_str}{prefix}Literal({v!r}) [line {line}]")

            case LiteralNode(value=v, line=line):
                lines.append(f"{indent_str}{prefix}Literal({stringify(v)}) [line {line}]")

            case GroupingNode(expression=expr, line=line):
                lines.append(f"{indent_str}{prefix}Grouping [line {line}]")
                lines.append(PrettyPrinter.print_ast(expr, indent + 2))

            case UnaryNode(operator=op, right=right, line=line):
                lines.append(f"{indent_str}{prefix}Unary({op.lexeme}) [line {line}]")
                lines.append(PrettyPrinter.print_ast(right, indent + 2))

            case BinaryNode(left=left, operator=op, right=right, line=line):
                lines.append(f"{indent_str}{prefix}Binary({op.lexeme}) [line {line}]")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case _:
                lines.append(f"{indent_str}{prefix}{node}")

        return "\n".join(lines)

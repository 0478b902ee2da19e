from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from termcolor import colored

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser, ParseError
from ast_interpreter import LoxRuntimeError, Value, evaluate, stringify
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json

# sysexits.h codes, as used by the reference Lox implementations.
EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATAERR = 65
EXIT_NOINPUT = 66
EXIT_SOFTWARE = 70

ERROR = "red"
WARNING = "magenta"

# Parsing and evaluation recurse once per nesting level.
TOO_DEEP = "Expression nests too deeply."


def scan(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()


def parse_expression(tokens: List[Token]) -> ASTNode:
    """Parse tokens into an expression AST."""
    return Parser(tokens).parse_expression()


def run(text: str) -> Value:
    """Scan, parse and evaluate a single expression."""
    return evaluate(parse_expression(scan(text)))


def report(message: str, line: int, *, warning: bool = False) -> None:
    """Print a diagnostic followed by its `[line N]` marker."""
    color = WARNING if warning else ERROR
    label = "warning: " if warning else "error: "
    print(colored(label, color, attrs=["bold"]) + message)
    print(f"[line {line}]")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    dump_ast_path: Optional[str] = None,
) -> int:
    """Process a single expression: lex, parse, evaluate and print the result.

    Flags control which intermediate stages are printed. Returns a process
    exit code: 0 on success, 65 for a parse error, 70 for a runtime error.
    """
    lexer = Lexer(text)
    tokens = lexer.tokenize()
    for problem in lexer.errors:
        report(problem.message, problem.line, warning=True)

    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    try:
        ast = parse_expression(tokens)
    except ParseError as e:
        report(e.message, e.token.line)
        return EXIT_DATAERR
    except RecursionError:
        report(TOO_DEEP, tokens[0].line)
        return EXIT_DATAERR

    if print_ast:
        print("\nAST:")
        print(PrettyPrinter.print_ast(ast))

    if dump_ast_path:
        try:
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

    try:
        value = evaluate(ast)
    except LoxRuntimeError as e:
        report(e.message or "Runtime error.", e.token.line)
        return EXIT_SOFTWARE
    except RecursionError:
        report(TOO_DEEP, ast.line)
        return EXIT_SOFTWARE

    print(stringify(value))
    return EXIT_OK


def interactive_mode(print_tokens: bool = False, print_ast: bool = False) -> None:
    """Run an interactive REPL evaluating one expression per line."""
    print("Interactive Lox Mode (type 'quit' to exit)")

    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting...")
            break

        if text.lower() in ("quit", "exit", "q"):
            print("Goodbye!")
            break

        if not text:
            continue

        process_program(text, print_tokens=print_tokens, print_ast=print_ast)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Evaluate a Lox expression from a file or interactively from stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to evaluate"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )

    args = parser.parse_args(argv)

    if args.interactive and args.dump_ast:
        parser.error("--dump-ast cannot be used with --interactive")

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return EXIT_OK

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read file {args.file}: {e}")
            return EXIT_NOINPUT

        return process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            dump_ast_path=args.dump_ast,
        )

    parser.print_help()
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())

from lexer import Lexer
from parser import Parser
from ast_interpreter import evaluate


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an expression AST."""
    return Parser(Lexer(text).tokenize()).parse_expression()


def eval_text(text: str):
    """Convenience: lex+parse+evaluate a source text."""
    return evaluate(parse_text(text))

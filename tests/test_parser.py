import pytest

from tests.utils import lex, parse_text
from ast_nodes import *
from parser import Parser, ParseError
from pretty_printer import PrettyPrinter
from tokens import TokenType


@pytest.mark.parametrize(
    "src, expected",
    [
        ("1", "1"),
        ("1 + 2", "(+ 1 2)"),
        ("(1 + 2)", "(group (+ 1 2))"),
        ("1 - 2", "(- 1 2)"),
        ("1 * 2", "(* 1 2)"),
        ("1 / 2", "(/ 1 2)"),
        ("1 + 2 * 3", "(+ 1 (* 2 3))"),
        ("(1 + 2) * 3", "(* (group (+ 1 2)) 3)"),
        ("1 + 2 * 3 - 4", "(- (+ 1 (* 2 3)) 4)"),
        ("1 + (2 * 3) - 4", "(- (+ 1 (group (* 2 3))) 4)"),
        ("1 + (2 * 3) - (4 * 5)", "(- (+ 1 (group (* 2 3))) (group (* 4 5)))"),
    ],
)
def test_parser_precedence(src, expected):
    assert PrettyPrinter.display(parse_text(src)) == expected


def test_parser_binary_operators_are_left_associative():
    assert PrettyPrinter.display(parse_text("1 - 2 - 3")) == "(- (- 1 2) 3)"
    assert PrettyPrinter.display(parse_text("8 / 4 / 2")) == "(/ (/ 8 4) 2)"
    assert PrettyPrinter.display(parse_text("1 == 2 != 3")) == "(!= (== 1 2) 3)"


def test_parser_unary_operators_nest_to_the_right():
    assert PrettyPrinter.display(parse_text("--1")) == "(- (- 1))"
    assert PrettyPrinter.display(parse_text("!!true")) == "(! (! true))"
    assert PrettyPrinter.display(parse_text("!-1")) == "(! (- 1))"


def test_parser_unary_binds_tighter_than_factor():
    assert PrettyPrinter.display(parse_text("-2 * 3")) == "(* (- 2) 3)"


def test_parser_comparison_binds_tighter_than_equality():
    assert PrettyPrinter.display(parse_text("1 < 2 == true")) == "(== (< 1 2) true)"
    assert PrettyPrinter.display(parse_text("1 + 1 >= 2")) == "(>= (+ 1 1) 2)"


def test_parser_literals():
    assert parse_text("12.5") == LiteralNode(value=12.5, line=1)
    assert parse_text('"hi"').value == "hi"
    assert parse_text("true").value is True
    assert parse_text("false").value is False
    assert parse_text("nil").value is None


def test_parser_number_value_comes_from_lexeme():
    node = parse_text("42")
    assert isinstance(node, LiteralNode)
    assert isinstance(node.value, float)
    assert node.value == 42.0


def test_parser_keeps_operator_tokens():
    node = parse_text("1 +\n2")
    assert isinstance(node, BinaryNode)
    assert node.operator.type == TokenType.PLUS
    assert node.operator.lexeme == "+"
    assert node.operator.line == 1
    assert node.right.line == 2

    unary = parse_text("-3")
    assert isinstance(unary, UnaryNode)
    assert unary.operator.lexeme == "-"


def test_parser_grouping_node():
    node = parse_text("(1)")
    assert isinstance(node, GroupingNode)
    assert node.expression == LiteralNode(value=1.0, line=1)


def test_parser_missing_right_paren():
    with pytest.raises(ParseError) as excinfo:
        parse_text("(1 + 2")
    assert excinfo.value.message == "Expect ')' after expression."
    assert excinfo.value.token.type == TokenType.EOF


@pytest.mark.parametrize("src", ["", "+", "1 +", ")", "foo", "(", "* 2"])
def test_parser_rejects_missing_expression(src):
    with pytest.raises(ParseError) as excinfo:
        parse_text(src)
    assert excinfo.value.message == "Expect expression."


def test_parse_error_is_a_syntax_error_with_location():
    with pytest.raises(SyntaxError) as excinfo:
        parse_text("(1 +\n\n)")
    assert isinstance(excinfo.value, ParseError)
    assert excinfo.value.token.lexeme == ")"
    assert excinfo.value.token.line == 3
    assert str(excinfo.value) == "Expect expression."


def test_parser_stops_after_one_expression():
    parser = Parser(lex("1 2"))
    node = parser.parse_expression()
    assert node == LiteralNode(value=1.0, line=1)
    assert parser.current.lexeme == "2"


def test_parser_handles_token_list_without_eof():
    tokens = lex("1 +")[:-1]
    with pytest.raises(ParseError):
        Parser(tokens).parse_expression()

    with pytest.raises(ParseError):
        Parser([]).parse_expression()

import json

from tests.utils import parse_text
from ast_json import ast_to_json


def test_ast_to_json_binary_and_unary():
    data = ast_to_json(parse_text("-(1) * nil"))
    assert data == {
        "node_type": "Binary",
        "line": 1,
        "operator": {"type": "STAR", "lexeme": "*", "line": 1},
        "left": {
            "node_type": "Unary",
            "line": 1,
            "operator": {"type": "MINUS", "lexeme": "-", "line": 1},
            "right": {
                "node_type": "Grouping",
                "line": 1,
                "expression": {"node_type": "Literal", "line": 1, "value": 1.0},
            },
        },
        "right": {"node_type": "Literal", "line": 1, "value": None},
    }


def test_ast_to_json_is_serializable():
    data = ast_to_json(parse_text('"a" + "b" == "ab"'))
    text = json.dumps(data)
    assert json.loads(text) == data


def test_ast_to_json_none():
    assert ast_to_json(None) is None

# -*- coding: utf-8 -*-

import copy

import pytest

from py_sdl.lang import ast as _ast


def _field(name, arg_value):
    return _ast.FieldDefinition(
        name=_ast.Name(value=name),
        type=_ast.NamedType(name=_ast.Name(value="String")),
        arguments=[
            _ast.InputValueDefinition(
                name=_ast.Name(value="arg"),
                type=_ast.NamedType(name=_ast.Name(value="String")),
                default_value=_ast.StringValue(value=arg_value),
            )
        ],
    )


@pytest.mark.parametrize(
    "rhs,lhs,eq",
    [
        (
            _ast.Name("foo", " ... ", (0, 1)),
            _ast.Name("foo", "  ", (0, 1)),
            True,
        ),
        (
            _ast.Name("foo", " ... ", (0, 1)),
            _ast.Name("foo", "  ", (0, 2)),
            False,
        ),
        (
            _ast.Name("bar", " ... ", (0, 1)),
            _ast.Name("foo", "  ", (0, 1)),
            False,
        ),
        (
            _field("field", "Has a \u0A0A multi-byte character."),
            _field("field", "Has a \u0A0A multi-byte character."),
            True,
        ),
        (
            _field("field", "Has a \u0A0A multi-byte character."),
            _field("field2", "Has a \u0A0A multi-byte character."),
            False,
        ),
        (
            _field("field", "Has a \u0A0A multi-byte character."),
            _field("field", "Has a \u0A0A multi-bytes character."),
            False,
        ),
        (_ast.IntValue("1"), _ast.FloatValue("1"), False),
        (
            _ast.StringValue("foo", block=True),
            _ast.StringValue("foo", block=False),
            False,
        ),
        (_ast.Comment("foo"), _ast.StringValue("foo"), False),
    ],
)
def test_eq(rhs, lhs, eq):
    if eq:
        assert rhs == lhs
    else:
        assert rhs != lhs


@pytest.mark.parametrize(
    "value,expected",
    [
        (
            _ast.Name("foo", " ... ", (0, 1)),
            {"__kind__": "Name", "loc": (0, 1), "value": "foo"},
        ),
        (
            _ast.Directive(
                name=_ast.Name(value="dir"),
                arguments=[
                    _ast.Argument(
                        name=_ast.Name(value="arg"),
                        value=_ast.StringValue(
                            value="Has a \u0A0A multi-bytes character."
                        ),
                    )
                ],
            ),
            {
                "__kind__": "Directive",
                "arguments": [
                    {
                        "__kind__": "Argument",
                        "loc": None,
                        "name": {
                            "__kind__": "Name",
                            "loc": None,
                            "value": "arg",
                        },
                        "value": {
                            "__kind__": "StringValue",
                            "block": False,
                            "loc": None,
                            "value": "Has a \u0A0A multi-bytes character.",
                        },
                    }
                ],
                "loc": None,
                "name": {"__kind__": "Name", "loc": None, "value": "dir"},
            },
        ),
        (
            _ast.ScalarTypeDefinition(
                name=_ast.Name(value="Date"),
                description=_ast.Comment(value="A date"),
            ),
            {
                "__kind__": "ScalarTypeDefinition",
                "description": {
                    "__kind__": "Comment",
                    "loc": None,
                    "value": "A date",
                },
                "directives": [],
                "loc": None,
                "name": {"__kind__": "Name", "loc": None, "value": "Date"},
            },
        ),
    ],
)
def test_to_dict(value, expected):
    assert expected == value.to_dict()


def test_object_value_keys_preserve_order():
    node = _ast.ObjectValue(
        fields=[
            _ast.ObjectField(name=_ast.Name(value=k), value=_ast.IntValue("1"))
            for k in ("b", "a", "c")
        ]
    )
    assert node.keys == ["b", "a", "c"]


def test_copy_is_shallow():
    node = _field("field", "foo")
    copied = copy.copy(node)
    assert copied == node
    assert copied is not node
    assert copied.arguments is node.arguments


def test_deepcopy():
    node = _field("field", "foo")
    copied = node.deepcopy()
    assert copied == node
    assert copied.arguments is not node.arguments
    assert copied.arguments[0] == node.arguments[0]
    assert copied.arguments[0] is not node.arguments[0]


def test_null_value_copy():
    assert copy.deepcopy(_ast.NullValue(loc=(0, 4))) == _ast.NullValue(
        loc=(0, 4)
    )


def test_directive_definitions_have_no_directives():
    assert _ast.DirectiveDefinition(name=_ast.Name(value="foo")).directives == []

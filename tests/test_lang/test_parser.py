# -*- coding: utf-8 -*-

import pytest

from py_sdl.exc import (
    DuplicateObjectField,
    ParseError,
    UnexpectedEOF,
    UnexpectedToken,
)
from py_sdl.lang import ast as _ast
from py_sdl.lang.parser import parse, parse_type, parse_value


# Comparing dicts will result in better assertion diffs from pytest.
def assert_node_equal(ref, expected):
    assert _ast._ast_to_json(expected) == _ast._ast_to_json(ref)


# A few syntactic sugar helpers
def _name(loc, value):
    return _ast.Name(loc=loc, value=value)


def _type(loc, value):
    return _ast.NamedType(loc=loc, name=_ast.Name(loc=loc, value=value))


def _field(loc, name, type_, args=None):
    return _ast.FieldDefinition(
        loc=loc, name=name, type=type_, arguments=args or [], directives=[]
    )


def _input(loc, name, type_, default_value=None):
    return _ast.InputValueDefinition(
        loc=loc,
        name=name,
        type=type_,
        default_value=default_value,
        directives=[],
    )


def _doc(loc, defs):
    return _ast.Document(loc=loc, definitions=defs)


def _parse_one(body, **kwargs):
    doc = parse(body, no_location=True, **kwargs)
    assert len(doc.definitions) == 1
    return doc.definitions[0]


def test_it_parses_simple_type():
    body = """
type Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 31),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 31),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    directives=[],
                    fields=[
                        _field(
                            (16, 29),
                            _name((16, 21), "world"),
                            _type((23, 29), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_type_with_description_string():
    body = """
"Description"
type Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 45),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 45),
                    name=_name((20, 25), "Hello"),
                    interfaces=[],
                    directives=[],
                    description=_ast.StringValue(
                        loc=(1, 14), value="Description"
                    ),
                    fields=[
                        _field(
                            (30, 43),
                            _name((30, 35), "world"),
                            _type((37, 43), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_type_with_description_multi_line_string():
    body = '''
"""
Description
"""
# Even with comments between them
type Hello {
  world: String
}'''
    assert_node_equal(
        parse(body),
        _doc(
            (1, 85),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 85),
                    name=_name((60, 65), "Hello"),
                    interfaces=[],
                    directives=[],
                    description=_ast.StringValue(
                        loc=(1, 20), value="Description", block=True
                    ),
                    fields=[
                        _field(
                            (70, 83),
                            _name((70, 75), "world"),
                            _type((77, 83), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_extension():
    body = """
extend type Hello {
  world: String
}
"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 39),
            [
                _ast.ObjectTypeExtension(
                    loc=(1, 38),
                    name=_name((13, 18), "Hello"),
                    interfaces=[],
                    directives=[],
                    fields=[
                        _field(
                            (23, 36),
                            _name((23, 28), "world"),
                            _type((30, 36), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_extension_without_fields():
    assert_node_equal(
        parse("extend type Hello implements Greeting"),
        _doc(
            (0, 37),
            [
                _ast.ObjectTypeExtension(
                    loc=(0, 37),
                    name=_name((12, 17), "Hello"),
                    interfaces=[_type((29, 37), "Greeting")],
                    fields=[],
                    directives=[],
                )
            ],
        ),
    )


def test_it_parses_extension_without_fields_followed_by_extension():
    body = """
      extend type Hello implements Greeting

      extend type Hello implements SecondGreeting
    """
    assert_node_equal(
        parse(body),
        _doc(
            (7, 100),
            [
                _ast.ObjectTypeExtension(
                    loc=(7, 44),
                    name=_name((19, 24), "Hello"),
                    interfaces=[_type((36, 44), "Greeting")],
                    fields=[],
                    directives=[],
                ),
                _ast.ObjectTypeExtension(
                    loc=(52, 95),
                    name=_name((64, 69), "Hello"),
                    interfaces=[_type((81, 95), "SecondGreeting")],
                    fields=[],
                    directives=[],
                ),
            ],
        ),
    )


def test_it_parses_simple_non_null_type():
    body = """
type Hello {
  world: String!
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 32),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 32),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    directives=[],
                    fields=[
                        _field(
                            (16, 30),
                            _name((16, 21), "world"),
                            _ast.NonNullType(
                                loc=(23, 30), type=_type((23, 29), "String")
                            ),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_nested_type_modifiers():
    assert_node_equal(
        parse_type("[String!]!", no_location=True),
        _ast.NonNullType(
            type=_ast.ListType(
                type=_ast.NonNullType(
                    type=_ast.NamedType(name=_ast.Name(value="String"))
                )
            )
        ),
    )


def test_it_parses_simple_type_inheriting_interface():
    body = "type Hello implements World { field: String }"
    assert_node_equal(
        parse(body),
        _doc(
            (0, 45),
            [
                _ast.ObjectTypeDefinition(
                    loc=(0, 45),
                    name=_name((5, 10), "Hello"),
                    interfaces=[_type((22, 27), "World")],
                    directives=[],
                    fields=[
                        _field(
                            (30, 43),
                            _name((30, 35), "field"),
                            _type((37, 43), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_type_inheriting_multiple_interfaces():
    body = "type Hello implements Wo & rld { field: String }"
    assert_node_equal(
        parse(body),
        _doc(
            (0, 48),
            [
                _ast.ObjectTypeDefinition(
                    loc=(0, 48),
                    name=_name((5, 10), "Hello"),
                    interfaces=[_type((22, 24), "Wo"), _type((27, 30), "rld")],
                    directives=[],
                    fields=[
                        _field(
                            (33, 46),
                            _name((33, 38), "field"),
                            _type((40, 46), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_type_inheriting_multiple_interfaces_with_leading_ampersand():  # noqa: E501
    body = "type Hello implements & Wo & rld { field: String }"
    assert_node_equal(
        parse(body),
        _doc(
            (0, 50),
            [
                _ast.ObjectTypeDefinition(
                    loc=(0, 50),
                    name=_name((5, 10), "Hello"),
                    interfaces=[_type((24, 26), "Wo"), _type((29, 32), "rld")],
                    directives=[],
                    fields=[
                        _field(
                            (35, 48),
                            _name((35, 40), "field"),
                            _type((42, 48), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_interface_implementing_interfaces():
    assert_node_equal(
        _parse_one("interface A implements B & C { f: Int }"),
        _ast.InterfaceTypeDefinition(
            name=_name(None, "A"),
            interfaces=[_type(None, "B"), _type(None, "C")],
            fields=[_field(None, _name(None, "f"), _type(None, "Int"))],
        ),
    )


def test_it_parses_single_value_enum():
    assert_node_equal(
        parse("enum Hello { WORLD }"),
        _doc(
            (0, 20),
            [
                _ast.EnumTypeDefinition(
                    loc=(0, 20),
                    name=_name((5, 10), "Hello"),
                    directives=[],
                    values=[
                        _ast.EnumValueDefinition(
                            loc=(13, 18), name=_name((13, 18), "WORLD")
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_double_value_enum():
    assert_node_equal(
        parse("enum Hello { WO, RLD }"),
        _doc(
            (0, 22),
            [
                _ast.EnumTypeDefinition(
                    loc=(0, 22),
                    name=_name((5, 10), "Hello"),
                    directives=[],
                    values=[
                        _ast.EnumValueDefinition(
                            loc=(13, 15), name=_name((13, 15), "WO")
                        ),
                        _ast.EnumValueDefinition(
                            loc=(17, 20), name=_name((17, 20), "RLD")
                        ),
                    ],
                )
            ],
        ),
    )


@pytest.mark.parametrize("value", ["true", "false", "null"])
def test_enum_values_cannot_be_reserved_names(value):
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("enum Hello { %s }" % value)
    assert exc_info.value.position == 13
    assert exc_info.value.message == (
        'Name "%s" is reserved and cannot be used as an enum value' % value
    )


def test_it_parses_simple_field_with_arg_with_default_value():
    body = """
type Hello {
  world(flag: Boolean = true): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 53),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 53),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    directives=[],
                    fields=[
                        _field(
                            (16, 51),
                            _name((16, 21), "world"),
                            _type((45, 51), "String"),
                            [
                                _input(
                                    (22, 42),
                                    _name((22, 26), "flag"),
                                    _type((28, 35), "Boolean"),
                                    _ast.BooleanValue(loc=(38, 42), value=True),
                                )
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_simple_field_with_two_args():
    body = """
type Hello {
  world(argOne: Boolean, argTwo: Int): String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 61),
            [
                _ast.ObjectTypeDefinition(
                    loc=(1, 61),
                    name=_name((6, 11), "Hello"),
                    interfaces=[],
                    directives=[],
                    fields=[
                        _field(
                            (16, 59),
                            _name((16, 21), "world"),
                            _type((53, 59), "String"),
                            [
                                _input(
                                    (22, 37),
                                    _name((22, 28), "argOne"),
                                    _type((30, 37), "Boolean"),
                                ),
                                _input(
                                    (39, 50),
                                    _name((39, 45), "argTwo"),
                                    _type((47, 50), "Int"),
                                ),
                            ],
                        )
                    ],
                )
            ],
        ),
    )


def test_it_parses_union_with_two_types_and_leading_pipe():
    assert_node_equal(
        parse("union Hello = | Wo | Rld"),
        _doc(
            (0, 24),
            [
                _ast.UnionTypeDefinition(
                    loc=(0, 24),
                    name=_name((6, 11), "Hello"),
                    directives=[],
                    types=[_type((16, 18), "Wo"), _type((21, 24), "Rld")],
                )
            ],
        ),
    )


@pytest.mark.parametrize(
    "body, position",
    [("union Hello = |", 15), ("union Hello = | Wo | Rld |", 26)],
)
def test_union_fails_with_trailing_pipe(body, position):
    with pytest.raises(UnexpectedEOF) as exc_info:
        parse(body)
    assert exc_info.value.position == position
    assert exc_info.value.message == "Unexpected <EOF>"
    assert exc_info.value.expected == "Name"


@pytest.mark.parametrize(
    "body, position",
    [("union Hello = || Wo | Rld", 15), ("union Hello = Wo || Rld", 18)],
)
def test_union_fails_with_double_pipe(body, position):
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(body)
    assert exc_info.value.position == position
    assert exc_info.value.message == 'Expected Name but found "|"'


def test_it_parses_scalar():
    assert_node_equal(
        parse("scalar Hello"),
        _doc(
            (0, 12),
            [
                _ast.ScalarTypeDefinition(
                    loc=(0, 12), name=_name((7, 12), "Hello"), directives=[]
                )
            ],
        ),
    )


def test_it_parses_simple_input_object():
    body = """
input Hello {
  world: String
}"""
    assert_node_equal(
        parse(body),
        _doc(
            (1, 32),
            [
                _ast.InputObjectTypeDefinition(
                    loc=(1, 32),
                    name=_name((7, 12), "Hello"),
                    directives=[],
                    fields=[
                        _input(
                            (17, 30),
                            _name((17, 22), "world"),
                            _type((24, 30), "String"),
                        )
                    ],
                )
            ],
        ),
    )


def test_simple_input_object_with_args_should_fail():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(
            """
      input Hello {
        world(foo: Int): String
      }"""
        )

    assert exc_info.value.position == 34
    assert exc_info.value.message == 'Expected ":" but found "("'


def test_it_parses_schema_definition():
    assert_node_equal(
        _parse_one("schema @dir { query: Q mutation: M }"),
        _ast.SchemaDefinition(
            directives=[_ast.Directive(name=_name(None, "dir"))],
            operation_types=[
                _ast.OperationTypeDefinition(
                    operation="query", type=_type(None, "Q")
                ),
                _ast.OperationTypeDefinition(
                    operation="mutation", type=_type(None, "M")
                ),
            ],
        ),
    )


def test_schema_definition_rejects_unknown_operation():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("schema { foo: Q }")
    assert exc_info.value.position == 9
    assert exc_info.value.message == (
        'Expected "query", "mutation" or "subscription" but found "foo"'
    )


def test_it_parses_directive_definition():
    assert_node_equal(
        _parse_one('"Doc" directive @foo(a: Int = 1) on | FIELD | OBJECT'),
        _ast.DirectiveDefinition(
            description=_ast.StringValue(value="Doc"),
            name=_name(None, "foo"),
            arguments=[
                _input(
                    None,
                    _name(None, "a"),
                    _type(None, "Int"),
                    _ast.IntValue(value="1"),
                )
            ],
            locations=[_name(None, "FIELD"), _name(None, "OBJECT")],
        ),
    )


def test_it_parses_repeatable_directive_definition():
    node = _parse_one("directive @foo repeatable on FIELD")
    assert node.repeatable
    assert not _parse_one("directive @foo on FIELD").repeatable


def test_directive_with_incorrect_locations_fails():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(
            """
      directive @foo on FIELD | INCORRECT_LOCATION"""
        )

    assert exc_info.value.position == 33
    assert exc_info.value.message.startswith(
        "Unknown directive location INCORRECT_LOCATION"
    )


def test_directive_location_errors_suggest_locations():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("directive @foo on FEILD")
    assert exc_info.value.message == (
        'Unknown directive location FEILD, did you mean "FIELD"?'
    )


def test_unknown_definition_suggests_keywords():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("tpye Foo")
    assert exc_info.value.position == 0
    assert exc_info.value.message == 'Unexpected "tpye", did you mean "type"?'


def test_unknown_extension_suggests_keywords():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("extend tpye Foo @dir")
    assert exc_info.value.position == 7
    assert exc_info.value.message == 'Unexpected "tpye", did you mean "type"?'


def test_it_parses_all_extension_kinds():
    doc = parse(
        """
        extend schema @a
        extend scalar A @a
        extend type A implements B
        extend interface A @a
        extend union A = B
        extend enum A { B }
        extend input A { b: Int }
        """,
        no_location=True,
    )
    assert [d.__class__ for d in doc.definitions] == [
        _ast.SchemaExtension,
        _ast.ScalarTypeExtension,
        _ast.ObjectTypeExtension,
        _ast.InterfaceTypeExtension,
        _ast.UnionTypeExtension,
        _ast.EnumTypeExtension,
        _ast.InputObjectTypeExtension,
    ]


def test_extension_without_anything_throws():
    with pytest.raises(UnexpectedEOF) as exc_info:
        parse("extend type Hello")
    assert exc_info.value.position == 17
    assert exc_info.value.message == "Unexpected <EOF>"


@pytest.mark.parametrize(
    "body, expected",
    [
        ("extend schema", '"@" or "{"'),
        ("extend scalar Foo", '"@"'),
        ("extend interface Foo", '"implements", "@" or "{"'),
        ("extend union Foo", '"@" or "="'),
        ("extend enum Foo", '"@" or "{"'),
        ("extend input Foo", '"@" or "{"'),
    ],
)
def test_empty_extensions_throw(body, expected):
    with pytest.raises(UnexpectedEOF) as exc_info:
        parse(body)
    assert exc_info.value.position == len(body)
    assert exc_info.value.expected == expected


def test_empty_extension_followed_by_definition_throws():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("extend union Foo\nscalar Bar")
    assert exc_info.value.position == 17
    assert exc_info.value.message == 'Expected "@" or "=" but found "scalar"'


def test_extension_do_not_include_descriptions_0():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(
            """
      "Description"
      extend type Hello {
        world: String
      }"""
        )
    assert exc_info.value.position == 27
    assert exc_info.value.message == "Extensions cannot have a description"


def test_extension_do_not_include_descriptions_1():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse(
            """
      extend "Description" type Hello {
        world: String
      }"""
        )
    assert exc_info.value.position == 14
    assert exc_info.value.message == (
        'Expected an extension keyword but found "Description"'
    )


def test_errors_point_at_the_offending_token():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("type Foo { bar: }")
    err = exc_info.value
    assert err.position == 16
    assert err.loc == (1, 17)
    assert err.expected == "Name"
    assert err.found == "}"
    assert err.to_dict() == {
        "kind": "UnexpectedToken",
        "message": 'Expected Name but found "}"',
        "locations": [{"line": 1, "column": 17}],
        "expected": "Name",
        "found": "}",
    }


def test_variables_are_not_allowed():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("scalar Foo @dir(arg: $var)")
    assert exc_info.value.position == 21
    assert exc_info.value.message == (
        "Variables are not allowed in schema definitions"
    )


def test_duplicate_object_fields_are_rejected():
    with pytest.raises(DuplicateObjectField) as exc_info:
        parse("scalar Foo @dir(arg: {a: 1, a: 2})")
    assert exc_info.value.position == 28
    assert exc_info.value.message == 'Duplicate field "a" in object value'
    assert isinstance(exc_info.value, ParseError)


def test_object_values_preserve_key_order():
    value = parse_value("{c: 1, a: 2, b: 3}", no_location=True)
    assert value.keys == ["c", "a", "b"]


def test_it_parses_values():
    assert_node_equal(
        parse_value(
            '[1, -2.5e3, "s", """b""", true, null, ENUM, [], {a: {}}]',
            no_location=True,
        ),
        _ast.ListValue(
            values=[
                _ast.IntValue(value="1"),
                _ast.FloatValue(value="-2.5e3"),
                _ast.StringValue(value="s"),
                _ast.StringValue(value="b", block=True),
                _ast.BooleanValue(value=True),
                _ast.NullValue(),
                _ast.EnumValue(value="ENUM"),
                _ast.ListValue(values=[]),
                _ast.ObjectValue(
                    fields=[
                        _ast.ObjectField(
                            name=_ast.Name(value="a"),
                            value=_ast.ObjectValue(fields=[]),
                        )
                    ]
                ),
            ]
        ),
    )


def test_parse_value_expects_a_single_value():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse_value("1 2")
    assert exc_info.value.position == 2
    assert exc_info.value.message == 'Expected EOF but found "2"'


@pytest.mark.parametrize("body", ["", "   \n\t", "# Only a comment\n", ",,,"])
def test_it_parses_empty_documents(body):
    assert parse(body, no_location=True).definitions == []


def test_trailing_content_after_definition_fails():
    with pytest.raises(UnexpectedToken) as exc_info:
        parse("scalar Foo }")
    assert exc_info.value.position == 11
    assert exc_info.value.message == 'Expected a definition but found "}"'


class TestCommentDescriptions:
    def test_comment_block_directly_above_is_a_description(self):
        node = _parse_one("# Description of Foo\n# Second line\nscalar Foo")
        assert node.description == _ast.Comment(
            value="Description of Foo\nSecond line"
        )

    def test_comment_location(self):
        node = parse("# A\n# B\nscalar Foo").definitions[0]
        assert node.description.loc == (0, 7)

    def test_only_one_leading_space_is_stripped(self):
        node = _parse_one("#a\n#   b\n#\nscalar Foo")
        assert node.description == _ast.Comment(value="a\n  b\n")

    def test_blank_line_detaches_comments(self):
        assert _parse_one("# Header\n\nscalar Foo").description is None

    def test_blank_line_inside_block_keeps_last_run(self):
        node = _parse_one("# Header\n\n# Foo\nscalar Foo")
        assert node.description == _ast.Comment(value="Foo")

    def test_trailing_comments_are_discarded(self):
        doc = parse(
            """
type Foo {
  # Description of bar
  bar: Int # Discarded
  baz: Int
}""",
            no_location=True,
        )
        bar, baz = doc.definitions[0].fields
        assert bar.description == _ast.Comment(value="Description of bar")
        assert baz.description is None

    def test_trailing_comment_on_previous_definition(self):
        doc = parse("scalar A # trailing\nscalar B", no_location=True)
        assert doc.definitions[1].description is None

    def test_string_description_wins(self):
        node = _parse_one('"Desc"\n# Comment\nscalar Foo')
        assert node.description == _ast.StringValue(value="Desc")

    def test_arguments_and_enum_values(self):
        doc = parse(
            """
type Foo {
  bar(
    # Argument
    a: Int
  ): Int
}

enum Bar {
  # Value
  A
}""",
            no_location=True,
        )
        arg = doc.definitions[0].fields[0].arguments[0]
        value = doc.definitions[1].values[0]
        assert arg.description == _ast.Comment(value="Argument")
        assert value.description == _ast.Comment(value="Value")

    def test_extensions(self):
        node = _parse_one("# Extension\nextend type Foo @dir")
        assert node.description == _ast.Comment(value="Extension")

    def test_attach_comments_false(self):
        node = _parse_one("# Description\nscalar Foo", attach_comments=False)
        assert node.description is None


def test_it_parses_kitchen_sink(fixture_file):
    doc = parse(fixture_file("schema-kitchen-sink.graphql"), no_location=True)
    assert len(doc.definitions) == 38
    # The header is separated by a blank line.
    assert doc.definitions[0].description is None


def test_source_is_attached_to_nodes():
    body = "scalar Foo"
    doc = parse(body)
    assert doc.source == body
    assert doc.definitions[0].name.source == body

# -*- coding: utf-8 -*-

import json
import logging
from typing import Any, Iterable, List, Optional, Sequence, Union

from .._string_utils import LINE_SEPARATOR, parse_block_string
from .._utils import classdispatch
from . import ast as _ast

logger = logging.getLogger(__name__)


class ASTPrinter:
    """ String formatter for ast node.

    Layout decisions only ever depend on the node being printed and the
    printer options (widths are measured without the leading indentation)
    so printing a re-parsed output yields the exact same text.

    Args:
        indent (Union[str, int]): Indent character or number of spaces

        max_line_width (int):
            Argument lists (of directives, fields and directive definitions)
            whose single line form is wider than this are printed one
            argument per line. Union members are printed one per line when
            the union doesn't fit.

        max_inline_items (int):
            List and object literals with at most that many items, none of
            which is itself a list or object, are printed on a single line.
            Others are printed one item per line.

        include_descriptions (bool):
            If ``True`` include descriptions in the output.

        use_legacy_comment_descriptions (bool):
            Print all descriptions as ``#`` comments. By default descriptions
            are printed in the form they were parsed in.

        break_type_directives (bool):
            Print directives applied to schema and type definitions each on
            their own indented line before the body of the definition.
    """

    __slots__ = (
        "indent",
        "max_line_width",
        "max_inline_items",
        "include_descriptions",
        "use_legacy_comment_descriptions",
        "break_type_directives",
    )

    def __init__(
        self,
        indent: Union[str, int] = 2,
        max_line_width: int = 80,
        max_inline_items: int = 3,
        include_descriptions: bool = True,
        use_legacy_comment_descriptions: bool = False,
        break_type_directives: bool = False,
    ):
        self.max_line_width = max_line_width
        self.max_inline_items = max_inline_items
        self.include_descriptions = include_descriptions
        self.use_legacy_comment_descriptions = use_legacy_comment_descriptions
        self.break_type_directives = break_type_directives
        if isinstance(indent, int):
            self.indent = indent * " "
        else:
            self.indent = indent

    def __call__(self, node: Optional[_ast.Node]) -> str:  # noqa: C901
        """ Converts an AST into a string, using a set of reasonable
        formatting rules.

        Args:
            node (py_sdl.lang.ast.Node): Input node

        Returns:
            str: Formatted value for the provided node
        """
        if node is None:
            return ""

        return classdispatch(  # type: ignore
            node,
            {
                _ast.Name: self.print_name,
                _ast.Document: self.print_document,
                _ast.Argument: self.print_argument,
                _ast.IntValue: self.print_int_value,
                _ast.FloatValue: self.print_float_value,
                _ast.EnumValue: self.print_enum_value,
                _ast.BooleanValue: self.print_boolean_value,
                _ast.NullValue: self.print_null_value,
                _ast.StringValue: self.print_string_value,
                _ast.ListValue: self.print_list_value,
                _ast.ObjectValue: self.print_object_value,
                _ast.ObjectField: self.print_object_field,
                _ast.Directive: self.print_directive,
                _ast.Comment: self.print_comment,
                _ast.NamedType: self.print_named_type,
                _ast.ListType: self.print_list_type,
                _ast.NonNullType: self.print_non_null_type,
                _ast.SchemaDefinition: self.print_schema_definition,
                _ast.SchemaExtension: self.print_schema_extension,
                _ast.OperationTypeDefinition: self.print_operation_type_definition,
                _ast.ScalarTypeDefinition: self.print_scalar_type_definition,
                _ast.ScalarTypeExtension: self.print_scalar_type_extension,
                _ast.ObjectTypeDefinition: self.print_object_type_definition,
                _ast.ObjectTypeExtension: self.print_object_type_extension,
                _ast.FieldDefinition: self.print_field_definition,
                _ast.InputValueDefinition: self.print_input_value_definition,
                _ast.InterfaceTypeDefinition: self.print_interface_type_definition,
                _ast.InterfaceTypeExtension: self.print_interface_type_extension,
                _ast.UnionTypeDefinition: self.print_union_type_definition,
                _ast.UnionTypeExtension: self.print_union_type_extension,
                _ast.EnumTypeDefinition: self.print_enum_type_definition,
                _ast.EnumTypeExtension: self.print_enum_type_extension,
                _ast.EnumValueDefinition: self.print_enum_value_definition,
                _ast.InputObjectTypeDefinition: self.print_input_object_type_definition,
                _ast.InputObjectTypeExtension: self.print_input_object_type_extension,
                _ast.DirectiveDefinition: self.print_directive_definition,
            },
        )

    def print_name(self, node: _ast.Name) -> str:
        return node.value

    def print_document(self, node: _ast.Document) -> str:
        return _wrap("", _join(map(self, node.definitions), "\n\n"), "\n")

    def print_argument(self, node: _ast.Argument) -> str:
        return "%s: %s" % (node.name.value, self(node.value))

    def print_arguments(self, node: _ast.Directive) -> str:
        args = [self.print_argument(arg) for arg in node.arguments]
        return self._argument_list(args, "@" + node.name.value)

    def print_int_value(self, node: _ast.IntValue) -> str:
        return node.value

    def print_float_value(self, node: _ast.FloatValue) -> str:
        return node.value

    def print_enum_value(self, node: _ast.EnumValue) -> str:
        return node.value

    def print_boolean_value(self, node: _ast.BooleanValue) -> str:
        return str(node.value).lower()

    def print_null_value(self, _node: _ast.NullValue) -> str:
        return "null"

    def print_string_value(self, node: _ast.StringValue) -> str:
        if node.block:
            return _block_string(node.value)
        return json.dumps(node.value, ensure_ascii=False)

    def print_list_value(self, node: _ast.ListValue) -> str:
        values = [self(value) for value in node.values]
        if self._fits_inline(node.values, values):
            return "[%s]" % ", ".join(values)
        return "[\n%s\n]" % _join(
            (_indent(value, self.indent) for value in values), "\n"
        )

    def print_object_value(self, node: _ast.ObjectValue) -> str:
        fields = [self.print_object_field(field) for field in node.fields]
        if self._fits_inline([field.value for field in node.fields], fields):
            return "{%s}" % ", ".join(fields)
        return "{\n%s\n}" % _join(
            (_indent(field, self.indent) for field in fields), "\n"
        )

    def _fits_inline(
        self, values: Sequence[_ast.Value], printed: Sequence[str]
    ) -> bool:
        return (
            len(values) <= self.max_inline_items
            and not any(
                isinstance(value, (_ast.ListValue, _ast.ObjectValue))
                for value in values
            )
            and not any("\n" in entry for entry in printed)
        )

    def print_object_field(self, node: _ast.ObjectField) -> str:
        return "%s: %s" % (node.name.value, self(node.value))

    def print_directives(self, node: _ast.SupportDirectives) -> str:
        return _join(map(self.print_directive, node.directives), " ")

    def print_directive(self, node: _ast.Directive) -> str:
        return "@%s%s" % (node.name.value, self.print_arguments(node))

    def print_comment(self, node: _ast.Comment) -> str:
        return _comment_lines(node.value.split("\n"))

    def print_named_type(self, node: _ast.NamedType) -> str:
        return node.name.value

    def print_list_type(self, node: _ast.ListType) -> str:
        return "[%s]" % self(node.type)

    def print_non_null_type(self, node: _ast.NonNullType) -> str:
        return "%s!" % self(node.type)

    def _argument_list(
        self, args: Sequence[str], prefix: str = "", suffix: str = ""
    ) -> str:
        # Break one argument per line when the single line form including
        # what surrounds it is too wide or when any argument spans multiple
        # lines (descriptions, multiline values).
        if not args:
            return ""
        inline = "(%s)" % ", ".join(args)
        if not any("\n" in arg for arg in args) and (
            len(prefix) + len(inline) + len(suffix) <= self.max_line_width
        ):
            return inline
        return "(\n%s\n)" % _join(
            (_indent(arg, self.indent) for arg in args), "\n"
        )

    def _type_definition(
        self, head: Sequence[str], node: _ast.TypeSystemDefinition, body: str
    ) -> str:
        if self.break_type_directives and node.directives:
            return _join(
                [
                    _join(head, " "),
                    _join(
                        (
                            _indent(self.print_directive(d), self.indent)
                            for d in node.directives
                        ),
                        "\n",
                    ),
                    body,
                ],
                "\n",
            )
        return _join(list(head) + [self.print_directives(node), body], " ")

    def _fields_block(self, nodes: Iterable[_ast.Node]) -> str:
        return _block(map(self, nodes), self.indent)

    def print_schema_definition(self, node: _ast.SchemaDefinition) -> str:
        return self._with_desc(
            self._type_definition(
                ["schema"], node, self._fields_block(node.operation_types)
            ),
            node.description,
        )

    def print_schema_extension(self, node: _ast.SchemaExtension) -> str:
        return self._with_desc(
            self._type_definition(
                ["extend schema"],
                node,
                self._fields_block(node.operation_types),
            ),
            node.description,
        )

    def print_operation_type_definition(
        self, node: _ast.OperationTypeDefinition
    ) -> str:
        return "%s: %s" % (node.operation, self(node.type))

    def print_scalar_type_definition(
        self, node: _ast.ScalarTypeDefinition
    ) -> str:
        return self._with_desc(
            self._type_definition(["scalar", node.name.value], node, ""),
            node.description,
        )

    def print_scalar_type_extension(
        self, node: _ast.ScalarTypeExtension
    ) -> str:
        return self._with_desc(
            self._type_definition(["extend scalar", node.name.value], node, ""),
            node.description,
        )

    def _implements(
        self,
        node: Union[
            _ast.ObjectTypeDefinition,
            _ast.ObjectTypeExtension,
            _ast.InterfaceTypeDefinition,
            _ast.InterfaceTypeExtension,
        ],
    ) -> str:
        return _wrap("implements ", _join(map(self, node.interfaces), " & "))

    def print_object_type_definition(
        self, node: _ast.ObjectTypeDefinition
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["type", node.name.value, self._implements(node)],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def print_object_type_extension(
        self, node: _ast.ObjectTypeExtension
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["extend type", node.name.value, self._implements(node)],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def print_field_definition(self, node: _ast.FieldDefinition) -> str:
        tail = ": %s%s" % (
            self(node.type),
            _wrap(" ", self.print_directives(node)),
        )
        args = [self(arg) for arg in node.arguments]
        return self._with_desc(
            "%s%s%s"
            % (
                node.name.value,
                self._argument_list(args, node.name.value, tail),
                tail,
            ),
            node.description,
        )

    def print_input_value_definition(
        self, node: _ast.InputValueDefinition
    ) -> str:
        return self._with_desc(
            _join(
                [
                    _join([node.name.value, ": ", self(node.type)]),
                    _wrap(" = ", self(node.default_value)),
                    _wrap(" ", self.print_directives(node)),
                ]
            ),
            node.description,
        )

    def print_interface_type_definition(
        self, node: _ast.InterfaceTypeDefinition
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["interface", node.name.value, self._implements(node)],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def print_interface_type_extension(
        self, node: _ast.InterfaceTypeExtension
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["extend interface", node.name.value, self._implements(node)],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def _union(
        self,
        head: List[str],
        node: Union[_ast.UnionTypeDefinition, _ast.UnionTypeExtension],
    ) -> str:
        types = [self(t) for t in node.types]
        members = _wrap("= ", _join(types, " | "))
        single_line = _join(head + [self.print_directives(node), members], " ")
        if members and len(single_line) > self.max_line_width:
            members = "=\n%s" % _join(
                (_indent("| " + t, self.indent) for t in types), "\n"
            )

        if self.break_type_directives and node.directives:
            members = _indent(members, self.indent)

        return self._type_definition(head, node, members)

    def print_union_type_definition(
        self, node: _ast.UnionTypeDefinition
    ) -> str:
        return self._with_desc(
            self._union(["union", node.name.value], node), node.description
        )

    def print_union_type_extension(self, node: _ast.UnionTypeExtension) -> str:
        return self._with_desc(
            self._union(["extend union", node.name.value], node),
            node.description,
        )

    def print_enum_type_definition(self, node: _ast.EnumTypeDefinition) -> str:
        return self._with_desc(
            self._type_definition(
                ["enum", node.name.value],
                node,
                self._fields_block(node.values),
            ),
            node.description,
        )

    def print_enum_type_extension(self, node: _ast.EnumTypeExtension) -> str:
        return self._with_desc(
            self._type_definition(
                ["extend enum", node.name.value],
                node,
                self._fields_block(node.values),
            ),
            node.description,
        )

    def print_enum_value_definition(
        self, node: _ast.EnumValueDefinition
    ) -> str:
        return self._with_desc(
            _join([node.name.value, self.print_directives(node)], " "),
            node.description,
        )

    def print_input_object_type_definition(
        self, node: _ast.InputObjectTypeDefinition
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["input", node.name.value],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def print_input_object_type_extension(
        self, node: _ast.InputObjectTypeExtension
    ) -> str:
        return self._with_desc(
            self._type_definition(
                ["extend input", node.name.value],
                node,
                self._fields_block(node.fields),
            ),
            node.description,
        )

    def print_directive_definition(self, node: _ast.DirectiveDefinition) -> str:
        head = "directive @%s" % node.name.value
        tail = "%s on %s" % (
            " repeatable" if node.repeatable else "",
            _join(map(self, node.locations), " | "),
        )
        args = [self(arg) for arg in node.arguments]
        return self._with_desc(
            "%s%s%s" % (head, self._argument_list(args, head, tail), tail),
            node.description,
        )

    def _with_desc(
        self, formatted: str, desc: Optional[_ast.Description]
    ) -> str:
        if desc is None or not self.include_descriptions:
            return formatted

        if isinstance(desc, _ast.Comment):
            desc_str = self.print_comment(desc)
        elif self.use_legacy_comment_descriptions:
            desc_str = _comment_lines(LINE_SEPARATOR.split(desc.value))
        elif desc.block:
            desc_str = _block_string(desc.value)
        elif "\n" in desc.value and _is_block_safe(desc.value):
            desc_str = _block_string(desc.value)
        else:
            desc_str = json.dumps(desc.value, ensure_ascii=False)

        return _join([desc_str, formatted], "\n")


def _wrap(start: str, maybe_string: Optional[str], end: str = "") -> str:
    return "%s%s%s" % (start, maybe_string, end) if maybe_string else ""


def _join(entries: Iterable[str], separator: str = "") -> str:
    return separator.join([x for x in entries if x])


def _indent(maybe_string: str, indent: str) -> str:
    # Empty lines are left untouched.
    return "\n".join(
        indent + line if line else line for line in maybe_string.split("\n")
    )


def _block(iterator: Iterable[str], indent: str) -> str:
    arr = list(iterator)
    if not arr:
        return ""
    return "{\n%s\n}" % _join((_indent(s, indent) for s in arr), "\n")


def _comment_lines(lines: Iterable[str]) -> str:
    return "\n".join("# " + line if line else "#" for line in lines)


def _is_block_safe(value: str) -> bool:
    # Whether printing ``value`` in the expanded block form and parsing it
    # back yields the same value.
    if any(char < " " and char not in "\n\t" for char in value):
        return False
    return parse_block_string("\n%s\n" % value) == value


# Block strings holding a single line are kept on a single line, a closing
# newline is added when the content would otherwise escape the delimiter.
# Multiline block strings are printed in the expanded form, the enclosing
# block takes care of the indentation.
def _block_string(value: str) -> str:
    escaped = value.replace('"""', '\\"""')
    if "\n" not in value:
        if escaped.endswith('"') or escaped.endswith("\\"):
            escaped = escaped + "\n"
        return '"""%s"""' % escaped
    return '"""\n%s\n"""' % escaped


def print_ast(node: _ast.Node, **kwargs: Any) -> str:
    """ Converts an AST node into a valid schema definition string, using a
    set of reasonable formatting rules.

    Args:
        node (py_sdl.lang.ast.Node): Node to format.
        **kwargs: Printer options, see :class:`ASTPrinter`

    Returns:
        str:
    """
    logger.debug("Printing %s with options %r", node.__class__.__name__, kwargs)
    return ASTPrinter(**kwargs)(node)

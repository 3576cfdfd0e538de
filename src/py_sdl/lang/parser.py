# -*- coding: utf-8 -*-

import collections
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    List,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
    cast,
)

from .._string_utils import infer_suggestions, quoted_options_list
from ..exc import DuplicateObjectField, ParseError, UnexpectedEOF, UnexpectedToken
from . import ast as _ast
from .lexer import Lexer
from .token import (
    EOF,
    Ampersand,
    At,
    BlockString,
    BracketClose,
    BracketOpen,
    Colon,
    Comment,
    CurlyClose,
    CurlyOpen,
    Dollar,
    Equals,
    ExclamationMark,
    Float,
    Integer,
    Name,
    ParenClose,
    ParenOpen,
    Pipe,
    Punctuator,
    String,
    Token,
)

logger = logging.getLogger(__name__)

DIRECTIVE_LOCATIONS = frozenset(
    [
        "QUERY",
        "MUTATION",
        "SUBSCRIPTION",
        "FIELD",
        "FRAGMENT_DEFINITION",
        "FRAGMENT_SPREAD",
        "INLINE_FRAGMENT",
        "VARIABLE_DEFINITION",
        # Type System Definitions
        "SCHEMA",
        "SCALAR",
        "OBJECT",
        "FIELD_DEFINITION",
        "ARGUMENT_DEFINITION",
        "INTERFACE",
        "UNION",
        "ENUM",
        "ENUM_VALUE",
        "INPUT_OBJECT",
        "INPUT_FIELD_DEFINITION",
    ]
)

SCHEMA_DEFINITIONS_KEYWORDS = frozenset(
    [
        "schema",
        "scalar",
        "type",
        "interface",
        "union",
        "enum",
        "input",
        "directive",
    ]
)

EXTENSIONS_KEYWORDS = SCHEMA_DEFINITIONS_KEYWORDS - {"directive"}

OPERATION_TYPES_KEYWORDS = frozenset(["query", "mutation", "subscription"])


if TYPE_CHECKING:
    from typing import Deque


Kind = Type[Token]
N = TypeVar("N", bound=_ast.Node)
LocCallable = Callable[[Token], Optional[Tuple[int, int]]]


def _describe(kind: Kind) -> str:
    if issubclass(kind, Punctuator):
        return '"%s"' % kind.value
    return kind.__name__


def _unexpected(
    token: Token,
    source: str,
    expected: Optional[str] = None,
    message: Optional[str] = None,
) -> ParseError:
    if isinstance(token, EOF):
        return UnexpectedEOF(token.start, source, expected)

    if message is None:
        if expected is None:
            message = 'Unexpected "%s"' % token
        else:
            message = 'Expected %s but found "%s"' % (expected, token)

    return UnexpectedToken(message, token.start, source, expected, str(token))


def _did_you_mean(message: str, value: str, options: Any) -> str:
    suggestions = infer_suggestions(value, sorted(options))
    if suggestions:
        return "%s, did you mean %s?" % (
            message,
            quoted_options_list(suggestions),
        )
    return message


def parse(source: Union[str, bytes], **kwargs: Any) -> _ast.Document:
    """
    Parse a string as a schema definition document.

    Args:
        source (Union[str, bytes]): source document.
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.

    Returns:
        `py_sdl.lang.ast.Document`: Parsed document.
    """
    document = Parser(source, **kwargs).parse_document()
    logger.debug("Parsed %d definition(s)", len(document.definitions))
    return document


def parse_value(source: Union[str, bytes], **kwargs: Any) -> _ast.Value:
    """
    Parse a string as a single constant value (eg. ``[42]``).

    Args:
        source (Union[str, bytes]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.
    """
    parser = Parser(source, **kwargs)
    value = parser.parse_value_literal()
    parser.expect(EOF)
    return value


def parse_type(source: Union[str, bytes], **kwargs: Any) -> _ast.Type:
    """
    Parse a string as a single type reference (eg. ``[Int!]``).

    Args:
        source (Union[str, bytes]): source document
        **kwargs: Remaining keyword arguments passed to :class:`Parser`

    Raises:
        :class:`~py_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.
    """
    parser = Parser(source, **kwargs)
    value = parser.parse_type_reference()
    parser.expect(EOF)
    return value


class Parser:
    """
    Schema definition language parser.

    Call :meth:`parse_document` to parse a full document.

    All ``parse_*`` methods will raise :class:`~py_sdl.exc.SDLSyntaxError`
    if a syntax error is encountered.

    Args:
        source (Union[str, bytes]): source document

        no_location (bool):
            By default, the parser creates AST nodes that know the location
            in the source that they correspond to. This configuration flag
            disables that behavior for performance or testing reasons.

        attach_comments (bool):
            By default, a block of ``#`` comments placed on the lines
            directly above a definition, field, argument, input field or enum
            value becomes its description (unless it already has a string
            description). Set this to ``False`` to discard all comments.

            Such a block must not be separated from what it describes by a
            blank line and a comment trailing another token on the same line
            is never part of it:

            .. code-block:: graphql

                # Description of Foo
                type Foo {
                    # Description of bar
                    bar: Int # Discarded
                }
    """

    __slots__ = (
        "_lexer",
        "_source",
        "_loc",
        "_no_location",
        "_attach_comments",
        "_comments",
        "_last_line",
        "_buffer",
        "_last",
    )

    def __init__(
        self,
        source: Union[str, bytes],
        no_location: bool = False,
        attach_comments: bool = True,
    ):
        self._lexer = Lexer(source)
        self._source = self._lexer.source
        self._attach_comments = attach_comments
        self._no_location = no_location

        self._loc = (
            (lambda _: None)
            if no_location
            else (lambda start: (start.start, self._last.end))
        )  # type: LocCallable

        # Pending comment descriptions, keyed by the start offset of the token
        # they directly precede.
        self._comments = {}  # type: Dict[int, _ast.Comment]
        # Line on which the last significant token read from the lexer ended.
        self._last_line = 0

        # Keep track of the current parsing window + last seen token internally
        # as the Lexer iterator itself doesn't handle backtracking or lookahead
        # semantics and can only be consumed once.
        self._buffer = collections.deque()  # type: Deque[Token]

    def _read_token(self) -> Token:
        """
        Read the next significant token from the lexer, recording any block
        of comments directly above it.
        """
        run = []  # type: List[Token]
        while True:
            token = self._lexer.next_token()
            if token.__class__ is not Comment:
                break

            if not self._attach_comments:
                continue

            if token.line == self._last_line:
                run = []
            elif run and token.line != run[-1].line + 1:
                run = [token]
            else:
                run.append(token)

        if run and token.line == run[-1].line + 1:
            self._comments[token.start] = _ast.Comment(
                value="\n".join(
                    c.value[1:] if c.value.startswith(" ") else c.value
                    for c in run
                ),
                loc=(
                    None
                    if self._no_location
                    else (run[0].start, run[-1].end)
                ),
                source=self._source,
            )

        self._last_line = self._lexer.loc(token.end)[0]
        return token

    def _advance_window(self, by: int = 1) -> None:
        """ Advance the parsing window by ``by`` elements. """
        for _ in range(by):
            self._buffer.appendleft(self._read_token())

    def peek(self, count: int = 1) -> Token:
        """
        Look at a token ahead of the current position without advancing the
        parsing position. Past the end of the source this returns the
        :class:`~py_sdl.lang.token.EOF` token.

        Args:
            count (int): How many tokens should we look ahead
        """
        delta = count - len(self._buffer)
        if delta > 0:
            self._advance_window(by=delta)

        return self._buffer[-count]

    def advance(self) -> Token:
        """
        Move parsing window forward and return the next token.
        """
        if not self._buffer:
            self._advance_window()

        self._last = self._buffer.pop()
        return self._last

    def expect(self, kind: Kind) -> Token:
        """
        Advance the parser and check that the next token is of the
        given token class otherwise raises :class:`~py_sdl.exc.UnexpectedToken`.

        Args:
            kind: Expected token kind. Must be a subclass of
                :class:`py_sdl.lang.token.Token`
        """
        next_token = self.peek()
        if next_token.__class__ is kind:
            return self.advance()

        raise _unexpected(next_token, self._source, _describe(kind))

    def expect_keyword(self, keyword: str) -> Name:
        """
        Advance the parser and check that the next token is a Name with
        the given value otherwise raises :class:`~py_sdl.exc.UnexpectedToken`.

        Args:
            keyword (str): Expected keyword
        """
        next_token = self.peek()
        if next_token.__class__ is Name and next_token.value == keyword:
            return cast(Name, self.advance())

        raise _unexpected(next_token, self._source, '"%s"' % keyword)

    def skip(self, kind: Kind) -> bool:
        """
        If the next token is of the given kind, return ``True`` after
        advancing the parser. Otherwise, do not change the parser state and
        return ``False``.

        Args:
            kind: Token kind to read over. Must be a subclass of
                :class:`py_sdl.lang.token.Token`
        """
        if self.peek().__class__ is kind:
            self.advance()
            return True
        return False

    def many(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes, determined by
        ``parse_fn`` which are surrounded by ``open_kind`` and ``close_kind``
        tokens. Advances the parser to the next lex token after the closing
        token.

        Args:
            open_kind: Opening token kind. Must be a subclass of
                :class:`py_sdl.lang.token.Token`

            parse_fn (callable): Function to call for every item, should be a
                method of the :class:`Parser` instance.

            close_kind: Closing token kind. Must be a subclass of
                :class:`py_sdl.lang.token.Token`

        Raises:
            :class:`~py_sdl.exc.UnexpectedToken`:
                if opening, entry or closing token do not match.
        """
        self.expect(open_kind)
        nodes = []
        while True:
            nodes.append(parse_fn())
            if self.skip(close_kind):
                break
        return nodes

    def any_(
        self, open_kind: Kind, parse_fn: Callable[[], N], close_kind: Kind
    ) -> List[N]:
        """
        Same as :meth:`many` but the list of parse nodes can be empty.
        """
        self.expect(open_kind)
        nodes = []
        while not self.skip(close_kind):
            nodes.append(parse_fn())
        return nodes

    def delimited_list(
        self, delimiter: Kind, parse_fn: Callable[[], N]
    ) -> List[N]:
        """
        Return a non-empty list of parse nodes determined by ``parse_fn`` and
        separated by a delimiter token of type ``delimiter``, a leading
        delimiter is allowed. Advances the parser to the next lex token after
        the last token.

        Args:
            delimiter: Delimiter kind. Must be a subclass of
                :class:`py_sdl.lang.token.Token`

            parse_fn (callable): Function to call for every item, should be a
                method of the :class:`Parser` instance.
        """
        items = []
        self.skip(delimiter)
        while True:
            items.append(parse_fn())
            if not self.skip(delimiter):
                break
        return items

    def parse_document(self) -> _ast.Document:
        """
        Document : TypeSystemDefinition*
        """
        start = self.peek()
        definitions = []
        while not self.skip(EOF):
            definitions.append(self.parse_definition())

        return _ast.Document(
            definitions=definitions, loc=self._loc(start), source=self._source
        )

    def parse_definition(self) -> _ast.TypeSystemDefinition:
        """
        Definition : TypeSystemDefinition | TypeSystemExtension
        """
        start = self.peek()
        if start.__class__ is Name:
            if start.value in SCHEMA_DEFINITIONS_KEYWORDS:
                return self.parse_type_system_definition()
            elif start.value == "extend":
                return self.parse_type_system_extension()
            raise _unexpected(
                start,
                self._source,
                message=_did_you_mean(
                    'Unexpected "%s"' % start.value,
                    start.value,
                    SCHEMA_DEFINITIONS_KEYWORDS | {"extend"},
                ),
            )
        elif start.__class__ is String or start.__class__ is BlockString:
            return self.parse_type_system_definition()

        raise _unexpected(start, self._source, "a definition")

    def parse_name(self) -> _ast.Name:
        """
        Convert a name lex token into a name parse node.
        """
        token = self.expect(Name)
        return _ast.Name(
            value=token.value, loc=self._loc(token), source=self._source
        )

    def parse_operation_type(self) -> str:
        """
        OperationType : one of query mutation subscription
        """
        token = self.expect(Name)
        if token.value in OPERATION_TYPES_KEYWORDS:
            return token.value
        raise _unexpected(
            token,
            self._source,
            '"query", "mutation" or "subscription"',
        )

    def parse_arguments(self) -> List[_ast.Argument]:
        """
        Arguments[Const] : ( Argument[?Const]+ )
        """
        if self.peek().__class__ is ParenOpen:
            return self.many(ParenOpen, self.parse_argument, ParenClose)
        return []

    def parse_argument(self) -> _ast.Argument:
        """
        Argument[Const] : Name : Value[?Const]
        """
        start = self.peek()
        name = self.parse_name()
        self.expect(Colon)
        return _ast.Argument(
            name=name,
            value=self.parse_value_literal(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_value_literal(self) -> _ast.Value:
        """
        Value[Const] : IntValue | FloatValue | StringValue \
        | BooleanValue | NullValue | EnumValue \
        | ListValue[Const] | ObjectValue[Const]

        - BooleanValue : one of "true" "false"
        - NullValue : "null"
        - EnumValue : Name but not "true", "false" or "null"

        Variables are never valid in a schema definition document.
        """
        token = self.peek()
        kind = type(token)
        value = token.value

        if kind is BracketOpen:
            return self.parse_list()
        elif kind is CurlyOpen:
            return self.parse_object()
        elif kind is Integer:
            self.advance()
            return _ast.IntValue(
                value=value, loc=self._loc(token), source=self._source
            )
        elif kind is Float:
            self.advance()
            return _ast.FloatValue(
                value=value, loc=self._loc(token), source=self._source
            )
        elif kind in (String, BlockString):
            return self.parse_string_literal()
        elif kind is Name:
            self.advance()
            if value in ("true", "false"):
                return _ast.BooleanValue(
                    value=value == "true",
                    loc=self._loc(token),
                    source=self._source,
                )
            elif value == "null":
                return _ast.NullValue(loc=self._loc(token), source=self._source)
            else:
                return _ast.EnumValue(
                    value=value, loc=self._loc(token), source=self._source
                )
        elif kind is Dollar:
            raise _unexpected(
                token,
                self._source,
                "a constant value",
                "Variables are not allowed in schema definitions",
            )

        raise _unexpected(token, self._source, "a value")

    def parse_string_literal(self) -> _ast.StringValue:
        token = self.advance()

        return _ast.StringValue(
            value=token.value,
            block=token.__class__ is BlockString,
            loc=self._loc(token),
            source=self._source,
        )

    def parse_list(self) -> _ast.ListValue:
        """
        ListValue[Const] : [ ] | [ Value[?Const]+ ]
        """
        start = self.peek()
        return _ast.ListValue(
            values=self.any_(
                BracketOpen, self.parse_value_literal, BracketClose
            ),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_object(self) -> _ast.ObjectValue:
        """
        ObjectValue[Const] { } | { ObjectField[?Const]+ }

        Keys must be unique within a single object.
        """
        start = self.expect(CurlyOpen)
        fields = []
        seen = set()
        while not self.skip(CurlyClose):
            field_start = self.peek()
            field = self.parse_object_field()
            key = field.name.value
            if key in seen:
                raise DuplicateObjectField(
                    'Duplicate field "%s" in object value' % key,
                    field_start.start,
                    self._source,
                )
            seen.add(key)
            fields.append(field)

        return _ast.ObjectValue(
            fields=fields, loc=self._loc(start), source=self._source
        )

    def parse_object_field(self) -> _ast.ObjectField:
        """
        ObjectField[Const] : Name : Value[?Const]
        """
        start = self.peek()
        name = self.parse_name()
        self.expect(Colon)
        return _ast.ObjectField(
            name=name,
            value=self.parse_value_literal(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_directives(self) -> List[_ast.Directive]:
        """
        Directives[Const] : Directive[?Const]+
        """
        directives = []
        while self.peek().__class__ is At:
            directives.append(self.parse_directive())
        return directives

    def parse_directive(self) -> _ast.Directive:
        """
        Directive[Const] : @ Name Arguments[?Const]?
        """
        start = self.expect(At)
        return _ast.Directive(
            name=self.parse_name(),
            arguments=self.parse_arguments(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_type_reference(self) -> _ast.Type:
        """
        Type : NamedType | ListType | NonNullType
        """
        start = self.peek()

        if self.skip(BracketOpen):
            inner_type = self.parse_type_reference()
            self.expect(BracketClose)
            type_ = _ast.ListType(
                type=inner_type, loc=self._loc(start), source=self._source
            )  # type: Union[_ast.ListType, _ast.NamedType]
        else:
            type_ = self.parse_named_type()

        if self.skip(ExclamationMark):
            return _ast.NonNullType(
                type=type_, loc=self._loc(start), source=self._source
            )

        return type_

    def parse_named_type(self) -> _ast.NamedType:
        """
        NamedType : Name
        """
        start = self.peek()
        return _ast.NamedType(
            name=self.parse_name(), loc=self._loc(start), source=self._source
        )

    def parse_type_system_definition(self) -> _ast.TypeSystemDefinition:
        """
        TypeSystemDefinition : SchemaDefinition | TypeDefinition \
        | DirectiveDefinition

        - TypeDefinition : ScalarTypeDefinition | ObjectTypeDefinition \
        | InterfaceTypeDefinition | UnionTypeDefinition | EnumTypeDefinition \
        | InputObjectTypeDefinition
        """
        next_ = self.peek()
        keyword = (
            self.peek(2)
            if (next_.__class__ is String or next_.__class__ is BlockString)
            else next_
        )

        if keyword.__class__ is Name:
            if keyword.value == "schema":
                return self.parse_schema_definition()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_definition()
            elif keyword.value == "type":
                return self.parse_object_type_definition()
            elif keyword.value == "interface":
                return self.parse_interface_type_definition()
            elif keyword.value == "union":
                return self.parse_union_type_definition()
            elif keyword.value == "enum":
                return self.parse_enum_type_definition()
            elif keyword.value == "input":
                return self.parse_input_object_type_definition()
            elif keyword.value == "directive":
                return self.parse_directive_definition()
            elif keyword.value == "extend":
                raise _unexpected(
                    keyword,
                    self._source,
                    message="Extensions cannot have a description",
                )
            raise _unexpected(
                keyword,
                self._source,
                message=_did_you_mean(
                    'Unexpected "%s"' % keyword.value,
                    keyword.value,
                    SCHEMA_DEFINITIONS_KEYWORDS,
                ),
            )

        raise _unexpected(keyword, self._source, "a definition")

    def parse_comment_description(self) -> Optional[_ast.Comment]:
        """
        Consume the comment block directly preceding the next token if any.
        """
        return self._comments.pop(self.peek().start, None)

    def parse_description(self) -> Optional[_ast.Description]:
        """
        Description : StringValue | Comment+
        """
        next_ = self.peek()
        if next_.__class__ is String or next_.__class__ is BlockString:
            return self.parse_string_literal()
        return self.parse_comment_description()

    def parse_schema_definition(self) -> _ast.SchemaDefinition:
        """
        SchemaDefinition : \
        Description? schema Directives[Const]? { OperationTypeDefinition+ }
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("schema")
        return _ast.SchemaDefinition(
            description=desc,
            directives=self.parse_directives(),
            operation_types=self.many(
                CurlyOpen, self.parse_operation_type_definition, CurlyClose
            ),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_operation_type_definition(self) -> _ast.OperationTypeDefinition:
        """
        OperationTypeDefinition : OperationType : NamedType
        """
        start = self.peek()
        operation = self.parse_operation_type()
        self.expect(Colon)
        return _ast.OperationTypeDefinition(
            operation=operation,
            type=self.parse_named_type(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_scalar_type_definition(self) -> _ast.ScalarTypeDefinition:
        """
        ScalarTypeDefinition : Description? scalar Name Directives[Const]?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("scalar")
        return _ast.ScalarTypeDefinition(
            description=desc,
            name=self.parse_name(),
            directives=self.parse_directives(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_object_type_definition(self) -> _ast.ObjectTypeDefinition:
        """
        ObjectTypeDefinition : Description? type Name ImplementsInterfaces? \
        Directives[Const]? FieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("type")
        return _ast.ObjectTypeDefinition(
            description=desc,
            name=self.parse_name(),
            interfaces=self.parse_implements_interfaces(),
            directives=self.parse_directives(),
            fields=self.parse_fields_definition(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_implements_interfaces(self) -> List[_ast.NamedType]:
        """
        ImplementsInterfaces : implements `&`? NamedType \
        | ImplementsInterfaces & NamedType
        """
        token = self.peek()
        if token.__class__ is Name and token.value == "implements":
            self.advance()
            return self.delimited_list(Ampersand, self.parse_named_type)
        return []

    def parse_fields_definition(self) -> List[_ast.FieldDefinition]:
        """
        FieldsDefinition : { FieldDefinition+ }
        """
        if self.peek().__class__ is CurlyOpen:
            return self.many(CurlyOpen, self.parse_field_definition, CurlyClose)
        return []

    def parse_field_definition(self) -> _ast.FieldDefinition:
        """
        FieldDefinition : \
        Description? Name ArgumentsDefinition? : Type Directives[Const]?
        """
        start = self.peek()
        desc, name = self.parse_description(), self.parse_name()
        args = self.parse_argument_definitions()
        self.expect(Colon)
        return _ast.FieldDefinition(
            description=desc,
            name=name,
            arguments=args,
            type=self.parse_type_reference(),
            directives=self.parse_directives(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_argument_definitions(self) -> List[_ast.InputValueDefinition]:
        """
        ArgumentsDefinition : ( InputValueDefinition+ )
        """
        return (
            self.many(ParenOpen, self.parse_input_value_definition, ParenClose)
            if self.peek().__class__ is ParenOpen
            else []
        )

    def parse_input_value_definition(self) -> _ast.InputValueDefinition:
        """
        InputValueDefinition : \
        Description? Name : Type DefaultValue? Directives[Const]?
        """
        start = self.peek()
        desc, name = self.parse_description(), self.parse_name()
        self.expect(Colon)
        return _ast.InputValueDefinition(
            description=desc,
            name=name,
            type=self.parse_type_reference(),
            default_value=(
                self.parse_value_literal() if self.skip(Equals) else None
            ),
            directives=self.parse_directives(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_interface_type_definition(self) -> _ast.InterfaceTypeDefinition:
        """
        InterfaceTypeDefinition : Description? interface Name \
        ImplementsInterfaces? Directives[Const]? FieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("interface")
        return _ast.InterfaceTypeDefinition(
            description=desc,
            name=self.parse_name(),
            interfaces=self.parse_implements_interfaces(),
            directives=self.parse_directives(),
            fields=self.parse_fields_definition(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_union_type_definition(self) -> _ast.UnionTypeDefinition:
        """
        UnionTypeDefinition : \
        Description? union Name Directives[Const]? UnionMemberTypes?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("union")
        return _ast.UnionTypeDefinition(
            description=desc,
            name=self.parse_name(),
            directives=self.parse_directives(),
            types=self.parse_union_member_types(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_union_member_types(self) -> List[_ast.NamedType]:
        """
        UnionMemberTypes : = `|`? NamedType | UnionMemberTypes | NamedType
        """
        if self.skip(Equals):
            return self.delimited_list(Pipe, self.parse_named_type)
        return []

    def parse_enum_type_definition(self) -> _ast.EnumTypeDefinition:
        """
        EnumTypeDefinition : \
        Description? enum Name Directives[Const]? EnumValuesDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("enum")
        return _ast.EnumTypeDefinition(
            description=desc,
            name=self.parse_name(),
            directives=self.parse_directives(),
            values=self.parse_enum_values_definition(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_enum_values_definition(self) -> List[_ast.EnumValueDefinition]:
        """
        EnumValuesDefinition : { EnumValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_enum_value_definition, CurlyClose)
            if self.peek().__class__ is CurlyOpen
            else []
        )

    def parse_enum_value_definition(self) -> _ast.EnumValueDefinition:
        """
        EnumValueDefinition : Description? EnumValue Directives[Const]?

        - EnumValue : Name but not "true", "false" or "null"
        """
        start = self.peek()
        desc = self.parse_description()
        token = self.peek()
        if token.__class__ is Name and token.value in ("true", "false", "null"):
            raise _unexpected(
                token,
                self._source,
                "an enum value",
                'Name "%s" is reserved and cannot be used as an enum value'
                % token.value,
            )
        return _ast.EnumValueDefinition(
            description=desc,
            name=self.parse_name(),
            directives=self.parse_directives(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_input_object_type_definition(
        self,
    ) -> _ast.InputObjectTypeDefinition:
        """
        InputObjectTypeDefinition : \
        Description? input Name Directives[Const]? InputFieldsDefinition?
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("input")
        return _ast.InputObjectTypeDefinition(
            description=desc,
            name=self.parse_name(),
            directives=self.parse_directives(),
            fields=self.parse_input_fields_definition(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_input_fields_definition(self) -> List[_ast.InputValueDefinition]:
        """
        InputFieldsDefinition : { InputValueDefinition+ }
        """
        return (
            self.many(CurlyOpen, self.parse_input_value_definition, CurlyClose)
            if self.peek().__class__ is CurlyOpen
            else []
        )

    def parse_type_system_extension(self) -> _ast.TypeSystemExtension:
        """
        TypeSystemExtension : SchemaExtension | TypeExtension

        - TypeExtension : ScalarTypeExtension | ObjectTypeExtension | \
        InterfaceTypeExtension | UnionTypeExtension | EnumTypeExtension | \
        InputObjectTypeDefinition
        """
        keyword = self.peek(2)
        if keyword.__class__ is Name:
            if keyword.value == "schema":
                return self.parse_schema_extension()
            elif keyword.value == "scalar":
                return self.parse_scalar_type_extension()
            elif keyword.value == "type":
                return self.parse_object_type_extension()
            elif keyword.value == "interface":
                return self.parse_interface_type_extension()
            elif keyword.value == "union":
                return self.parse_union_type_extension()
            elif keyword.value == "enum":
                return self.parse_enum_type_extension()
            elif keyword.value == "input":
                return self.parse_input_object_type_extension()
            raise _unexpected(
                keyword,
                self._source,
                message=_did_you_mean(
                    'Unexpected "%s"' % keyword.value,
                    keyword.value,
                    EXTENSIONS_KEYWORDS,
                ),
            )

        raise _unexpected(keyword, self._source, "an extension keyword")

    def _empty_extension(self, expected: str) -> ParseError:
        return _unexpected(self.peek(), self._source, expected)

    def parse_schema_extension(self) -> _ast.SchemaExtension:
        """
        SchemaExtension : extend schema Directives[Const] \
        { [OperationTypeDefinition] } | extend schema Directives[Const]
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("schema")
        directives = self.parse_directives()
        if self.peek().__class__ is CurlyOpen:
            operation_types = self.many(
                CurlyOpen, self.parse_operation_type_definition, CurlyClose
            )
        else:
            operation_types = []
        if not directives and not operation_types:
            raise self._empty_extension('"@" or "{"')
        return _ast.SchemaExtension(
            description=desc,
            directives=directives,
            operation_types=operation_types,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_scalar_type_extension(self) -> _ast.ScalarTypeExtension:
        """
        ScalarTypeExtension : extend scalar Name Directives[Const]
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("scalar")
        name = self.parse_name()
        directives = self.parse_directives()
        if not directives:
            raise self._empty_extension('"@"')
        return _ast.ScalarTypeExtension(
            description=desc,
            name=name,
            directives=directives,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_object_type_extension(self) -> _ast.ObjectTypeExtension:
        """
        ObjectTypeExtension : \
        extend type Name ImplementsInterfaces? Directives[Const]? FieldsDefinition \
        | extend type Name ImplementsInterfaces? Directives[Const] \
        | extend type Name ImplementsInterfaces
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("type")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives()
        fields = self.parse_fields_definition()
        if not interfaces and not directives and not fields:
            raise self._empty_extension('"implements", "@" or "{"')
        return _ast.ObjectTypeExtension(
            description=desc,
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_interface_type_extension(self) -> _ast.InterfaceTypeExtension:
        """
        InterfaceTypeExtension : \
        extend interface Name ImplementsInterfaces? Directives[Const]? \
        FieldsDefinition \
        | extend interface Name ImplementsInterfaces? Directives[Const] \
        | extend interface Name ImplementsInterfaces
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("interface")
        name = self.parse_name()
        interfaces = self.parse_implements_interfaces()
        directives = self.parse_directives()
        fields = self.parse_fields_definition()
        if not interfaces and not directives and not fields:
            raise self._empty_extension('"implements", "@" or "{"')

        return _ast.InterfaceTypeExtension(
            description=desc,
            name=name,
            interfaces=interfaces,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_union_type_extension(self) -> _ast.UnionTypeExtension:
        """
        UnionTypeExtension : \
        | extend union Name Directives[Const]? UnionMemberTypes \
        | extend union Name Directives[Const]
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("union")
        name = self.parse_name()
        directives = self.parse_directives()
        types = self.parse_union_member_types()
        if not directives and not types:
            raise self._empty_extension('"@" or "="')

        return _ast.UnionTypeExtension(
            description=desc,
            name=name,
            directives=directives,
            types=types,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_enum_type_extension(self) -> _ast.EnumTypeExtension:
        """
        EnumTypeExtension : \
        extend enum Name Directives[Const]? EnumValuesDefinition \
        | extend enum Name Directives[Const]
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("enum")
        name = self.parse_name()
        directives = self.parse_directives()
        values = self.parse_enum_values_definition()
        if not directives and not values:
            raise self._empty_extension('"@" or "{"')

        return _ast.EnumTypeExtension(
            description=desc,
            name=name,
            directives=directives,
            values=values,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_input_object_type_extension(
        self,
    ) -> _ast.InputObjectTypeExtension:
        """
        InputObjectTypeExtension : \
        extend input Name Directives[Const]? InputFieldsDefinition \
        | extend input Name Directives[Const]
        """
        start = self.peek()
        desc = self.parse_comment_description()
        self.expect_keyword("extend")
        self.expect_keyword("input")
        name = self.parse_name()
        directives = self.parse_directives()
        fields = self.parse_input_fields_definition()
        if not directives and not fields:
            raise self._empty_extension('"@" or "{"')

        return _ast.InputObjectTypeExtension(
            description=desc,
            name=name,
            directives=directives,
            fields=fields,
            loc=self._loc(start),
            source=self._source,
        )

    def parse_directive_definition(self) -> _ast.DirectiveDefinition:
        """
        DirectiveDefinition : Description? directive @ Name \
        ArgumentsDefinition? repeatable? on DirectiveLocations
        """
        start = self.peek()
        desc = self.parse_description()
        self.expect_keyword("directive")
        self.expect(At)
        name = self.parse_name()
        args = self.parse_argument_definitions()
        next_ = self.peek()
        repeatable = next_.__class__ is Name and next_.value == "repeatable"
        if repeatable:
            self.advance()
        self.expect_keyword("on")
        return _ast.DirectiveDefinition(
            description=desc,
            name=name,
            arguments=args,
            repeatable=repeatable,
            locations=self.parse_directive_locations(),
            loc=self._loc(start),
            source=self._source,
        )

    def parse_directive_locations(self) -> List[_ast.Name]:
        """
        DirectiveLocations : \
        `|`? DirectiveLocation `|` DirectiveLocations `|` DirectiveLocation
        """
        return self.delimited_list(Pipe, self.parse_directive_location)

    def parse_directive_location(self) -> _ast.Name:
        """
        DirectiveLocation : ExecutableDirectiveLocation \
        | TypeSystemDirectiveLocation

        - ExecutableDirectiveLocation : one of QUERY MUTATION SUBSCRIPTION FIELD \
        FRAGMENT_DEFINITION FRAGMENT_SPREAD INLINE_FRAGMENT VARIABLE_DEFINITION

        - TypeSystemDirectiveLocation : one of SCHEMA SCALAR OBJECT FIELD_DEFINITION \
        ARGUMENT_DEFINITION INTERFACE UNION ENUM ENUM_VALUE INPUT_OBJECT \
        INPUT_FIELD_DEFINITION
        """
        start = self.peek()
        name = self.parse_name()
        if name.value in DIRECTIVE_LOCATIONS:
            return name
        raise _unexpected(
            start,
            self._source,
            "a directive location",
            _did_you_mean(
                "Unknown directive location %s" % name.value,
                name.value,
                DIRECTIVE_LOCATIONS,
            ),
        )

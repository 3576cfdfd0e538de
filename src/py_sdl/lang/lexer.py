# -*- coding: utf-8 -*-
"""
Iterable interface for the schema definition language lexer.
"""

from string import ascii_letters, hexdigits
from typing import Container, Iterator, List, Mapping, Optional, Tuple, Union

from .._string_utils import (
    ensure_unicode,
    line_starts,
    offset_to_loc,
    parse_block_string,
)
from ..exc import (
    InvalidCharacter,
    InvalidEscapeSequence,
    InvalidNumber,
    NonTerminatedString,
    UnexpectedCharacter,
)
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
    Ellip,
    Equals,
    ExclamationMark,
    Float,
    Integer,
    Name,
    ParenClose,
    ParenOpen,
    Pipe,
    String,
    Token,
)

IGNORED_CHARS = "\n\r\ufeff\t ,"

SYMBOLS = {
    cls.value: cls
    for cls in (
        ExclamationMark,
        Dollar,
        ParenOpen,
        ParenClose,
        BracketOpen,
        BracketClose,
        CurlyOpen,
        CurlyClose,
        Colon,
        Equals,
        At,
        Pipe,
        Ampersand,
    )
}

QUOTED_CHARS = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\u0008",
    "f": "\u000c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


def _char_repr(char: str) -> str:
    if char >= " " and char != "\x7f":
        return char
    return "\\u%04X" % ord(char)


class Lexer:
    """
    Iterable schema definition language lexer / tokenizer.

    This class is not typically exposed through the parser but can be used
    independently to build custom parsers.

    Each call to :meth:`next_token` (or ``__next__`` when iterating) will read
    over a number of characters required to form a valid
    :class:`py_sdl.lang.token.Token` and otherwise raise a
    :class:`~py_sdl.exc.LexError` if that is not possible.

    Whitespace and commas are skipped; comments are kept as
    :class:`~py_sdl.lang.token.Comment` tokens so that the parser can decide
    what to do with them.

    Args:
        source (Union[str, bytes]): Source string.
            Bytestrings will be converted to unicode.
    """

    __slots__ = ("_source", "_len", "_position", "_line_starts", "_eof")

    def __init__(self, source: Union[str, bytes]):
        self._source = ensure_unicode(source)
        self._len = len(self._source)
        self._position = 0
        self._line_starts = line_starts(self._source)
        self._eof = None  # type: Optional[EOF]

    @property
    def source(self) -> str:
        return self._source

    def loc(self, offset: int) -> Tuple[int, int]:
        """
        Compute the 1-indexed (line, column) location of an offset into the
        source.
        """
        return offset_to_loc(self._line_starts, offset)

    def _read_over_whitespace(
        self, __ignored: Container[str] = IGNORED_CHARS
    ) -> None:
        pos = self._position
        while True:
            try:
                char = self._source[pos]
            except IndexError:
                break

            if char in __ignored:
                pos += 1
            else:
                break

        self._position = pos

    def _read_comment(self) -> Comment:
        start = self._position
        pos = start + 1
        while True:
            try:
                char = self._source[pos]
            except IndexError:
                break

            if (char >= " " or char == "\t") and char not in "\n\r":
                pos += 1
            else:
                break

        self._position = pos
        return Comment(
            start, pos, self._source[start + 1 : pos], *self.loc(start)
        )

    def _read_ellipsis(self) -> Ellip:
        start = self._position
        for _ in range(3):
            try:
                char = self._source[self._position]
            except IndexError:
                raise UnexpectedCharacter(
                    'Expected "." but found <EOF>', self._position, self._source
                )

            self._position += 1

            if char != ".":
                raise UnexpectedCharacter(
                    'Expected "." but found "%s"' % _char_repr(char),
                    self._position,
                    self._source,
                )
        return Ellip(start, self._position, *self.loc(start))

    def _read_string(self) -> String:
        start = self._position
        self._position += 1
        acc = []  # type: List[str]
        while True:
            try:
                char = self._source[self._position]
            except IndexError:
                raise NonTerminatedString(
                    "Unterminated string", self._position, self._source
                )

            self._position += 1

            if char == '"':
                value = "".join(acc)
                return String(start, self._position, value, *self.loc(start))
            elif char == "\\":
                acc.append(self._read_escape_sequence())
            elif char in "\n\r":
                raise NonTerminatedString(
                    "Unterminated string", self._position - 1, self._source
                )
            elif not (char >= " " or char == "\t"):
                raise InvalidCharacter(
                    'Invalid character "%s" in string' % _char_repr(char),
                    self._position - 1,
                    self._source,
                )
            else:
                acc.append(char)

    def _read_block_string(self) -> BlockString:
        start = self._position
        self._position += 3
        acc = []  # type: List[str]

        while True:
            try:
                char = self._source[self._position]
            except IndexError:
                raise NonTerminatedString(
                    "Unterminated block string", self._position, self._source
                )

            if self._source[self._position : self._position + 3] == '"""':
                self._position += 3
                return BlockString(
                    start,
                    self._position,
                    parse_block_string("".join(acc)),
                    *self.loc(start)
                )

            self._position += 1

            if char == "\\":
                if self._source[self._position : self._position + 3] == '"""':
                    acc.append('"""')
                    self._position += 3
                else:
                    acc.append(char)
            elif not (char >= " " or char in "\t\n\r"):
                raise InvalidCharacter(
                    'Invalid character "%s" in block string'
                    % _char_repr(char),
                    self._position - 1,
                    self._source,
                )
            else:
                acc.append(char)

    def _read_escape_sequence(
        self, __quoted_chars: Mapping[str, str] = QUOTED_CHARS
    ) -> str:

        try:
            char = self._source[self._position]
        except IndexError:
            raise NonTerminatedString(
                "Unterminated string", self._position + 1, self._source
            )

        self._position += 1

        try:
            return __quoted_chars[char]
        except KeyError:
            pass

        if char == "u":  # unicode character: uXXXX
            return self._read_escaped_unicode()
        else:
            raise InvalidEscapeSequence(
                'Invalid escape sequence "\\%s"' % _char_repr(char),
                self._position - 1,
                self._source,
            )

    def _read_escaped_unicode(self) -> str:
        start = self._position
        code = self._read_hex_quad()

        # A high surrogate must be followed by an escaped low surrogate.
        if (
            0xD800 <= code <= 0xDBFF
            and self._source[self._position : self._position + 2] == "\\u"
        ):
            self._position += 2
            low = self._read_hex_quad()
            if 0xDC00 <= low <= 0xDFFF:
                return chr(0x10000 + ((code - 0xD800) << 10) + low - 0xDC00)

        if 0xD800 <= code <= 0xDFFF:
            raise InvalidEscapeSequence(
                'Invalid surrogate pair "\\u%s"'
                % self._source[start : start + 4],
                start - 1,
                self._source,
            )

        return chr(code)

    def _read_hex_quad(self) -> int:
        start = self._position
        for _ in range(4):
            try:
                char = self._source[self._position]
            except IndexError:
                raise NonTerminatedString(
                    "Unterminated string", self._position + 1, self._source
                )

            self._position += 1

            if not char.isalnum():
                break

        escape = self._source[start : self._position]

        if len(escape) != 4 or any(c not in hexdigits for c in escape):
            raise InvalidEscapeSequence(
                'Invalid escape sequence "\\u%s"' % escape,
                start - 1,
                self._source,
            )

        return int(escape, 16)

    def _peek_char(self) -> Optional[str]:
        try:
            return self._source[self._position]
        except IndexError:
            return None

    def _read_number(self) -> Union[Integer, Float]:
        start = self._position
        is_float = False

        if self._peek_char() == "-":
            self._position += 1

        self._read_over_integer()

        if self._peek_char() == ".":
            self._position += 1
            is_float = True
            self._read_over_digits()

        char = self._peek_char()
        if char is not None and char in "eE":
            self._position += 1
            is_float = True

            char = self._peek_char()
            if char is not None and char in "+-":
                self._position += 1

            self._read_over_digits()

        # Explicit lookahead restrictions.
        next_char = self._peek_char()
        if next_char is not None and (
            next_char in "_." or next_char in ascii_letters
        ):
            raise InvalidNumber(
                'Invalid number, unexpected character "%s"' % next_char,
                self._position,
                self._source,
            )

        end = self._position
        value = self._source[start:end]
        cls = Float if is_float else Integer
        return cls(start, end, value, *self.loc(start))

    def _read_over_integer(self) -> None:
        char = self._peek_char()
        if char == "0":
            self._position += 1
            char = self._peek_char()
            if char is not None and char.isdigit():
                raise InvalidNumber(
                    'Invalid number, unexpected digit after 0: "%s"' % char,
                    self._position,
                    self._source,
                )
        else:
            self._read_over_digits()

    def _read_over_digits(self) -> None:
        char = self._peek_char()
        if char is None:
            raise InvalidNumber(
                "Invalid number, expected digit but found <EOF>",
                self._position,
                self._source,
            )

        if not ("0" <= char <= "9"):
            raise InvalidNumber(
                'Invalid number, expected digit but found "%s"'
                % _char_repr(char),
                self._position,
                self._source,
            )

        while char is not None and "0" <= char <= "9":
            self._position += 1
            char = self._peek_char()

    def _read_name(
        self, __ascii_letters: Container[str] = ascii_letters
    ) -> Name:
        start = self._position
        while True:
            try:
                char = self._source[self._position]
            except IndexError:
                break

            if char == "_" or char in __ascii_letters or "0" <= char <= "9":
                self._position += 1
            else:
                break

        return Name(
            start,
            self._position,
            self._source[start : self._position],
            *self.loc(start)
        )

    def next_token(self) -> Token:
        """
        Advance lexer and return the next :class:`py_sdl.lang.token.Token`
        instance. Once the end of the source has been reached, this will
        keep returning the same :class:`~py_sdl.lang.token.EOF` token.

        Raises:
            :class:`~py_sdl.exc.InvalidCharacter`
            :class:`~py_sdl.exc.UnexpectedCharacter`
            :class:`~py_sdl.exc.NonTerminatedString`
            :class:`~py_sdl.exc.InvalidEscapeSequence`
            :class:`~py_sdl.exc.InvalidNumber`
        """
        if self._eof is not None:
            return self._eof

        self._read_over_whitespace()

        try:
            char = self._source[self._position]
        except IndexError:
            self._eof = EOF(
                self._position, self._position, *self.loc(self._position)
            )
            return self._eof

        if not (char >= " " or char == "\t"):
            raise InvalidCharacter(
                'Invalid character "%s"' % _char_repr(char),
                self._position,
                self._source,
            )

        if char in SYMBOLS:
            start = self._position
            self._position += 1
            return SYMBOLS[char](start, self._position, *self.loc(start))
        elif char == "#":
            return self._read_comment()
        elif char == ".":
            return self._read_ellipsis()
        elif self._source[self._position : self._position + 3] == '"""':
            return self._read_block_string()
        elif char == '"':
            return self._read_string()
        elif char == "-" or "0" <= char <= "9":
            return self._read_number()
        elif char == "_" or char in ascii_letters:
            return self._read_name()
        else:
            raise UnexpectedCharacter(
                'Unexpected character "%s"' % _char_repr(char),
                self._position,
                self._source,
            )

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        """
        Same as :meth:`next_token` but stops iteration after the
        :class:`~py_sdl.lang.token.EOF` token has been returned once.
        """
        if self._eof is not None:
            raise StopIteration()
        return self.next_token()

# -*- coding: utf-8 -*-
"""
All the valid source tokens found in schema definition documents (as
described in `this document
<http://facebook.github.io/graphql/June2018/#sec-Source-Text>`_) are encoded
as instances of :class:`Token`.
"""

from typing import Any, Optional


class Token:
    """ Base token class.

    All token instances can be compared by simple equality which only
    considers their class, value and offsets.

    Attributes:
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed)
        value (str): Characters making up this token
        line (int): Line of the first character (1-indexed)
        column (int): Column of the first character (1-indexed)

    Args:
        start (int): Starting position for this token (0-indexed)
        end (int): End position for this token (0-indexed)
        value (str): Characters making up this token
        line (int): Line of the first character (1-indexed)
        column (Optional[int]): Column of the first character (1-indexed),
            defaults to ``start + 1``.
    """

    __slots__ = "start", "end", "value", "line", "column"

    def __init__(
        self,
        start: int,
        end: int,
        value: str,
        line: int = 1,
        column: Optional[int] = None,
    ):
        self.start = start
        self.end = end
        self.value = value
        self.line = line
        self.column = start + 1 if column is None else column

    def __repr__(self) -> str:
        return "<Token.%s: value='%s' at (%d, %d)>" % (
            self.__class__.__name__,
            self,
            self.start,
            self.end,
        )

    def __str__(self) -> str:
        return str(self.value)

    def __eq__(self, rhs: Any) -> bool:
        return (
            self.__class__ is rhs.__class__
            and self.value == rhs.value
            and self.start == rhs.start
            and self.end == rhs.end
        )


class ConstToken(Token):
    """
    Encode tokens with contants values. Should not be used directly.
    """

    value = ""

    def __init__(
        self, start: int, end: int, line: int = 1, column: Optional[int] = None
    ):
        super().__init__(start, end, self.__class__.value, line, column)


class EOF(ConstToken):
    value = "<EOF>"


class Punctuator(ConstToken):
    """ Base class for all the punctuation tokens. """


class ExclamationMark(Punctuator):
    value = "!"


class Dollar(Punctuator):
    value = "$"


class ParenOpen(Punctuator):
    value = "("


class ParenClose(Punctuator):
    value = ")"


class BracketOpen(Punctuator):
    value = "["


class BracketClose(Punctuator):
    value = "]"


class CurlyOpen(Punctuator):
    value = "{"


class CurlyClose(Punctuator):
    value = "}"


class Colon(Punctuator):
    value = ":"


class Equals(Punctuator):
    value = "="


class At(Punctuator):
    value = "@"


class Pipe(Punctuator):
    value = "|"


class Ampersand(Punctuator):
    value = "&"


class Ellip(Punctuator):
    value = "..."


class Integer(Token):
    pass


class Float(Token):
    pass


class Name(Token):
    pass


class String(Token):
    pass


class BlockString(Token):
    pass


class Comment(Token):
    """ Single line comment, ``value`` is the text following the ``#``. """


__all__ = (
    "Token",
    "EOF",
    "Punctuator",
    "ExclamationMark",
    "Dollar",
    "ParenOpen",
    "ParenClose",
    "BracketOpen",
    "BracketClose",
    "CurlyOpen",
    "CurlyClose",
    "Colon",
    "Equals",
    "At",
    "Pipe",
    "Ampersand",
    "Ellip",
    "Integer",
    "Float",
    "Name",
    "String",
    "BlockString",
    "Comment",
)

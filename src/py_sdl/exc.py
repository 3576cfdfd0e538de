# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Any, Dict, Optional, Tuple

from ._string_utils import highlight_location, index_to_loc


class SDLError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SDLSyntaxError(SDLError):
    """
    Syntax error while lexing or parsing a schema definition document.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated

    Attributes:
        message (str): Explanatory message
        position (int): 0-indexed position locating the syntax error
        source (str): Source string from which the syntax error originated
    """

    def __init__(self, message: str, position: int, source: str):
        super().__init__(message)
        self.source = source
        self.position = position
        self._highlighted = None  # type: Optional[str]

    @property
    def loc(self) -> Tuple[int, int]:
        """ Tuple[int, int]: 1-indexed (line, column) of the error. """
        return index_to_loc(self.source, self.position)

    @property
    def line(self) -> int:
        return self.loc[0]

    @property
    def column(self) -> int:
        return self.loc[1]

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    @property
    def highlighted(self) -> str:
        """
        str: Message followed by a view of the source document pointing at
        the exact location of the error.
        """
        if self._highlighted is not None:
            return self._highlighted

        highlight = highlight_location(self.source, self.position)
        self._highlighted = "%s %s" % (self.message, highlight)
        return self._highlighted

    def __str__(self) -> str:
        return self.highlighted

    def to_dict(self) -> Dict[str, Any]:
        line, col = self.loc
        return {
            "kind": self.kind,
            "message": self.message,
            "locations": [{"line": line, "column": col}],
        }


class LexError(SDLSyntaxError):
    """ The source text cannot be split into valid tokens. """


class InvalidCharacter(LexError):
    pass


class UnexpectedCharacter(LexError):
    pass


class NonTerminatedString(LexError):
    pass


class InvalidEscapeSequence(LexError):
    pass


class InvalidNumber(LexError):
    pass


class ParseError(SDLSyntaxError):
    """
    The token stream does not match the grammar.

    Args:
        message: Explanatory message
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated
        expected: Description of what the parser was looking for
        found: Text of the offending token

    Attributes:
        expected (Optional[str]): Description of what the parser was
            looking for
        found (Optional[str]): Text of the offending token
    """

    def __init__(
        self,
        message: str,
        position: int,
        source: str,
        expected: Optional[str] = None,
        found: Optional[str] = None,
    ):
        super().__init__(message, position, source)
        self.expected = expected
        self.found = found

    def to_dict(self) -> Dict[str, Any]:
        dict_ = super().to_dict()
        if self.expected is not None:
            dict_["expected"] = self.expected
        if self.found is not None:
            dict_["found"] = self.found
        return dict_


class UnexpectedToken(ParseError):
    pass


class UnexpectedEOF(ParseError):
    """
    Args:
        position: 0-indexed position locating the syntax error
        source: Source string from which the syntax error originated
        expected: Description of what the parser was looking for
    """

    def __init__(
        self, position: int, source: str, expected: Optional[str] = None
    ):
        super().__init__(
            "Unexpected <EOF>", position, source, expected, "<EOF>"
        )


class DuplicateObjectField(ParseError):
    pass

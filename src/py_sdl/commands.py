# -*- coding: utf-8 -*-
"""
Orchestration of the ``print`` command: read a schema definition document,
print it back canonically or report why it cannot be parsed.
"""

import logging
from typing import IO, Any, Union

from ._string_utils import highlight_location
from .exc import SDLSyntaxError
from .lang import parse, print_ast

logger = logging.getLogger(__name__)


def format_sdl(source: Union[str, bytes], **kwargs: Any) -> str:
    """
    Parse a schema definition document and print it back canonically.

    Args:
        source (Union[str, bytes]): source document, ``bytes`` must be UTF-8.
        **kwargs: Printer options, see :class:`py_sdl.lang.printer.ASTPrinter`

    Raises:
        :class:`~py_sdl.exc.SDLSyntaxError`: if a syntax error is encountered.
        UnicodeDecodeError: if ``source`` is not valid UTF-8.
    """
    return print_ast(parse(source), **kwargs)


def format_error(err: SDLSyntaxError) -> str:
    """
    Describe a syntax error as ``<Kind> (<line>:<column>): <message>``
    followed by a view of the offending lines.
    """
    line, column = err.loc
    excerpt = highlight_location(err.source, err.position).split("\n", 1)[1]
    return "%s (%d:%d): %s\n%s" % (err.kind, line, column, err.message, excerpt)


def run_print(
    source: Union[str, bytes], stdout: IO[str], stderr: IO[str], **kwargs: Any
) -> int:
    """
    Print a schema definition document canonically.

    Nothing is written to ``stdout`` unless the whole document could be
    parsed.

    Args:
        source (Union[str, bytes]): source document, ``bytes`` must be UTF-8.
        stdout: Where to write the canonical document.
        stderr: Where to write errors.
        **kwargs: Printer options, see :class:`py_sdl.lang.printer.ASTPrinter`

    Returns:
        int: ``0`` on success, ``1`` if the document could not be parsed.

    Raises:
        UnicodeDecodeError: if ``source`` is not valid UTF-8, reading the
            input is left to the caller.
    """
    try:
        output = format_sdl(source, **kwargs)
    except SDLSyntaxError as err:
        logger.debug("Failed to parse document: %r", err.to_dict())
        stderr.write(format_error(err))
        return 1

    stdout.write(output)
    return 0

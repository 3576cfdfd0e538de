# -*- coding: utf-8 -*-
"""
Command line interface.
"""

import logging
import sys
from typing import IO

import click

from .commands import run_print
from .version import __version__

logger = logging.getLogger(__name__)


class ClickHandler(logging.Handler):
    """ Send log records to standard error through :func:`click.echo`. """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the package.

    Args:
        verbose: Log everything, including debug records.
        quiet: Only log errors.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = ClickHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    package_logger = logging.getLogger("py_sdl")
    package_logger.setLevel(level)
    package_logger.handlers = [handler]
    package_logger.propagate = False

    logger.debug("Logging configured with level=%s", logging.getLevelName(level))


@click.group()
@click.option(
    "-v",
    "--verbose",
    "--debug",
    "verbose",
    is_flag=True,
    help="Show debug output.",
)
@click.option(
    "-q",
    "--quiet",
    "--silent",
    "quiet",
    is_flag=True,
    help="Only show errors.",
)
@click.version_option(__version__, prog_name="py-sdl")
def main(verbose: bool, quiet: bool) -> None:
    """ Work with GraphQL schema definition documents. """
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")
    configure_logging(verbose=verbose, quiet=quiet)


@main.command("print")
@click.argument(
    "schema", type=click.File("r", encoding="utf-8"), default="-", required=False
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Number of spaces per indentation level.",
)
@click.option(
    "--max-line-width",
    type=click.IntRange(min=1),
    default=80,
    show_default=True,
    help="Break argument lists and unions wider than this.",
)
@click.option(
    "--max-inline-items",
    type=click.IntRange(min=0),
    default=3,
    show_default=True,
    help="Print list and object values with at most this many items inline.",
)
@click.option(
    "--comment-descriptions",
    is_flag=True,
    help="Print all descriptions as # comments.",
)
@click.option(
    "--break-type-directives",
    is_flag=True,
    help="Print directives applied to types one per line.",
)
@click.pass_context
def print_(
    ctx: click.Context,
    schema: IO[str],
    indent: int,
    max_line_width: int,
    max_inline_items: int,
    comment_descriptions: bool,
    break_type_directives: bool,
) -> None:
    """
    Print SCHEMA (a file path, defaults to standard input) in canonical form.
    """
    logger.debug("Reading schema from %s", schema.name)
    source = schema.read()
    ctx.exit(
        run_print(
            source,
            sys.stdout,
            sys.stderr,
            indent=indent,
            max_line_width=max_line_width,
            max_inline_items=max_inline_items,
            use_legacy_comment_descriptions=comment_descriptions,
            break_type_directives=break_type_directives,
        )
    )

# -*- coding: utf-8 -*-
"""
py_sdl
~~~~~~

py_sdl parses `GraphQL <https://graphql.org/>`_ schema definition documents
and prints them back in a canonical, deterministic form.
"""

# flake8: noqa

from .version import __version__  # isort:skip

from . import lang
from .commands import format_sdl, run_print
from .lang import parse, print_ast

__all__ = ("__version__", "parse", "print_ast", "format_sdl", "run_print")

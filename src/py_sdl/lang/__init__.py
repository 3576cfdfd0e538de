# -*- coding: utf-8 -*-
"""
The :mod:`py_sdl.lang` module is responsible for parsing and printing
schema definition documents.

Grammar rules follow the `type system section of the GraphQL language
<https://graphql.github.io/graphql-spec/June2018/#sec-Type-System>`_.
"""

# flake8: noqa

from .lexer import Lexer
from .parser import Parser, parse, parse_type, parse_value
from .printer import ASTPrinter, print_ast

__all__ = (
    "parse",
    "parse_type",
    "parse_value",
    "print_ast",
    "Parser",
    "Lexer",
    "ASTPrinter",
)

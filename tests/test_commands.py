# -*- coding: utf-8 -*-

import io

import pytest

from py_sdl.commands import format_error, format_sdl, run_print
from py_sdl.exc import SDLSyntaxError
from py_sdl.lang import parse


def _run(source, **kwargs):
    stdout, stderr = io.StringIO(), io.StringIO()
    code = run_print(source, stdout, stderr, **kwargs)
    return code, stdout.getvalue(), stderr.getvalue()


def test_format_sdl():
    assert format_sdl("type B{b:Int}  scalar   A") == (
        "type B {\n  b: Int\n}\n\nscalar A\n"
    )


def test_format_sdl_accepts_printer_options():
    assert format_sdl("enum A { B }", indent=4) == "enum A {\n    B\n}\n"


def test_format_sdl_raises_syntax_errors():
    with pytest.raises(SDLSyntaxError):
        format_sdl("type")


def test_run_print_success():
    assert _run("scalar   Foo") == (0, "scalar Foo\n", "")


def test_run_print_accepts_bytes():
    assert _run(b"scalar Foo") == (0, "scalar Foo\n", "")


def test_run_print_empty_document():
    assert _run("# Nothing to see here\n") == (0, "", "")


def test_run_print_parse_error():
    code, out, err = _run("type Foo { bar: }")
    assert code == 1
    assert out == ""
    assert err == (
        'UnexpectedToken (1:17): Expected Name but found "}"\n'
        "  1:type Foo { bar: }\n"
        "                    ^\n"
    )


def test_run_print_lex_error():
    code, out, err = _run('scalar Foo\n"unterminated')
    assert code == 1
    assert out == ""
    assert err.startswith("NonTerminatedString (2:14): Unterminated string\n")


def test_run_print_writes_nothing_on_late_errors():
    code, out, err = _run("scalar A\nscalar B\nscalar")
    assert code == 1
    assert out == ""
    assert err.startswith("UnexpectedEOF (3:7): Unexpected <EOF>\n")


def test_format_error_shows_surrounding_lines():
    source = "scalar A\nscalar B\ntype C { d: ! }\nscalar E\nscalar F\nscalar G"
    with pytest.raises(SDLSyntaxError) as exc_info:
        parse(source)
    assert format_error(exc_info.value) == (
        'UnexpectedToken (3:13): Expected Name but found "!"\n'
        "  1:scalar A\n"
        "  2:scalar B\n"
        "  3:type C { d: ! }\n"
        "                ^\n"
        "  4:scalar E\n"
        "  5:scalar F\n"
    )


def test_run_print_escaped_surrogate_pair():
    assert _run('"\\ud83d\\ude00"\nscalar S') == (
        0,
        '"\U0001F600"\nscalar S\n',
        "",
    )


def test_run_print_lone_surrogate():
    code, out, err = _run('"\\ud83d"\nscalar S')
    assert code == 1
    assert out == ""
    assert err.startswith(
        'InvalidEscapeSequence (1:3): Invalid surrogate pair "\\ud83d"\n'
    )


def test_run_print_does_not_handle_invalid_utf8():
    with pytest.raises(UnicodeDecodeError):
        _run(b"scalar \xff")

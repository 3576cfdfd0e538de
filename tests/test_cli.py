# -*- coding: utf-8 -*-

import logging

import pytest
from click.testing import CliRunner

from py_sdl import __version__
from py_sdl.cli import configure_logging, main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    configure_logging()


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_print_file(runner, tmp_path, fixture_file):
    schema = tmp_path / "schema.graphql"
    schema.write_text(
        fixture_file("schema-kitchen-sink.graphql"), encoding="utf-8"
    )
    result = runner.invoke(main, ["print", str(schema)])
    assert result.exit_code == 0
    assert result.output == fixture_file("schema-kitchen-sink.printed.graphql")


def test_print_stdin(runner):
    result = runner.invoke(main, ["print"], input="type B{b:Int}")
    assert result.exit_code == 0
    assert result.output == "type B {\n  b: Int\n}\n"


def test_print_explicit_stdin(runner):
    result = runner.invoke(main, ["print", "-"], input="scalar   A")
    assert result.exit_code == 0
    assert result.output == "scalar A\n"


def test_print_syntax_error(runner):
    result = runner.invoke(main, ["print"], input="type Foo { bar: }")
    assert result.exit_code == 1
    assert 'UnexpectedToken (1:17): Expected Name but found "}"' in result.output
    assert "type Foo {\n" not in result.output


def test_print_missing_file(runner, tmp_path):
    result = runner.invoke(main, ["print", str(tmp_path / "missing.graphql")])
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "args, source, expected",
    [
        (["--indent", "4"], "enum A { B }", "enum A {\n    B\n}\n"),
        (
            ["--max-line-width", "10"],
            "scalar A @a(b: 1, c: 2)",
            "scalar A @a(\n  b: 1\n  c: 2\n)\n",
        ),
        (
            ["--max-inline-items", "1"],
            "scalar A @a(b: [1, 2])",
            "scalar A @a(\n  b: [\n    1\n    2\n  ]\n)\n",
        ),
        (
            ["--comment-descriptions"],
            '"Desc"\nscalar A',
            "# Desc\nscalar A\n",
        ),
        (
            ["--break-type-directives"],
            "scalar A @a @b",
            "scalar A\n  @a\n  @b\n",
        ),
    ],
)
def test_print_options(runner, args, source, expected):
    result = runner.invoke(main, ["print"] + args, input=source)
    assert result.exit_code == 0
    assert result.output == expected


def test_print_rejects_negative_indent(runner):
    result = runner.invoke(main, ["print", "--indent", "-1"], input="scalar A")
    assert result.exit_code == 2


def test_verbose_and_quiet_are_exclusive(runner):
    result = runner.invoke(main, ["-v", "-q", "print"], input="scalar A")
    assert result.exit_code == 2


def test_verbose_logs_debug_output(runner):
    result = runner.invoke(main, ["--verbose", "print"], input="scalar A")
    assert result.exit_code == 0
    assert "Parsed 1 definition(s)" in result.output


def test_configure_logging_levels():
    configure_logging(verbose=True)
    assert logging.getLogger("py_sdl").level == logging.DEBUG
    configure_logging(quiet=True)
    assert logging.getLogger("py_sdl").level == logging.ERROR
    configure_logging()
    assert logging.getLogger("py_sdl").level == logging.WARNING
    assert not logging.getLogger("py_sdl").propagate


def test_no_command_prints_help(runner):
    result = runner.invoke(main, [])
    assert "Usage:" in result.output
    assert "print" in result.output


@pytest.mark.parametrize(
    "flag, level",
    [
        ("-v", logging.DEBUG),
        ("--debug", logging.DEBUG),
        ("-q", logging.ERROR),
        ("--silent", logging.ERROR),
    ],
)
def test_logging_flag_aliases(runner, flag, level):
    result = runner.invoke(main, [flag, "print"], input="scalar A")
    assert result.exit_code == 0
    assert logging.getLogger("py_sdl").level == level


def test_print_escaped_surrogate_pair(runner):
    result = runner.invoke(main, ["print"], input='"\\ud83d\\ude00" scalar S\n')
    assert result.exit_code == 0
    assert result.output == '"\U0001F600"\nscalar S\n'

"""Functional tests for the stream filter subcommands of ``bashful``.

Each test feeds stdin through ``CliRunner`` and checks what a user sees:
stdout contents and the exit code.
"""

import pytest

from bashful.entrypoints.cli.main import bashful

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("args", "stdin", "expected"),
    [
        (["lower"], "Hello\nWORLD\n", "hello\nworld\n"),
        (["upper"], "Hello\n", "HELLO\n"),
        (["title"], "o'brien jones\n", "O'brien Jones\n"),
        (["trim"], "   padded   \n", "padded\n"),
        (["trim", "-"], "--x--\n", "x\n"),
        (["ltrim", "0"], "0042\n", "42\n"),
        (["rtrim", "[:punct:]"], "done!!!\n", "done\n"),
        (["squeeze"], "  a   b  \n", "a b\n"),
        (["squeeze", "/"], "//usr//local///bin/\n", "usr/local/bin\n"),
        (["trim-lines"], "\n\nbody\n\n", "body\n"),
        (["squeeze-lines"], "a\n\n\n\nb\n", "a\n\nb\n"),
    ],
)
def test_stream_filters(runner, args, stdin, expected):
    """Case and whitespace filters transform stdin to stdout."""
    result = runner.invoke(bashful, args, input=stdin)
    assert result.exit_code == 0, result.output
    assert result.output == expected


def test_empty_input_prints_nothing(runner):
    """An empty result prints nothing at all."""
    result = runner.invoke(bashful, ["trim"], input="   \n")
    assert result.exit_code == 0
    assert result.output == ""


@pytest.mark.parametrize(
    ("args", "stdin", "expected"),
    [
        (["split"], "a, b,,c\n", "a\nb\n\nc\n"),
        (["split", ":"], "/bin:/usr/bin\n", "/bin\n/usr/bin\n"),
        (["split", " "], "a   b\n", "a\nb\n"),
        (["join"], "a\nb\nc\n", "a, b, c\n"),
        (["join", "-"], "a\nb\n", "a-b\n"),
        (["sort"], "c b a\n", "a b c\n"),
        (["sort", "-u"], "c b b b a\n", "a b c\n"),
        (["sort", "-r"], "a b c\n", "c b a\n"),
        (["sort", "-u", "-r", ","], "a,b,a\n", "b,a\n"),
    ],
)
def test_list_commands(runner, args, stdin, expected):
    """split/join/sort structure stdin into tokens."""
    result = runner.invoke(bashful, args, input=stdin)
    assert result.exit_code == 0, result.output
    assert result.output == expected


def test_join_empty_input(runner):
    """Joining no lines prints nothing."""
    result = runner.invoke(bashful, ["join"], input="")
    assert result.exit_code == 0
    assert result.output == ""


@pytest.mark.parametrize(
    ("args", "stdin", "expected"),
    [
        (["join", ","], "a\x0bb\nc\n", "a\x0bb,c\n"),
        (["join", ","], "a\x0cb c\n", "a\x0cb c\n"),
        (["common-prefix"], "ab\x1cx\nab\x1cy\n", "ab\x1c\n"),
    ],
)
def test_only_newlines_separate_lines(runner, args, stdin, expected):
    """Vertical tabs and other line-like characters stay inside a line."""
    result = runner.invoke(bashful, args, input=stdin)
    assert result.exit_code == 0, result.output
    assert result.output == expected


@pytest.mark.parametrize(
    ("args", "stdin", "expected"),
    [
        (["common-prefix", "spam", "space"], None, "spa\n"),
        (["common-prefix", "foo", "bar"], None, ""),
        (["common-prefix"], "foobar\nfoobaz\n", "fooba\n"),
        (["common-suffix", "broom", "groom"], None, "room\n"),
        (["common-suffix"], "foobar\nbabar\n", "bar\n"),
    ],
)
def test_common_affix_commands(runner, args, stdin, expected):
    """Arguments take precedence; otherwise lines of stdin are used."""
    result = runner.invoke(bashful, args, input=stdin)
    assert result.exit_code == 0, result.output
    assert result.output == expected


def test_first(runner):
    """first prints the first non-empty value."""
    result = runner.invoke(bashful, ["first", "", "b", "c"])
    assert result.exit_code == 0
    assert result.output == "b\n"


def test_first_without_value_fails(runner):
    """first exits 1 with a message when every value is empty."""
    result = runner.invoke(bashful, ["first", "", ""])
    assert result.exit_code == 1
    assert "No non-empty argument found" in result.output


@pytest.mark.parametrize(
    ("args", "exit_code"),
    [(["contains", "b", "a", "b"], 0), (["contains", "z", "a", "b"], 1)],
)
def test_contains(runner, args, exit_code):
    """contains reports membership through its exit code only."""
    result = runner.invoke(bashful, args)
    assert result.exit_code == exit_code
    assert result.output == ""


def test_actions_lists_registered_operations(runner):
    """actions lists operations, filtered by prefix."""
    result = runner.invoke(bashful, ["actions", "common"])
    assert result.exit_code == 0
    assert result.output == "common-prefix\ncommon-suffix\n"

    result = runner.invoke(bashful, ["actions"])
    assert "flatten-file" in result.output.splitlines()

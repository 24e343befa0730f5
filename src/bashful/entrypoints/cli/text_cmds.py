"""Text filter subcommands.

Each command adapts one function of :mod:`bashful.text` to standard streams.

Behavior
- Stream input is read whole and trailing newlines are dropped before
  filtering, like shell command substitution; results are printed with a
  single trailing newline, and empty results print nothing.
- ``flatten`` and ``flatten-file`` read placeholder values from the process
  environment. ``FLATTEN_L`` / ``FLATTEN_R`` override the ``{{`` / ``}}``
  delimiters.

Failure modes
- Library errors (missing file, no non-empty value) exit with status 1 and a
  message on stderr. ``contains`` exits 1 silently when the needle is absent.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

import click

from bashful import config, text
from bashful.errors import BashfulError

from .helpers import error, warn


class FilterError(click.ClickException):
    """A library error surfaced to the user, exit status 1."""

    def show(self, file=None) -> None:  # pylint: disable=unused-argument
        error(self.format_message())


def _read_stdin() -> str:
    return click.get_text_stream("stdin").read().rstrip("\n")


def _read_lines() -> list[str]:
    # Only "\n" ends a line; other separators stay inside the token.
    content = _read_stdin()
    return content.split("\n") if content else []


def _emit(result: str) -> None:
    if result:
        click.echo(result)


def _environment(names: Sequence[str]) -> dict[str, str]:
    """Build the placeholder mapping, restricted to ``names`` when given."""
    environ = config.environment()
    if not names:
        return environ
    for name in names:
        if name not in environ:
            warn(f"{name} is not set; substituting an empty string")
    return text.named(names, environ)


def _stream_filter(
    name: str, fn: Callable[[str], str], help_text: str
) -> click.Command:
    @click.command(name=name, help=help_text)
    def command() -> None:
        _emit(fn(_read_stdin()))

    return command


def _charset_filter(
    name: str, fn: Callable[[str, str | None], str], help_text: str
) -> click.Command:
    @click.command(name=name, help=help_text)
    @click.argument("charset", required=False)
    def command(charset: str | None) -> None:
        _emit(fn(_read_stdin(), charset))

    return command


# ============================================================================
#                           Case and whitespace
# ============================================================================

lower = _stream_filter("lower", text.lower, "Lowercase stdin.")
upper = _stream_filter("upper", text.upper, "Uppercase stdin.")
title = _stream_filter(
    "title",
    text.title,
    "Capitalize each word of stdin; letters after an apostrophe stay lowercase.",
)
trim_lines = _stream_filter(
    "trim-lines", text.trim_lines, "Drop leading and trailing blank lines."
)
squeeze_lines = _stream_filter(
    "squeeze-lines",
    text.squeeze_lines,
    "Collapse runs of blank lines, then drop leading and trailing ones.",
)

CHARSET_HELP = (
    " CHARSET is a set of literal characters and/or POSIX classes such as "
    "[:space:] or [:digit:]; it defaults to whitespace."
)

trim = _charset_filter(
    "trim", text.trim, "Strip CHARSET from both ends." + CHARSET_HELP
)
ltrim = _charset_filter(
    "ltrim", text.ltrim, "Strip CHARSET from the start." + CHARSET_HELP
)
rtrim = _charset_filter(
    "rtrim", text.rtrim, "Strip CHARSET from the end." + CHARSET_HELP
)
squeeze = _charset_filter(
    "squeeze",
    text.squeeze,
    "Collapse runs of CHARSET to one character, then trim." + CHARSET_HELP,
)


# ============================================================================
#                               Lists
# ============================================================================


@click.command(name="split")
@click.argument("delimiter", required=False, default=",")
def split(delimiter: str) -> None:
    """Split stdin on DELIMITER (default ",") and print one token per line.

    A single space or tab delimiter collapses runs; any other delimiter keeps
    empty tokens.
    """
    for token in text.split_string(_read_stdin(), delimiter):
        click.echo(token)


@click.command(name="join")
@click.argument("delimiter", required=False, default=", ")
def join(delimiter: str) -> None:
    """Join the lines of stdin with DELIMITER (default ", ")."""
    lines = _read_lines()
    if lines:
        click.echo(text.join_lines(lines, delimiter), nl=False)


@click.command(name="sort")
@click.option("-u", "--unique", is_flag=True, help="Drop duplicate tokens.")
@click.option("-r", "--reverse", is_flag=True, help="Sort in descending order.")
@click.argument("delimiter", required=False, default=" ")
def sort(unique: bool, reverse: bool, delimiter: str) -> None:
    """Sort the DELIMITER-separated tokens of stdin (default: a space)."""
    _emit(text.sort_list(_read_stdin(), delimiter, unique=unique, reverse=reverse))


# ============================================================================
#                           Common prefix / suffix
# ============================================================================


def _strings_or_stdin(strings: tuple[str, ...]) -> Sequence[str]:
    return strings if strings else _read_lines()


@click.command(name="common-prefix")
@click.argument("strings", nargs=-1)
def common_prefix(strings: tuple[str, ...]) -> None:
    """Print the longest common prefix of STRINGS (or of the lines of stdin)."""
    _emit(text.common_prefix(_strings_or_stdin(strings)))


@click.command(name="common-suffix")
@click.argument("strings", nargs=-1)
def common_suffix(strings: tuple[str, ...]) -> None:
    """Print the longest common suffix of STRINGS (or of the lines of stdin)."""
    _emit(text.common_suffix(_strings_or_stdin(strings)))


# ============================================================================
#                               Templating
# ============================================================================


@click.command(name="flatten")
@click.argument("template")
@click.argument("names", nargs=-1)
def flatten(template: str, names: tuple[str, ...]) -> None:
    """Substitute {{NAME}} placeholders in TEMPLATE ("-" reads stdin).

    Only the given NAMES are substituted when any are listed; otherwise every
    placeholder is, with unset variables expanding to nothing.
    """
    if template == "-":
        template = _read_stdin()
    left, right = config.placeholder_delimiters()
    _emit(text.flatten(template, _environment(names), names or None, left, right))


@click.command(name="flatten-file")
@click.argument("path", type=click.Path(path_type=Path))
@click.argument("names", nargs=-1)
def flatten_file(path: Path, names: tuple[str, ...]) -> None:
    """Substitute {{NAME}} placeholders in the file at PATH, in place."""
    left, right = config.placeholder_delimiters()
    try:
        text.flatten_file(path, _environment(names), names or None, left, right)
    except BashfulError as e:
        raise FilterError(str(e)) from e


# ============================================================================
#                               Helpers
# ============================================================================


@click.command(name="first")
@click.argument("values", nargs=-1)
def first(values: tuple[str, ...]) -> None:
    """Print the first non-empty VALUE; exit 1 if there is none."""
    try:
        click.echo(text.first_nonempty(*values))
    except BashfulError as e:
        raise FilterError(str(e)) from e


@click.command(name="contains")
@click.argument("needle")
@click.argument("items", nargs=-1)
@click.pass_context
def contains(ctx: click.Context, needle: str, items: tuple[str, ...]) -> None:
    """Exit 0 if NEEDLE is one of ITEMS, 1 otherwise."""
    if not text.in_array(needle, items):
        ctx.exit(1)


@click.command(name="actions")
@click.argument("prefix", required=False, default="")
def actions(prefix: str) -> None:
    """List the registered operations, optionally only those starting with PREFIX."""
    for name in text.OPERATIONS.names(prefix):
        click.echo(name)


COMMANDS: list[click.Command] = [
    lower,
    upper,
    title,
    trim,
    ltrim,
    rtrim,
    squeeze,
    trim_lines,
    squeeze_lines,
    split,
    join,
    sort,
    common_prefix,
    common_suffix,
    flatten,
    flatten_file,
    first,
    contains,
    actions,
]

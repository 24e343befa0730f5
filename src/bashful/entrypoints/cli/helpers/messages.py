"""Terminal message helpers for the Bashful CLI.

Messages go to stderr so stdout only ever carries filter output. Glyphs fall
back to ASCII when stderr cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Return "⚠️", or "[!]" when stderr cannot encode it."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def error_glyph() -> str:
    """Return "❌", or "[X]" when stderr cannot encode it."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  GREETING is not set; substituting an empty string``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  No such file: 'missing.txt'``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)

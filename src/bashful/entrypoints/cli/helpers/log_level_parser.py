"""Parsing of ``-L NAME=LEVEL`` logger-level options.

Values may be repeated options or a single comma/space separated string (as
read from ``BASHFUL_LOGGER_LEVELS``).
"""

import logging
import re

import click

# Per-logger levels applied before any NAME=LEVEL item; none by default.
DEFAULT_LIB_LEVELS: dict[str, int] = {}


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Flatten the option value into non-empty ``NAME=LEVEL`` items."""
    values = [value] if isinstance(value, str) else list(value)
    items: list[str] = []
    for v in values:
        items.extend(s for s in re.split(r"[,\s]+", v) if s)
    return items


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL pairs into a name->level dict.

    Later items override earlier ones and the defaults in
    ``DEFAULT_LIB_LEVELS``. Level names are case-insensitive.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value or ()):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels

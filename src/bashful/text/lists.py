"""Splitting delimited strings into tokens and joining them back.

Delimiters are always literal strings. A delimiter that is a single blank
character (space or tab) behaves like shell word splitting: runs of it
separate just once and no empty tokens come out. Every other delimiter keeps
the empty tokens produced by adjacent delimiters.
"""

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

BLANKS = frozenset(" \t")

DEFAULT_SPLIT_DELIMITER = ","
DEFAULT_JOIN_DELIMITER = ", "
DEFAULT_SORT_DELIMITER = " "


def _delimiter_or_default(delimiter: str | None, default: str) -> str:
    if not delimiter:
        logger.warning("Empty delimiter; falling back to %r", default)
        return default
    return delimiter


def split_string(text: str, delimiter: str = DEFAULT_SPLIT_DELIMITER) -> list[str]:
    """Split ``text`` on a literal delimiter into whitespace-trimmed tokens.

    Args:
        text: The delimited string.
        delimiter: Literal separator. Empty falls back to ``","``.

    Returns:
        list[str]: Tokens in input order. Empty text gives an empty list,
        but text holding only whitespace is one empty token for a non-blank
        delimiter. So ``join_lines([])`` (a lone newline) splits back to
        ``[""]``; the empty sequence does not round-trip.

    Example:
        >>> split_string("a, b,,c")
        ['a', 'b', '', 'c']
        >>> split_string("  a   b ", " ")
        ['a', 'b']
    """
    delimiter = _delimiter_or_default(delimiter, DEFAULT_SPLIT_DELIMITER)
    if not text:
        return []

    tokens = [token.strip() for token in text.split(delimiter)]
    if delimiter in BLANKS:
        return [token for token in tokens if token]
    return tokens


def join_lines(tokens: Iterable[str], delimiter: str = DEFAULT_JOIN_DELIMITER) -> str:
    """Join tokens with ``delimiter`` and terminate the result with a newline.

    Example:
        >>> join_lines(["a", "b", "c"])
        'a, b, c\\n'
    """
    return delimiter.join(tokens) + "\n"


def sort_list(
    text: str,
    delimiter: str = DEFAULT_SORT_DELIMITER,
    unique: bool = False,
    reverse: bool = False,
) -> str:
    """Sort the tokens of a delimited string by code point.

    Args:
        text: The delimited string.
        delimiter: Literal separator used to split and to rejoin. Empty falls
            back to a single space.
        unique: Drop duplicate tokens when True.
        reverse: Sort in descending order when True.

    Returns:
        str: The sorted tokens joined with ``delimiter``.

    Example:
        >>> sort_list("c b b a", unique=True)
        'a b c'
    """
    delimiter = _delimiter_or_default(delimiter, DEFAULT_SORT_DELIMITER)
    tokens = sorted(split_string(text, delimiter), reverse=reverse)
    if unique:
        tokens = list(dict.fromkeys(tokens))
    return delimiter.join(tokens)

"""Case conversion and whitespace normalization filters.

Character-set arguments (``chars``) are strings of literal characters that may
also contain POSIX classes such as ``[:space:]`` or ``[:digit:]``. ``None`` or
an empty string means whitespace. An unknown class is logged and replaced by
the whitespace default rather than raised.
"""

import logging
import re

from bashful.errors import InvalidInputError

logger = logging.getLogger(__name__)

WHITESPACE = r"\s"

# Regex character-class fragments for the POSIX classes we accept.
POSIX_CLASSES = {
    "space": r"\s",
    "blank": r" \t",
    "alpha": r"a-zA-Z",
    "digit": r"0-9",
    "alnum": r"a-zA-Z0-9",
    "upper": r"A-Z",
    "lower": r"a-z",
    "punct": r"!-/:-@\[-`{-~",
}

_POSIX_CLASS_RE = re.compile(r"\[:([A-Za-z]*):\]")
_WORD_START_RE = re.compile(r"(?<!\S)([^\w\s]*)(\w)")
_AFTER_APOSTROPHE_RE = re.compile(r"'(\w)")


def parse_charset(chars: str | None) -> str:
    """Translate a charset argument into a regex character-class body.

    Args:
        chars: Literal characters and/or POSIX classes, or None for whitespace.

    Returns:
        str: A fragment to place between ``[`` and ``]`` in a pattern.

    Raises:
        InvalidInputError: If ``chars`` names an unknown POSIX class.

    Example:
        >>> parse_charset("[:digit:]-")
        '0-9\\\\-'
    """
    if not chars:
        return WHITESPACE

    parts: list[str] = []
    pos = 0
    for match in _POSIX_CLASS_RE.finditer(chars):
        parts.extend(re.escape(c) for c in chars[pos : match.start()])
        name = match.group(1)
        if name not in POSIX_CLASSES:
            raise InvalidInputError(f"Unknown character class: [:{name}:]")
        parts.append(POSIX_CLASSES[name])
        pos = match.end()
    parts.extend(re.escape(c) for c in chars[pos:])
    return "".join(parts)


def _charset_or_default(chars: str | None) -> str:
    try:
        return parse_charset(chars)
    except InvalidInputError as e:
        logger.warning("%s; falling back to whitespace", e)
        return WHITESPACE


# ============================================================================
#                               Case
# ============================================================================


def lower(text: str) -> str:
    """Lowercase every character."""
    return text.lower()


def upper(text: str) -> str:
    """Uppercase every character."""
    return text.upper()


def title(text: str) -> str:
    """Capitalize the first letter of every whitespace-delimited word.

    Everything else is lowercased, and a letter right after an apostrophe is
    always lowercase: ``"o'BRIEN jones"`` becomes ``"O'brien Jones"``.
    """
    text = _WORD_START_RE.sub(lambda m: m.group(1) + m.group(2).upper(), text.lower())
    return _AFTER_APOSTROPHE_RE.sub(lambda m: "'" + m.group(1).lower(), text)


# ============================================================================
#                               Trimming
# ============================================================================


def ltrim(text: str, chars: str | None = None) -> str:
    """Remove ``chars`` from the start of ``text``."""
    charset = _charset_or_default(chars)
    return re.sub(rf"\A[{charset}]+", "", text)


def rtrim(text: str, chars: str | None = None) -> str:
    """Remove ``chars`` from the end of ``text``."""
    charset = _charset_or_default(chars)
    return re.sub(rf"[{charset}]+\Z", "", text)


def trim(text: str, chars: str | None = None) -> str:
    """Remove ``chars`` from both ends of ``text``; the interior is untouched."""
    return ltrim(rtrim(text, chars), chars)


def squeeze(text: str, chars: str | None = None) -> str:
    """Collapse runs of ``chars`` to their first character, then trim.

    Example:
        >>> squeeze("  a   b \\t c  ")
        'a b c'
    """
    charset = _charset_or_default(chars)
    squeezed = re.sub(rf"([{charset}])[{charset}]+", r"\1", text)
    return re.sub(rf"\A[{charset}]+|[{charset}]+\Z", "", squeezed)


# ============================================================================
#                               Blank lines
# ============================================================================


def _is_blank(line: str) -> bool:
    return not line.strip()


def trim_lines(text: str) -> str:
    """Drop leading and trailing blank (empty or whitespace-only) lines."""
    lines = text.split("\n")
    start = 0
    while start < len(lines) and _is_blank(lines[start]):
        start += 1
    end = len(lines)
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    return "\n".join(lines[start:end])


def squeeze_lines(text: str) -> str:
    """Collapse runs of blank lines into one empty line, then trim blank lines."""
    out: list[str] = []
    for line in trim_lines(text).split("\n"):
        if _is_blank(line):
            if out and out[-1] == "":
                continue
            line = ""
        out.append(line)
    return "\n".join(out)

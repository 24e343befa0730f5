"""Placeholder substitution for texts and files.

A placeholder is a name wrapped in delimiters (``{{name}}`` by default).
Values come from an explicit mapping; use :func:`bashful.config.environment`
to build one from the process environment. Unset names expand to an empty
string, like unset shell variables.
"""

import logging
import os
import re
import stat
import tempfile
from collections.abc import Iterable, Mapping
from pathlib import Path

from bashful.config import DEFAULT_LEFT, DEFAULT_RIGHT
from bashful.errors import NotFoundError

logger = logging.getLogger(__name__)

NAME_RE = re.compile(r"[A-Za-z0-9_]+")

# Bytes that are not UTF-8 pass through a file rewrite unchanged.
FILE_ERRORS = "surrogateescape"


def placeholder_names(
    text: str, left: str = DEFAULT_LEFT, right: str = DEFAULT_RIGHT
) -> list[str]:
    """Return the sorted, distinct placeholder names found in ``text``."""
    pattern = re.compile(f"{re.escape(left)}({NAME_RE.pattern}){re.escape(right)}")
    return sorted({m.group(1) for m in pattern.finditer(text)})


def _valid_names(names: Iterable[str]) -> list[str]:
    valid = []
    for name in names:
        if NAME_RE.fullmatch(name):
            valid.append(name)
        else:
            logger.warning("Skipping invalid placeholder name %r", name)
    return valid


def flatten(
    text: str,
    environ: Mapping[str, str],
    names: Iterable[str] | None = None,
    left: str = DEFAULT_LEFT,
    right: str = DEFAULT_RIGHT,
) -> str:
    """Replace ``left + name + right`` with the value of each name.

    Names are processed one at a time, in order, with a plain literal
    replacement, so a value that itself contains a placeholder may be expanded
    by a later name.

    Args:
        text: Text containing placeholders.
        environ: Name -> value mapping. Missing names expand to ``""``.
        names: Names to substitute, in order. Defaults to the sorted union of
            the mapping's valid names and the placeholder names found in
            ``text``. Only invalid names given explicitly are logged.
        left: Opening delimiter; empty falls back to ``{{``.
        right: Closing delimiter; empty falls back to ``}}``.

    Returns:
        str: The substituted text.

    Example:
        >>> flatten("Hello {{name}}!", {"name": "World"})
        'Hello World!'
    """
    left = left or DEFAULT_LEFT
    right = right or DEFAULT_RIGHT

    if names is None:
        # Exported shell functions and the like are not placeholder names.
        defined = {name for name in environ if NAME_RE.fullmatch(name)}
        names = sorted(defined | set(placeholder_names(text, left, right)))

    for name in _valid_names(names):
        placeholder = f"{left}{name}{right}"
        if placeholder in text:
            logger.debug("Substituting %s", placeholder)
            text = text.replace(placeholder, environ.get(name, ""))
    return text


def flatten_file(
    path: str | Path,
    environ: Mapping[str, str],
    names: Iterable[str] | None = None,
    left: str = DEFAULT_LEFT,
    right: str = DEFAULT_RIGHT,
) -> None:
    """Substitute placeholders in a file, rewriting it in place.

    The new contents are written to a temporary file next to the target, which
    then replaces the target with ``os.replace``. Readers see either the old
    or the new contents, and a failure leaves the original untouched. Bytes
    that are not valid UTF-8 are written back as they were read.

    Args:
        path: File to rewrite.
        environ: Name -> value mapping, as for :func:`flatten`.
        names: Names to substitute, as for :func:`flatten`.
        left: Opening delimiter.
        right: Closing delimiter.

    Raises:
        NotFoundError: If ``path`` is not an existing regular file.
    """
    path = Path(path)
    if not path.is_file():
        raise NotFoundError(path)
    target = path.resolve()

    with target.open("r", encoding="utf-8", errors=FILE_ERRORS, newline="") as f:
        original = f.read()
    flattened = flatten(original, environ, names, left, right)

    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            errors=FILE_ERRORS,
            newline="",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            tmp.write(flattened)
        os.chmod(tmp_path, stat.S_IMODE(target.stat().st_mode))
        os.replace(tmp_path, target)
    except BaseException:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)
        raise
    logger.debug("Rewrote %s", target)

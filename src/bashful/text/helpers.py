"""Small selection and lookup helpers."""

from collections.abc import Iterable, Mapping

from bashful.errors import NoMatchError


def first_nonempty(*values: str) -> str:
    """Return the first non-empty value.

    Raises:
        NoMatchError: If every value is empty (or none were given).
    """
    for value in values:
        if value:
            return value
    raise NoMatchError("No non-empty argument found")


def in_array(needle: str, items: Iterable[str]) -> bool:
    """Return True if ``needle`` is exactly equal to one of ``items``."""
    return any(item == needle for item in items)


def named(names: Iterable[str], environ: Mapping[str, str]) -> dict[str, str]:
    """Resolve ``names`` against ``environ``, in order; unset names map to ``""``."""
    return {name: environ.get(name, "") for name in names}

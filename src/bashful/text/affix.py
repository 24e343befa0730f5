"""Longest common prefix and suffix of a sequence of strings."""

from collections.abc import Iterable


def _shared_prefix(a: str, b: str) -> str:
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return a[:i]
    return a[: min(len(a), len(b))]


def common_prefix(strings: Iterable[str]) -> str:
    """Return the longest string that is a prefix of every input string.

    The prefix is seeded with the first string and narrowed by each following
    one; consumption stops as soon as it becomes empty, so ``strings`` may be
    a lazy or unbounded iterator.

    Args:
        strings: Any iterable of strings.

    Returns:
        str: The common prefix, or ``""`` for no input or no shared prefix.

    Example:
        >>> common_prefix(["spam", "space"])
        'spa'
    """
    iterator = iter(strings)
    prefix = next(iterator, "")
    for s in iterator:
        if not prefix:
            break
        prefix = _shared_prefix(prefix, s)
    return prefix


def common_suffix(strings: Iterable[str]) -> str:
    """Return the longest string that is a suffix of every input string.

    Example:
        >>> common_suffix(["broom", "groom"])
        'room'
    """
    return common_prefix(s[::-1] for s in strings)[::-1]

"""Configuration utilities for BASHFUL.

This module is the boundary between the process environment and the text
filters: the filters take explicit mappings, and the helpers here build those
mappings from ``os.environ``.
"""

import os
from collections.abc import Mapping

FLATTEN_LEFT_KEY = "FLATTEN_L"  # pragma: no mutate
FLATTEN_RIGHT_KEY = "FLATTEN_R"  # pragma: no mutate

DEFAULT_LEFT = "{{"
DEFAULT_RIGHT = "}}"


def environment(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Snapshot the key-value environment used for placeholder lookups.

    Args:
        environ: Mapping to copy. Defaults to the process environment.

    Returns:
        A plain dict, detached from later changes to the source mapping.
    """
    return dict(os.environ if environ is None else environ)


def placeholder_delimiters(
    environ: Mapping[str, str] | None = None,
) -> tuple[str, str]:
    """Return the ``(left, right)`` placeholder delimiters.

    ``FLATTEN_L`` and ``FLATTEN_R`` override the defaults; unset or empty
    values fall back to ``{{`` and ``}}``.
    """
    env = os.environ if environ is None else environ
    left = env.get(FLATTEN_LEFT_KEY) or DEFAULT_LEFT
    right = env.get(FLATTEN_RIGHT_KEY) or DEFAULT_RIGHT
    return left, right

"""Text filters.

Every filter is a pure function of its arguments, except ``flatten_file``
which rewrites a file in place. ``OPERATIONS`` registers each of them under
the name of its CLI subcommand.
"""

from bashful.registry import OperationRegistry

from .affix import common_prefix, common_suffix
from .helpers import first_nonempty, in_array, named
from .lists import join_lines, sort_list, split_string
from .template import flatten, flatten_file, placeholder_names
from .transform import (
    lower,
    ltrim,
    rtrim,
    squeeze,
    squeeze_lines,
    title,
    trim,
    trim_lines,
    upper,
)

__all__ = [
    "OPERATIONS",
    # Case and whitespace
    "lower",
    "upper",
    "title",
    "trim",
    "ltrim",
    "rtrim",
    "squeeze",
    "trim_lines",
    "squeeze_lines",
    # Lists
    "split_string",
    "join_lines",
    "sort_list",
    # Common affixes
    "common_prefix",
    "common_suffix",
    # Templating
    "flatten",
    "flatten_file",
    "placeholder_names",
    # Helpers
    "first_nonempty",
    "in_array",
    "named",
]

OPERATIONS = OperationRegistry(
    {
        "lower": lower,
        "upper": upper,
        "title": title,
        "trim": trim,
        "ltrim": ltrim,
        "rtrim": rtrim,
        "squeeze": squeeze,
        "trim-lines": trim_lines,
        "squeeze-lines": squeeze_lines,
        "split": split_string,
        "join": join_lines,
        "sort": sort_list,
        "common-prefix": common_prefix,
        "common-suffix": common_suffix,
        "flatten": flatten,
        "flatten-file": flatten_file,
        "first": first_nonempty,
        "contains": in_array,
    }
)

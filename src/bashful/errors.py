"""Error definitions shared by the text filters and the CLI."""

from pathlib import Path

# ============================================================================
#                           General errors
# ============================================================================


class BashfulError(Exception):
    """Base class for bashful errors."""


class InvalidInputError(BashfulError, ValueError):
    """Raised when a delimiter, charset or name argument is malformed.

    Public filters recover from this by falling back to their documented
    defaults; only the low-level parsers let it escape.
    """


# ============================================================================
#                           Lookup failures
# ============================================================================


class NotFoundError(BashfulError, FileNotFoundError):
    """Raised when a file to rewrite does not exist or is not a regular file."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"No such file: '{path}'")
        self.path = Path(path)


class NoMatchError(BashfulError, LookupError):
    """Raised when a selection helper finds no acceptable value."""


class UnknownOperationError(BashfulError, LookupError):
    """Raised when an operation name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No operation registered under '{name}'")
        self.name = name

"""Registry of named text operations.

Operations are registered explicitly under a name when ``bashful.text`` is
imported; callers enumerate them by prefix or look one up by name.
"""

import logging
from collections.abc import Callable, Iterator, Mapping

from bashful.errors import UnknownOperationError

logger = logging.getLogger(__name__)

Handler = Callable[..., object]


class OperationRegistry:
    """A mapping of operation names to their handlers.

    Args:
        handlers: Optional initial name -> handler mapping, registered in order.

    Example:
        >>> registry = OperationRegistry({"upper": str.upper})
        >>> registry.get("upper")("abc")
        'ABC'
    """

    def __init__(self, handlers: Mapping[str, Handler] | None = None) -> None:
        self._handlers: dict[str, Handler] = {}
        for name, handler in (handlers or {}).items():
            self.register(name, handler)

    def register(self, name: str, handler: Handler) -> Handler:
        """Register ``handler`` under ``name``.

        Raises:
            ValueError: If the name is empty or already taken.
        """
        if not name:
            raise ValueError("Operation name must not be empty")
        if name in self._handlers:
            raise ValueError(f"Operation '{name}' is already registered")
        logger.debug("Registering operation %s -> %s", name, _handler_name(handler))
        self._handlers[name] = handler
        return handler

    def get(self, name: str) -> Handler:
        """Return the handler registered under ``name``.

        Raises:
            UnknownOperationError: If nothing is registered under that name.
        """
        try:
            return self._handlers[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def names(self, prefix: str = "") -> list[str]:
        """Sorted names of registered operations starting with ``prefix``."""
        return sorted(name for name in self._handlers if name.startswith(prefix))

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._handlers)


def _handler_name(fn: Handler) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)

"""Unit tests for bashful.registry and the registered text operations."""

import pytest

from bashful import text
from bashful.errors import UnknownOperationError
from bashful.registry import OperationRegistry

# pylint: disable=magic-value-comparison


def test_register_and_get():
    """A registered handler is returned by name."""
    registry = OperationRegistry()
    registry.register("shout", str.upper)
    assert registry.get("shout")("hi") == "HI"
    assert "shout" in registry
    assert len(registry) == 1


def test_initial_mapping_is_registered():
    """Handlers passed to the constructor are registered."""
    registry = OperationRegistry({"b": str.lower, "a": str.upper})
    assert list(registry) == ["a", "b"]


def test_get_unknown_raises():
    """Unknown names raise UnknownOperationError, which is a LookupError."""
    registry = OperationRegistry()
    with pytest.raises(UnknownOperationError, match="'nope'") as excinfo:
        registry.get("nope")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.name == "nope"


@pytest.mark.parametrize("name", ["", "dup"])
def test_register_rejects_empty_and_duplicate_names(name):
    """Names must be non-empty and unique."""
    registry = OperationRegistry({"dup": str.upper})
    with pytest.raises(ValueError):
        registry.register(name, str.lower)


def test_names_by_prefix():
    """names() filters by prefix and sorts."""
    registry = OperationRegistry({"sort": sorted, "split": str.split, "max": max})
    assert registry.names("s") == ["sort", "split"]
    assert registry.names() == ["max", "sort", "split"]
    assert registry.names("zzz") == []


def test_text_operations_registered():
    """Every CLI filter is registered under its subcommand name."""
    assert text.OPERATIONS.names("common") == ["common-prefix", "common-suffix"]
    assert text.OPERATIONS.names("s") == ["sort", "split", "squeeze", "squeeze-lines"]
    assert text.OPERATIONS.get("flatten") is text.flatten
    assert text.OPERATIONS.get("trim-lines")("\n x \n") == " x "

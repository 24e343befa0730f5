"""Global pytest fixtures and default marks for BASHFUL."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test folder -> marker applied to every test inside it
FOLDER_MARKERS = {"unit": "unit", "functional": "functional", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test after the top-level folder it lives in."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        folder = path.relative_to(TESTS_ROOT).parts[0]
        marker_name = FOLDER_MARKERS.get(folder)
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()

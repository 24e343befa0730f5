"""Fixtures for end-to-end CLI logging tests.

Registers a test-only ``log-demo`` command on the ``bashful`` group that logs
at every level from a project logger and a third-party logger.
"""

import logging

import click
import pytest

from bashful.entrypoints.cli.main import bashful

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'bashful.demo' and a few on 'some.thirdparty'."""
    logger = logging.getLogger("bashful.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Add 'log-demo' to the group for the duration of a test."""
    bashful.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        bashful.commands.pop("log-demo", None)
        for section in getattr(bashful, "_sections", []):
            getattr(section, "commands", {}).pop("log-demo", None)
        if hasattr(bashful, "_default_section"):
            bashful._default_section.commands.pop(  # pylint: disable=protected-access
                "log-demo", None
            )


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield

"""Logging helpers used by the Bashful CLI.

Console logging goes through Rich on stderr so stdout stays reserved for
filter output. An optional in-memory "flight recorder" buffers DEBUG records
and writes them to disk when something goes wrong. Library modules only
create loggers; handlers are attached here, by the CLI.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "bashful"


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short ``[name]`` prefix.

    Project records get an empty prefix. The filter never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "click_extra.colorize" -> "[click_extra]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: When True, include timestamps, logger names and source paths.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler suitable to attach to the root logger.
    """

    # Keep in step with click-extra's --color / --no-color option
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None

    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 500,
    flush_level: int = logging.WARNING,
) -> MemoryHandler:
    """Configure an in-memory buffer of log records backed by a file.

    Up to ``capacity`` records are kept and flushed to ``path`` as soon as a
    record at ``flush_level`` or above is emitted. Nothing is written on a
    clean run.

    Args:
        path: Destination file for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.

    Returns:
        MemoryHandler: A memory-backed handler with a lazily opened file target.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=False,
    )


def log_startup(
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary at INFO and environment details at DEBUG.

    Args:
        logger: Logger used to emit startup messages.
        app_version: Application version string to display.
        level: Effective console logging level (numeric).
        handlers: Active handlers attached to the root logger.
        log_path: Flight-recorder output file, or None when disabled.
        logger_levels: Mapping of logger names to their configured levels.
    """

    logger.info(
        "BASHFUL %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if log_path else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if log_path:
        logger.debug("Flight recorder: path=%s", log_path)
    if logger_levels:
        logger.debug(
            "Per-logger overrides: %s",
            {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
        )

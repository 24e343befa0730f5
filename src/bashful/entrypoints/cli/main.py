"""Bashful CLI entry point.

Defines the top-level ``bashful`` command (via Click-Extra), which configures
logging, and registers one subcommand per text filter.

Notes
- The CLI version is sourced from `bashful.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Filter subcommands live in :mod:`.text_cmds`; they read stdin and write
  stdout, while logs and messages go to stderr.

Examples
    $ echo "Hello World" | bashful lower
    $ bashful common-prefix spam space
    $ bashful -v flatten "Hello {{USER}}!"
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from bashful import __version__
from bashful.logging import config_console_handler, config_flight_recorder, log_startup

from .helpers.log_level_parser import parse_log_level
from .text_cmds import COMMANDS

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """Bashful command-line interface.

    Small text filters for shell pipelines: case conversion, trimming and
    squeezing, list splitting, joining and sorting, common prefixes and
    suffixes, and {{placeholder}} substitution from environment variables.
    """


def _default_log_path() -> Path:
    return Path(user_log_dir("bashful", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source paths).",
    default=False,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING or ERROR occurs."
    ),
    default=False,
    envvar="BASHFUL_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight recorder output file.",
    default=_default_log_path,
    envvar="BASHFUL_LOG_PATH",
    show_default="user log directory/latest.log",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L bashful.text=DEBUG) or via BASHFUL_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    envvar="BASHFUL_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def bashful(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    flight_recorder: bool,
    log_path: Path,
    logger_levels: dict[str, int],
) -> None:
    """Bashful command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) flight recorder
    if flight_recorder:
        handlers.append(config_flight_recorder(path=log_path))

    # 3) root logger; handlers do the filtering
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    # 4) per-logger overrides
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


for _command in COMMANDS:
    bashful.add_command(_command)

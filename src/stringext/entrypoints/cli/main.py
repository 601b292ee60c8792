"""STRINGEXT CLI entry point.

Defines the top-level ``stringext`` command (via Click-Extra) and registers
the string subcommands.

Notes
- The CLI version is sourced from `stringext.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional commands should be registered here via ``stringext.add_command(...)``.

Examples
    $ stringext --version
    $ stringext join a b c -d "|"
    $ echo hunter2 | stringext protect
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from stringext import __version__
from stringext.logging import config_console_handler, log_startup

from .commands import (
    html_encode_cmd,
    join,
    normalize_page_name_cmd,
    protect,
    split_csv_cmd,
    strip,
)

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """STRINGEXT command-line interface.

    Small string helpers: delimited joins, CSV splitting, special character
    stripping, page-name normalization, HTML encoding, and secure strings.
    """


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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@clickx.pass_context
def stringext(
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
) -> None:
    """STRINGEXT command-line interface."""

    # 0) compute effective verbosity
    base_level = logging.WARNING
    level = base_level - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = []

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers.append(
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    )

    # 2) configure root logger
    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    # 3) log startup info
    log_startup(logger, app_version=__version__, level=level, handlers=handlers)

    # 4) ensure logging is cleanly shutdown on program exit
    ctx.call_on_close(logging.shutdown)


stringext.add_command(join)
stringext.add_command(split_csv_cmd)
stringext.add_command(strip)
stringext.add_command(normalize_page_name_cmd)
stringext.add_command(html_encode_cmd)
stringext.add_command(protect)

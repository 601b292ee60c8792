"""STRINGEXT string commands.

Thin wrappers that expose each helper in ``stringext.utils`` as a
subcommand. Results go to **stdout**; warnings and errors go to **stderr**.

Failure modes
- ``protect`` with empty input → error line on stderr and exit code 1.
"""

from __future__ import annotations

import logging

import click

from stringext import config
from stringext.errors import StringExtError
from stringext.utils import (
    html_encode,
    normalize_page_name,
    split_csv,
    strip_special_characters,
    to_delimited_string,
    to_secure_string,
)

from .helpers import error, warn

logger = logging.getLogger(__name__)

EMPTY_DELIMITER_WARNING = (
    f"Empty delimiter; using the default {config.DEFAULT_DELIMITER!r}."
)


@click.command()
@click.argument("items", nargs=-1)
@click.option(
    "--delimiter",
    "-d",
    default=config.DEFAULT_DELIMITER,
    envvar=config.DELIMITER_ENVVAR,
    show_default=True,
    show_envvar=True,
    help="Separator placed between items.",
)
def join(items: tuple[str, ...], delimiter: str) -> None:
    """Join ITEMS into one delimited string."""
    if not delimiter:
        warn(EMPTY_DELIMITER_WARNING)
    logger.debug("Joining %d items with %r", len(items), delimiter)
    click.echo(to_delimited_string(items, delimiter=delimiter))


@click.command("split-csv")
@click.argument("text")
def split_csv_cmd(text: str) -> None:
    """Split comma-separated TEXT, one field per line."""
    for field in split_csv(text):
        click.echo(field)


@click.command()
@click.argument("text")
@click.option(
    "--replacement",
    "-r",
    default="",
    help="Text substituted for each run of non-word characters (default: delete).",
)
def strip(text: str, replacement: str) -> None:
    """Remove or replace non-word characters in TEXT."""
    click.echo(strip_special_characters(text, replacement))


@click.command("normalize-page-name")
@click.argument("text")
def normalize_page_name_cmd(text: str) -> None:
    """Remove the page-name special characters from TEXT."""
    click.echo(normalize_page_name(text))


@click.command("html-encode")
@click.argument("text")
@click.option(
    "--full/--tags-only",
    "full",
    default=False,
    show_default=True,
    help="Escape every HTML-significant character instead of only '<' and '>'.",
)
def html_encode_cmd(text: str, full: bool) -> None:
    """HTML-encode TEXT."""
    click.echo(html_encode(text, tag_characters_only=not full))


@click.command()
@click.pass_context
def protect(ctx: click.Context) -> None:
    """Read a secret from stdin into a SecureString and report its length.

    One trailing newline is removed. The secret itself is never printed.
    """
    raw = click.get_text_stream("stdin").read()
    if raw.endswith("\r\n"):
        raw = raw[:-2]
    elif raw.endswith("\n"):
        raw = raw[:-1]

    try:
        secret = to_secure_string(raw)
    except StringExtError as e:
        error(str(e))
        ctx.exit(1)

    with secret:
        click.echo(f"Protected {len(secret)} characters.")

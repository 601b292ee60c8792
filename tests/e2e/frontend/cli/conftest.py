"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log records on a project
logger and a third-party logger, plus fixtures to register it and to obtain
a CliRunner.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from stringext.entrypoints.cli.main import stringext

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one record per level on 'stringext.demo' and one on 'some.thirdparty'."""
    logger = logging.getLogger("stringext.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    logging.getLogger("some.thirdparty").warning("Third-party warning.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    stringext.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(stringext, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()

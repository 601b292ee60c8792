"""Global pytest fixtures and default marks for STRINGEXT."""

import logging
from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).parent.resolve()
DEFAULT_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]  # pylint: disable=unused-argument
) -> None:
    """Mark each item by the top-level test folder it lives in."""
    for item in items:
        parents = item.path.resolve().parents
        for folder, marker_name in DEFAULT_MARKS.items():
            if folder not in parents:
                continue
            if not any(marker.name == marker_name for marker in item.iter_markers()):
                item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Restore the root logger after tests that let the CLI reconfigure it."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

"""Pytest configuration for maxbot tests."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo any logging setup a test performs."""
    root = logging.getLogger()
    handlers = set(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("maxbot").setLevel(logging.NOTSET)


def pytest_collection_modifyitems(config, items):
    """Set per-marker timeouts: unit=1s, integration=5s."""
    for item in items:
        if "unit" in item.keywords:
            item.add_marker(pytest.mark.timeout(1))
        elif "integration" in item.keywords:
            item.add_marker(pytest.mark.timeout(5))

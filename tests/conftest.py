"""Shared fixtures for the test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo setup_logging changes made by a test."""
    logger = logging.getLogger("graph_poet")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate

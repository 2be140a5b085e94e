"""Global pytest fixtures for pathident."""

from __future__ import annotations

import logging

import pytest

from pathident.domain.converter import PathIdentifierConverter

SITECORE_ROOT = "/sitecore/templates"


@pytest.fixture
def converter() -> PathIdentifierConverter:
    """A converter rooted at the usual Sitecore templates path."""
    return PathIdentifierConverter(SITECORE_ROOT)


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo root-logger changes (e.g. ``configure_logging``) between tests."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers

"""Shared test fixtures for todostore.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

from todostore import TodoData, TodoStore


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "todostore"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def store() -> TodoStore:
    """Return a new empty store for each test."""
    return TodoStore()


@pytest.fixture()
def populated_store() -> TodoStore:
    """Return a store holding three todos with ids 1, 2 and 3."""
    s = TodoStore()
    s.add(TodoData(content="Buy milk", tags=("home", "errand")))
    s.add(TodoData(content="Write report", category="work", tags=("work",)))
    s.add(TodoData(content="Call plumber", complete=True))
    return s

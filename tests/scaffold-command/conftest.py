"""Shared fixtures for scaffold command tests."""

import os
import sys

import pytest

# Ensure tests/scaffold-command/ is on sys.path so test files can import
# the fakes unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402, F401
from fake_project_repository import FakeProjectRepository  # noqa: E402, F401


def pytest_collection_modifyitems(items):
    for item in items:
        if "scaffold-command" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

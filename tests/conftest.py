"""
Pytest configuration and shared fixtures for buildplankit tests.
"""

import pytest

# Import test fixtures to make them available to all tests
# These imports register the fixtures with pytest's fixture discovery system
# ruff: noqa: F401
from tests.fixtures.toolchains import (
    linux_host,
    macos_host,
    windows_host,
    unknown_host,
    mock_toolchain,
    custom_toolchain,
)
from tests.fixtures.plans import (
    plan_builder,
    simple_plan,
)

from buildplankit.core.platform import clear_host_cache
from buildplankit.cross.catalog import reset_host_triple


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture(autouse=True)
def fresh_host_state():
    """Forget detected host information around every test."""
    clear_host_cache()
    reset_host_triple()
    yield
    clear_host_cache()
    reset_host_triple()

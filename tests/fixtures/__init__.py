"""Test fixtures for buildplankit tests.

This package provides reusable pytest fixtures for testing buildplankit components.
Fixtures are organized by type:

- toolchains: Host descriptions and mock toolchains
- plans: Build plans assembled from target and product names

Import fixtures in your tests using:
    from tests.fixtures.toolchains import linux_host
    from tests.fixtures.plans import plan_builder
"""

__all__ = [
    "toolchains",
    "plans",
]

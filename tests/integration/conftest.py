"""Integration tests need a migrated PostgreSQL database.

Point ``DATABASE__URL`` at a server, run ``python scripts/run_migrations.py``
and set ``INTEGRATION_TESTS=1``.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("INTEGRATION_TESTS") == "1":
        return
    skip = pytest.mark.skip(reason="set INTEGRATION_TESTS=1 to run against PostgreSQL")
    for item in items:
        if "tests/integration" in item.nodeid:
            item.add_marker(skip)

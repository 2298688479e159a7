"""Integration test configuration.

Integration tests talk to a real PostgreSQL database with migrations
applied. They are skipped unless DATABASE__URL is set.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("DATABASE__URL"):
        return

    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if "integration" in item.nodeid.split("/"):
            item.add_marker(skip)

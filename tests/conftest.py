"""
Pytest configuration and shared fixtures for confgroups tests.
"""

import logging
from unittest.mock import MagicMock

import pytest
import yaml

from confgroups.filesystem import Filesystem
from confgroups.loader import LoaderInterface

# Configure test logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


@pytest.fixture
def mock_files():
    """Mock filesystem for loader tests."""
    return MagicMock(spec=Filesystem)


@pytest.fixture
def mock_loader():
    """Mock loader for repository tests."""
    loader = MagicMock(spec=LoaderInterface)
    loader.load.return_value = {}
    loader.exists.return_value = False
    return loader


@pytest.fixture
def config_tree(tmp_path):
    """Configuration directory on disk with environment and namespace files."""

    def write(relative: str, data) -> None:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(data), encoding="utf-8")

    write("config/app.yml", {
        "name": "billing",
        "debug": False,
        "database": {"host": "db.internal", "port": 5432},
        "servers": [{"host": "a.internal"}, {"host": "b.internal"}],
    })
    write("config/local/app.yml", {
        "debug": True,
        "database": {"host": "localhost"},
    })
    write("config/mail.yml", {"driver": "smtp", "port": 25})
    write("packages/cache/config.yml", {"driver": "redis", "ttl": 300})
    write("packages/cache/redis.yml", {"host": "cache.internal", "port": 6379})
    write("packages/cache/local/redis.yml", {"host": "127.0.0.1"})

    return tmp_path


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )


def pytest_collection_modifyitems(config, items):
    """Add default markers to tests based on location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

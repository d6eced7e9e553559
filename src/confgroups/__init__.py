"""
confgroups - Grouped Configuration Repository

Loads named groups of configuration values from YAML files, merges
environment-specific overrides on top, and exposes them through dotted keys
such as ``app.debug`` or ``cache::redis.host``.

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"

from confgroups.config.settings import Settings, create_repository
from confgroups.filesystem import Filesystem
from confgroups.loader import FileLoader, LoaderInterface
from confgroups.repository import ParsedKey, Repository
from confgroups.utils.exceptions import (
    ConfGroupsError,
    ConfigLoadError,
    ConfigurationError,
    InvalidKeyError,
)

__all__ = [
    "__version__",
    "Settings",
    "create_repository",
    "Filesystem",
    "FileLoader",
    "LoaderInterface",
    "ParsedKey",
    "Repository",
    "ConfGroupsError",
    "ConfigurationError",
    "ConfigLoadError",
    "InvalidKeyError",
]

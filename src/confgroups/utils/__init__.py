"""
confgroups Utility Modules

Common utilities for logging, exceptions and nested value access.
"""

from confgroups.utils.arrays import array_get, array_set
from confgroups.utils.exceptions import (
    ConfGroupsError,
    ConfigLoadError,
    ConfigurationError,
    InvalidKeyError,
)
from confgroups.utils.logging import ConfigEventLogger, get_logger, setup_logging

__all__ = [
    "array_get",
    "array_set",
    "get_logger",
    "setup_logging",
    "ConfigEventLogger",
    "ConfGroupsError",
    "ConfigurationError",
    "ConfigLoadError",
    "InvalidKeyError",
]

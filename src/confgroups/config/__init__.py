"""
confgroups Configuration Conventions

Fixed file conventions and environment detection. Repository settings live in
``confgroups.config.settings``.
"""

from confgroups.config.constants import (
    ASSUMED_GROUP,
    DEFAULT_CONFIG_PATH,
    DEFAULT_ENVIRONMENT,
    DEFAULT_EXTENSION,
    NAMESPACE_SEPARATOR,
)
from confgroups.config.environments import detect_environment

__all__ = [
    "ASSUMED_GROUP",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_EXTENSION",
    "NAMESPACE_SEPARATOR",
    "detect_environment",
]

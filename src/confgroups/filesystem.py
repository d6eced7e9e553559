"""
confgroups Filesystem

Read-only access to configuration files on local disk. YAML is the default
format; files with a ``.json`` suffix are parsed as JSON.
"""

import json
import os
from typing import Any

import yaml

from confgroups.config.constants import JSON_SUFFIXES
from confgroups.utils.exceptions import ConfigLoadError


class Filesystem:
    """Local filesystem used by the file loader."""

    def exists(self, path: str) -> bool:
        """Determine if a file or directory exists."""
        return os.path.exists(path)

    def get_require(self, path: str) -> dict[str, Any]:
        """Read a configuration file and return its top-level mapping."""
        try:
            with open(path, encoding='utf-8') as f:
                if path.lower().endswith(JSON_SUFFIXES):
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)

        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigLoadError(
                f"Failed to load configuration file {path}: {e}",
                path=path,
            ) from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigLoadError(
                f"Configuration file {path} must contain a mapping, "
                f"got {type(data).__name__}",
                path=path,
                details={"type": type(data).__name__},
            )

        return data

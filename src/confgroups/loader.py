"""
confgroups Group Loader

Loads configuration groups from disk. A group ``app`` lives in
``{path}/app.yml`` and may be overridden per environment by
``{path}/{environment}/app.yml``; ``path`` is the configuration root, or the
directory registered for a namespace.
"""

from abc import ABC, abstractmethod
from typing import Any

from confgroups.config.constants import DEFAULT_EXTENSION
from confgroups.filesystem import Filesystem
from confgroups.utils.exceptions import ConfigLoadError
from confgroups.utils.logging import ConfigEventLogger


class LoaderInterface(ABC):
    """Source of configuration groups for a repository."""

    @abstractmethod
    def load(
        self,
        environment: str,
        group: str,
        namespace: str | None = None,
    ) -> dict[str, Any]:
        """Load the given configuration group."""

    @abstractmethod
    def exists(self, group: str, namespace: str | None = None) -> bool:
        """Determine if the given configuration group exists."""

    @abstractmethod
    def add_namespace_hint(self, namespace: str, hint: str) -> None:
        """Register the directory holding a namespace's groups."""


class FileLoader(LoaderInterface):
    """Loader reading configuration groups through a filesystem."""

    def __init__(
        self,
        files: Filesystem,
        default_path: str,
        extension: str = DEFAULT_EXTENSION,
    ):
        """
        Initialize the file loader.

        Args:
            files: Filesystem providing ``exists`` and ``get_require``
            default_path: Directory holding the application's groups
            extension: Configuration file extension, without the dot
        """
        self._files = files
        self._default_path = default_path
        self._extension = extension
        self._hints: dict[str, str] = {}
        self._events = ConfigEventLogger()

    def load(
        self,
        environment: str,
        group: str,
        namespace: str | None = None,
    ) -> dict[str, Any]:
        """
        Load the given configuration group.

        Returns an empty dict when the namespace is unknown or the group has
        no base file. Environment values replace base values key by key; nested
        mappings are not merged.
        """
        path = self._get_path(namespace)

        if path is None:
            self._events.log_group_missing(group, namespace, reason="unknown_namespace")
            return {}

        file = self._file_path(path, group)
        if not self._files.exists(file):
            self._events.log_group_missing(group, namespace, reason="no_base_file")
            return {}

        items = self._require(file)

        env_file = self._file_path(f"{path}/{environment}", group)
        has_override = self._files.exists(env_file)
        if has_override:
            items = {**items, **self._require(env_file)}

        self._events.log_group_loaded(
            group,
            namespace,
            environment,
            path=file,
            key_count=len(items),
            environment_override=has_override,
        )

        return items

    def exists(self, group: str, namespace: str | None = None) -> bool:
        """Determine if the given configuration group exists."""
        path = self._get_path(namespace)

        if path is None:
            return False

        return self._files.exists(self._file_path(path, group))

    def add_namespace_hint(self, namespace: str, hint: str) -> None:
        """Register the directory holding a namespace's groups."""
        self._hints[namespace] = hint
        self._events.log_namespace_registered(namespace, hint)

    def _get_path(self, namespace: str | None) -> str | None:
        """Get the directory for a namespace; None if it isn't registered."""
        if namespace is None:
            return self._default_path

        return self._hints.get(namespace)

    def _file_path(self, path: str, group: str) -> str:
        return f"{path}/{group}.{self._extension}"

    def _require(self, file: str) -> dict[str, Any]:
        try:
            return self._files.get_require(file)
        except ConfigLoadError as e:
            self._events.log_load_failed(file, str(e))
            raise

    @property
    def files(self) -> Filesystem:
        return self._files

    @property
    def default_path(self) -> str:
        return self._default_path

    @property
    def extension(self) -> str:
        return self._extension

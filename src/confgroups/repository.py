"""
confgroups Configuration Repository

Dotted-key access to configuration groups:

- ``"app"``               the whole ``app`` group
- ``"app.debug"``         an item of the ``app`` group
- ``"cache::redis.host"`` an item of the ``redis`` group of namespace ``cache``
- ``"cache::host"``       an item of the ``config`` group of ``cache`` when the
                          namespace has no ``host`` group

Groups are loaded lazily on first access and kept in memory afterwards.
"""

from dataclasses import dataclass
from typing import Any

from confgroups.config.constants import (
    ASSUMED_GROUP,
    GLOBAL_COLLECTION,
    KEY_SEPARATOR,
    NAMESPACE_SEPARATOR,
)
from confgroups.loader import LoaderInterface
from confgroups.utils.arrays import array_get, array_set
from confgroups.utils.exceptions import InvalidKeyError
from confgroups.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParsedKey:
    """A configuration key split into namespace, group and item."""
    namespace: str | None
    group: str
    item: str | None = None


class Repository:
    """Configuration repository with lazily loaded groups."""

    def __init__(self, loader: LoaderInterface, environment: str):
        self._loader = loader
        self._environment = environment
        self._items: dict[str, Any] = {}
        self._parsed: dict[str, ParsedKey] = {}

    def has(self, key: str) -> bool:
        """Determine if the given configuration value exists."""
        missing = object()
        return self.get(key, missing) is not missing

    def get(self, key: str, default: Any = None) -> Any:
        """Get the specified configuration value."""
        parsed = self.parse(key)

        # Items are stored per collection, one for each namespace and one for
        # each group outside of a namespace.
        collection = self._get_collection(parsed.group, parsed.namespace)
        self._load(parsed.group, parsed.namespace, collection)

        return array_get(self._items[collection], parsed.item, default)

    def set(self, key: str, value: Any) -> None:
        """Set a given configuration value."""
        parsed = self.parse(key)
        collection = self._get_collection(parsed.group, parsed.namespace)

        # Load first so the rest of the group is not lost once the group is
        # requested later.
        self._load(parsed.group, parsed.namespace, collection)

        self._items[collection] = array_set(
            self._items[collection], parsed.item, value, config_key=key
        )

    def add_namespace(self, namespace: str, hint: str) -> None:
        """Add a new namespace to the loader."""
        self._loader.add_namespace_hint(namespace, hint)

    def parse(self, key: str) -> ParsedKey:
        """Parse a key into namespace, group and item.

        Results are cached per key for the lifetime of the repository, so a
        namespace registered later does not change keys already parsed.
        """
        if key in self._parsed:
            return self._parsed[key]

        segments = key.split(KEY_SEPARATOR)

        if NAMESPACE_SEPARATOR not in key:
            parsed = self._parse_basic_segments(segments)
        else:
            parsed = self._parse_namespaced_segments(key, segments)

        self._parsed[key] = parsed
        return parsed

    def _parse_basic_segments(self, segments: list[str]) -> ParsedKey:
        group = segments[0]

        if len(segments) == 1:
            return ParsedKey(None, group, None)

        return ParsedKey(None, group, KEY_SEPARATOR.join(segments[1:]))

    def _parse_namespaced_segments(self, key: str, segments: list[str]) -> ParsedKey:
        parts = segments[0].split(NAMESPACE_SEPARATOR)

        if len(parts) != 2:
            raise InvalidKeyError(
                f"Invalid configuration key '{key}': expected 'namespace::group' "
                "in the first segment",
                config_key=key,
            )

        namespace, group = parts
        if not namespace or not group:
            raise InvalidKeyError(
                f"Invalid configuration key '{key}': namespace and group must not be empty",
                config_key=key,
            )

        # A namespace shipping a single configuration file can be addressed as
        # "namespace::item" without naming its "config" group.
        if self._assuming_group(segments, group, namespace):
            return ParsedKey(namespace, ASSUMED_GROUP, group)

        if len(segments) > 1:
            return ParsedKey(namespace, group, KEY_SEPARATOR.join(segments[1:]))

        return ParsedKey(namespace, group, None)

    def _assuming_group(self, segments: list[str], group: str, namespace: str) -> bool:
        return len(segments) == 1 and not self._loader.exists(group, namespace)

    def _get_collection(self, group: str, namespace: str | None = None) -> str:
        return namespace or f"{GLOBAL_COLLECTION}{NAMESPACE_SEPARATOR}{group}"

    def _load(self, group: str, namespace: str | None, collection: str) -> None:
        """Load the configuration group unless its collection is cached."""
        if collection in self._items:
            return

        self._items[collection] = self._loader.load(self._environment, group, namespace)
        logger.debug(
            "config_collection_cached",
            collection=collection,
            group=group,
            namespace=namespace,
        )

    # Indexer access. Unsetting stores None rather than removing the key.

    def offset_exists(self, key: str) -> bool:
        return self.has(key)

    def offset_get(self, key: str) -> Any:
        return self.get(key)

    def offset_set(self, key: str, value: Any) -> None:
        self.set(key, value)

    def offset_unset(self, key: str) -> None:
        self.set(key, None)

    def __contains__(self, key: str) -> bool:
        return self.offset_exists(key)

    def __getitem__(self, key: str) -> Any:
        return self.offset_get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.offset_set(key, value)

    def __delitem__(self, key: str) -> None:
        self.offset_unset(key)

    @property
    def loader(self) -> LoaderInterface:
        return self._loader

    @property
    def environment(self) -> str:
        return self._environment

    def get_items(self) -> dict[str, Any]:
        """Snapshot of the loaded configuration collections, keyed by collection."""
        return dict(self._items)

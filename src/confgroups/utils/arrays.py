"""
confgroups Nested Value Access

Dot-notation helpers for reading and writing nested configuration values.
Mappings are addressed by key and lists by decimal index, so
``"servers.0.host"`` reaches ``{"servers": [{"host": ...}]}``.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

from confgroups.utils.exceptions import ConfigurationError

# Returned internally when a path segment is absent; never leaks to callers.
_MISSING = object()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_container(value: Any) -> bool:
    return isinstance(value, (MutableMapping, MutableSequence))


def _child(container: Any, segment: str) -> Any:
    """Return the child of ``container`` at ``segment`` or ``_MISSING``."""
    if isinstance(container, Mapping):
        if segment in container:
            return container[segment]
        # YAML reads numeric keys as ints
        if segment.isdecimal() and int(segment) in container:
            return container[int(segment)]
        return _MISSING

    if _is_sequence(container) and segment.isdecimal():
        index = int(segment)
        if index < len(container):
            return container[index]

    return _MISSING


def _store(container: Any, segment: str, item: Any, key: str) -> None:
    """Store ``item`` under ``segment`` of a mapping or list."""
    if isinstance(container, MutableMapping):
        if segment not in container and segment.isdecimal() and int(segment) in container:
            container[int(segment)] = item
        else:
            container[segment] = item
        return

    index = int(segment) if segment.isdecimal() else -1
    if 0 <= index < len(container):
        container[index] = item
    elif index == len(container):
        container.append(item)
    else:
        raise ConfigurationError(
            f"Cannot set list index '{segment}' of a list with {len(container)} items",
            config_key=key,
        )


def array_get(value: Any, key: str | None, default: Any = None) -> Any:
    """Get a nested value using dot notation.

    A ``None`` key returns ``value`` itself. Any absent segment yields
    ``default``; a stored ``None`` is returned as a real value.
    """
    if key is None:
        return value

    current = value
    for segment in key.split('.'):
        current = _child(current, segment)
        if current is _MISSING:
            return default

    return current


def array_set(
    value: Any,
    key: str | None,
    item: Any,
    config_key: str | None = None,
) -> Any:
    """Set a nested value using dot notation and return the resulting root.

    Intermediate levels that are missing or not containers are replaced with
    empty dicts. Lists accept an existing index or the next free one.
    A ``None`` key replaces the whole value. ``config_key`` names the full
    configuration key in errors and defaults to ``key``.
    """
    if key is None:
        return item

    root = value if _is_container(value) else {}
    segments = key.split('.')
    current = root

    for segment in segments[:-1]:
        child = _child(current, segment)
        if not _is_container(child):
            child = {}
            _store(current, segment, child, config_key or key)
        current = child

    _store(current, segments[-1], item, config_key or key)
    return root

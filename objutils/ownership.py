"""Own-entry enumeration for mappings.

Only entries stored directly in a mapping take part in any operation. A
:class:`collections.ChainMap` resolves lookups through its parent maps; entries
reachable only through those parents are inherited and never enumerated.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Hashable, Iterator


def is_mapping(value: Any) -> bool:
    """Return True when ``value`` is a traversable mapping."""
    return isinstance(value, Mapping)


def _own_store(obj: Mapping[Any, Any]) -> Mapping[Any, Any]:
    if isinstance(obj, ChainMap):
        return obj.maps[0] if obj.maps else {}
    return obj


def has_own(obj: Any, key: Hashable) -> bool:
    """Return True when ``key`` is stored directly in ``obj``."""
    if not is_mapping(obj):
        return False
    return key in _own_store(obj)


def own_keys(obj: Any) -> list[Any]:
    """List the own keys of ``obj`` in iteration order.

    ``None`` and non-mapping values have no keys. The result is a snapshot, so
    callers may mutate ``obj`` while looping over it.
    """
    if not is_mapping(obj):
        return []
    return list(_own_store(obj))


def own_items(obj: Any) -> Iterator[tuple[Any, Any]]:
    """Yield own ``(key, value)`` pairs, reading each value at yield time."""
    for key in own_keys(obj):
        if has_own(obj, key):
            yield key, obj[key]

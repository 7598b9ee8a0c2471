"""Depth-first traversal over nested mappings.

Only mappings are containers; every other value (``None``, strings, lists, ...)
is a leaf. The root is never reported, only its descendants. Paths are tuples
of keys from the root, rebuilt for every visit.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .ownership import has_own, is_mapping, own_items, own_keys


if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


logger = logging.getLogger(__name__)

Path = tuple[Any, ...]


def _walk(container: Any, path: Path) -> Iterator[tuple[Path, Any, bool]]:
    if not is_mapping(container):
        return
    for key, value in own_items(container):
        child_path = (*path, key)
        yield from _walk(value, child_path)
        yield child_path, value, not is_mapping(value)


def walk(obj: Any) -> Iterator[tuple[Path, Any, bool]]:
    """Yield ``(path, value, is_leaf)`` for every entry below ``obj``.

    Entries are produced in the same order :func:`dfs` reports them: an entry
    comes after all of its descendants, and each sibling's subtree is finished
    before the next sibling starts.
    """
    return _walk(obj, ())


def dfs(obj: Any, functor: Callable[[Any, Any, Path, bool], Any]) -> None:
    """Call ``functor(value, key, path, is_leaf)`` for every entry below ``obj``.

    Children are visited before the entry holding them. A non-mapping ``obj``
    yields no calls. Exceptions raised by ``functor`` abort the traversal.
    """
    visits = 0
    for path, value, is_leaf in walk(obj):
        _ = functor(value, path[-1], path, is_leaf)
        visits += 1
    logger.debug("dfs visited %d entries", visits)


def _dfs_mod(container: Any, functor: Callable[..., Any], path: Path) -> int:
    if not is_mapping(container):
        return 0
    visits = 0

    # first pass lets the functor rename or replace entries before descending
    for key in own_keys(container):
        if not has_own(container, key):
            continue
        value = container[key]
        _ = functor(value, key, container, (*path, key), not is_mapping(value))
        visits += 1

    for key in own_keys(container):
        if has_own(container, key):
            visits += _dfs_mod(container[key], functor, (*path, key))
    return visits


def dfs_mod(obj: Any, functor: Callable[[Any, Any, Any, Path, bool], Any]) -> None:
    """Walk ``obj`` level by level, letting ``functor`` edit each container in place.

    At every container, ``functor(value, key, parent, path, is_leaf)`` runs for
    all of its own entries first; ``parent`` is the container itself, so the
    functor may reassign ``parent[key]`` or add and remove siblings. Keys added
    during that pass are not reported at this level. Afterwards the engine
    re-reads the container and descends into each current value.
    """
    visits = _dfs_mod(obj, functor, ())
    logger.debug("dfs_mod visited %d entries", visits)

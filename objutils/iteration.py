"""One-pass helpers over the own entries of a mapping.

Every helper treats a missing mapping or a missing callback as "no entries":
the result is an empty dict, the untouched initial value, zero, or nothing at
all. Passing ``ctx`` binds it as the callback's leading argument via
:func:`objutils.binding.bind`.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from .binding import bind
from .ownership import has_own, own_items, own_keys


if TYPE_CHECKING:
    from collections.abc import Callable


_T = TypeVar("_T")


def _with_ctx(fn: Callable[..., _T], ctx: Any) -> Callable[..., _T]:
    if ctx is None:
        return fn
    return bind(fn, ctx)


def obj_map(obj: Any, fn: Callable[..., _T] | None, ctx: Any = None) -> dict[Any, _T]:
    """Return a new dict with the same own keys and values ``fn(value, key, obj)``.

    ``obj`` itself is never modified.
    """
    if obj is None or fn is None:
        return {}
    call = _with_ctx(fn, ctx)
    return {key: call(value, key, obj) for key, value in own_items(obj)}


def obj_reduce(obj: Any, fn: Callable[..., _T] | None, initial: _T, ctx: Any = None) -> _T:
    """Fold the own entries left to right with ``acc = fn(acc, value, key, obj)``."""
    if obj is None or fn is None:
        return initial
    call = _with_ctx(fn, ctx)
    acc = initial
    for key, value in own_items(obj):
        acc = call(acc, value, key, obj)
    return acc


def obj_for_each(obj: Any, fn: Callable[..., Any] | None, ctx: Any = None) -> None:
    """Call ``fn(value, key, obj)`` once per own entry."""
    if obj is None or fn is None:
        return
    call = _with_ctx(fn, ctx)
    for key, value in own_items(obj):
        _ = call(value, key, obj)


def _natural_order(keys: list[Any]) -> list[Any]:
    try:
        return sorted(keys)
    except TypeError:
        # mixed key types have no common order; compare their string forms
        return sorted(keys, key=str)


def obj_for_each_sorted(
    obj: Any,
    fn: Callable[..., Any] | None,
    sort_fn: Callable[[Any, Any], int] | None = None,
    ctx: Any = None,
) -> None:
    """Call ``fn(value, key, obj)`` once per own entry in sorted key order.

    Parameters
    ----------
    obj
        Mapping to iterate over.
    fn
        Callback receiving ``(value, key, obj)``.
    sort_fn
        Optional three-way comparator ``(key_a, key_b) -> int``. Keys are sorted
        in their natural order when omitted.
    ctx
        Optional value bound as the callback's leading argument.
    """
    if obj is None or fn is None:
        return
    call = _with_ctx(fn, ctx)
    keys = own_keys(obj)
    if sort_fn is not None:
        keys.sort(key=functools.cmp_to_key(sort_fn))
    else:
        keys = _natural_order(keys)
    for key in keys:
        if has_own(obj, key):
            _ = call(obj[key], key, obj)


def obj_filter(obj: Any, fn: Callable[..., Any] | None, ctx: Any = None) -> dict[Any, Any]:
    """Return a new dict holding the own entries for which ``fn(value, key, obj)`` is truthy."""
    if obj is None or fn is None:
        return {}
    call = _with_ctx(fn, ctx)
    return {key: value for key, value in own_items(obj) if call(value, key, obj)}


def obj_length(obj: Any) -> int:
    """Count the own entries of ``obj``."""
    return len(own_keys(obj))


def obj_keys(obj: Any) -> list[Any]:
    """List the own keys of ``obj`` in iteration order."""
    return own_keys(obj)


def obj_values(obj: Any) -> list[Any]:
    """List the own values of ``obj`` in iteration order."""
    return [value for _key, value in own_items(obj)]

"""Bind a callable to a fixed leading argument."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, TypeVar


if TYPE_CHECKING:
    from collections.abc import Callable


_R = TypeVar("_R")


def bind(fn: Callable[..., _R], scope: Any) -> Callable[..., _R]:
    """Return a callable that invokes ``fn`` with ``scope`` as its receiver.

    Python has no implicit ``this``, so the receiver travels the way it does for
    bound methods: as the first positional argument. Every other positional and
    keyword argument is forwarded unchanged and ``fn``'s result is returned as is.

    The returned callable exposes ``__func__`` and ``__self__`` like a bound method.
    """

    @functools.wraps(fn)
    def bound(*args: Any, **kwargs: Any) -> _R:
        return fn(scope, *args, **kwargs)

    bound.__func__ = fn  # type: ignore[attr-defined]
    bound.__self__ = scope  # type: ignore[attr-defined]
    return bound

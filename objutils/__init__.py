"""obj-utils - map/reduce/filter and depth-first traversal helpers for mappings"""

from ._version import version as __version__
from .binding import bind
from .iteration import (
    obj_filter,
    obj_for_each,
    obj_for_each_sorted,
    obj_keys,
    obj_length,
    obj_map,
    obj_reduce,
    obj_values,
)
from .traversal import dfs, dfs_mod, walk


__all__ = [
    "__version__",
    "bind",
    "dfs",
    "dfs_mod",
    "obj_filter",
    "obj_for_each",
    "obj_for_each_sorted",
    "obj_keys",
    "obj_length",
    "obj_map",
    "obj_reduce",
    "obj_values",
    "walk",
]

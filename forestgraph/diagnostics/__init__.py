"""Diagnostics and debugging utilities for forestgraph."""

from .core import (
    assert_no_dangling_edges,
    assert_roots_subset,
    assert_spanning_forest,
    assert_valid_timestamps,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_no_dangling_edges",
    "assert_roots_subset",
    "assert_spanning_forest",
    "assert_valid_timestamps",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

"""Debug mode management for forestgraph.

While debug mode is on, BFS/DFS check that their forest spans the graph (and
DFS timestamps nest), and Dijkstra checks its tree for dangling edges before
returning. The initial value comes from the FORESTGRAPH_DEBUG environment
variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "FORESTGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool = False) -> bool:
    """
    Read a boolean switch from the environment.

    Parameters
    ----------
    name:
        Environment variable name.
    default:
        Value used when the variable is unset or empty.

    Returns
    -------
    bool
        True for ``1``, ``true``, ``yes`` or ``on`` (any case).
    """
    raw: Optional[str] = os.getenv(name)
    if not raw:
        return default
    return raw.strip().lower() in _TRUTHY


_debug_enabled: bool = env_flag(DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether result validation is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable forestgraph debug mode.

    Parameters
    ----------
    enabled:
        Whether algorithms validate their results.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous value on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     forest = graph.dfs("A")
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev

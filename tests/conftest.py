"""Pytest configuration and shared fixtures for forestgraph tests.

This module provides:
- A deterministic numpy RNG fixture for randomized graph tests
- Small sample graphs used across test modules
- Debug-mode isolation between tests
"""

import os

import numpy as np
import pytest

from forestgraph import Graph
from forestgraph.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def restore_debug_mode():
    """Auto-use fixture restoring the global debug flag after every test."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)


@pytest.fixture
def triangle_shortcut() -> Graph:
    """A->B(4), A->C(1), C->B(1): the shortest route to B goes through C."""
    G = Graph()
    G.add_directed_edge("A", "B", 4)
    G.add_directed_edge("A", "C", 1)
    G.add_directed_edge("C", "B", 1)
    return G


@pytest.fixture
def cycle3() -> Graph:
    """Directed cycle A->B->C->A, all weights 1."""
    G = Graph()
    G.add_directed_edge("A", "B", 1)
    G.add_directed_edge("B", "C", 1)
    G.add_directed_edge("C", "A", 1)
    return G


@pytest.fixture
def disconnected() -> Graph:
    """A->B(1) plus an isolated vertex C."""
    G = Graph()
    G.add_directed_edge("A", "B", 1)
    G.add_vertex("C")
    return G


@pytest.fixture
def random_graph(rng: np.random.Generator):
    """Factory for random directed graphs on labels v0..v{n-1} with non-negative weights."""

    def build(n: int, p: float, max_weight: int = 10) -> Graph:
        G = Graph()
        labels = [f"v{i}" for i in range(n)]
        for label in labels:
            G.add_vertex(label)
        for u in labels:
            for v in labels:
                if u != v and rng.random() < p:
                    G.add_directed_edge(u, v, int(rng.integers(0, max_weight + 1)))
        return G

    return build

"""Structural invariant checks for graphs and algorithm results."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from ..graphs.core import Graph


def assert_no_dangling_edges(graph: Graph) -> None:
    """
    Assert that every edge points at a vertex of the graph.

    Parameters
    ----------
    graph:
        Graph to check.

    Raises
    ------
    ValueError
        If some vertex has an edge to a label that is not a vertex.
    """
    for label, vertex in graph.vertices():
        for neighbor in vertex.get_neighbors():
            if neighbor not in graph:
                raise ValueError(
                    f"Dangling edge {label!r} -> {neighbor!r}: target is not a vertex."
                )


def assert_roots_subset(graph: Graph) -> None:
    """
    Assert that every root is a vertex of the graph (same Vertex object).

    Raises
    ------
    ValueError
        If a root is missing from the vertices or refers to a different object.
    """
    for label, vertex in graph.roots():
        if graph.get_vertex(label) is not vertex:
            raise ValueError(f"Root {label!r} is not a vertex of the graph.")


def assert_spanning_forest(source: Graph, forest: Graph) -> None:
    """
    Assert that ``forest`` is a spanning forest of ``source``.

    Checks that both graphs have exactly the same labels, that roots have no
    tree parent while every other vertex has exactly one, that every tree
    edge is an edge of ``source`` and that every vertex is reachable from a
    root.

    Parameters
    ----------
    source:
        Graph the forest was built from.
    forest:
        BFS or DFS result.

    Raises
    ------
    ValueError
        If any of the conditions does not hold.
    """
    assert_no_dangling_edges(forest)
    assert_roots_subset(forest)

    source_labels = set(source)
    forest_labels = set(forest)
    if source_labels != forest_labels:
        missing = sorted(source_labels - forest_labels)
        extra = sorted(forest_labels - source_labels)
        raise ValueError(f"Forest does not span graph: missing={missing}, extra={extra}")

    in_degree: Counter = Counter()
    for label, vertex in forest.vertices():
        for child in vertex.get_neighbors():
            if not source.contains_edge(label, child):
                raise ValueError(f"Tree edge {label!r} -> {child!r} is not in the graph.")
            in_degree[child] += 1

    for label in forest:
        expected = 0 if forest.is_root(label) else 1
        if in_degree[label] != expected:
            raise ValueError(
                f"Vertex {label!r} has {in_degree[label]} tree parents, expected {expected}."
            )

    reached = set()
    stack: List[str] = [label for label, _ in forest.roots()]
    while stack:
        label = stack.pop()
        if label in reached:
            continue
        reached.add(label)
        stack.extend(forest.get_vertex(label).get_neighbors())
    if reached != forest_labels:
        raise ValueError(f"Vertices not reachable from any root: {sorted(forest_labels - reached)}")


def assert_valid_timestamps(forest: Graph) -> None:
    """
    Assert that DFS discovery/finish timestamps are well formed.

    Every vertex satisfies ``start < finish``, all timestamps are distinct,
    and each child's interval nests strictly inside its parent's
    (parenthesis structure).

    Raises
    ------
    ValueError
        If a timestamp is missing, duplicated or badly nested.
    """
    seen: Dict[int, str] = {}
    for label, vertex in forest.vertices():
        if not 0 < vertex.start < vertex.finish:
            raise ValueError(
                f"Vertex {label!r} has invalid interval [{vertex.start}, {vertex.finish}]."
            )
        for stamp in (vertex.start, vertex.finish):
            if stamp in seen:
                raise ValueError(f"Timestamp {stamp} used by both {seen[stamp]!r} and {label!r}.")
            seen[stamp] = label

    for label, vertex in forest.vertices():
        for child in vertex.get_neighbors():
            inner = forest.get_vertex(child)
            if not vertex.start < inner.start < inner.finish < vertex.finish:
                raise ValueError(
                    f"Interval of {child!r} is not nested inside its parent {label!r}."
                )

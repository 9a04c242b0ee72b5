"""
Single-source shortest-path tree: Dijkstra.

Negative weights are rejected lazily: only an edge leaving a vertex that has
just been finalized is checked, so a negative edge unreachable from the
source never raises.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import heapq
from typing import TYPE_CHECKING, Dict, List, Tuple

from ..diagnostics.core import assert_no_dangling_edges, assert_roots_subset
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .errors import NegativeWeightOnActivePath, SourceNotFound
from .vertex import INFINITY, TraversalMarks

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)


def dijkstra_tree(graph: "Graph", source: str) -> "Graph":
    """
    Dijkstra's algorithm, returning the shortest-path tree rooted at ``source``.

    Every vertex enters a binary heap keyed by its current distance. A
    relaxation pushes a fresh entry instead of decreasing a key in place;
    entries that no longer match the vertex's distance, or belong to an
    already finalized vertex, are skipped when popped. Extraction stops as
    soon as the smallest remaining distance is infinite.

    Tree edges are only materialized after the traversal, by following each
    finalized vertex's ``predecessor`` back to its parent, so a vertex whose
    predecessor changes never leaves a stale edge behind. Tree edges carry
    the original weights. Ties between equal distances are broken by label.

    Args:
        graph: Graph with non-negative weights on every edge reachable from
            ``source``. Not modified.
        source: Root of the tree.

    Returns:
        New Graph holding the tree. Only vertices reachable from ``source``
        are present; each carries its final ``distance`` and
        ``predecessor``.

    Raises:
        SourceNotFound: If ``source`` is not in the graph.
        NegativeWeightOnActivePath: If a finalized vertex has a negative edge
            to an unfinalized neighbor.

    Complexity: O((V + E) log V).

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('A', 'B', 4)
        True
        >>> G.add_directed_edge('A', 'C', 1)
        True
        >>> G.add_directed_edge('C', 'B', 1)
        True
        >>> tree = dijkstra_tree(G, 'A')
        >>> tree.get_weight('C', 'B')
        1
        >>> tree.contains_edge('A', 'B')
        False
    """
    if source not in graph:
        raise SourceNotFound(source)

    marks = graph.reset_marks()
    marks[source].distance = 0

    heap: List[Tuple[float, str]] = [(m.distance, label) for label, m in marks.items()]
    heapq.heapify(heap)

    tree = type(graph)()
    tree.add_vertex(source, is_root=True)

    while heap:
        d, u = heapq.heappop(heap)
        current = marks[u]
        if current.discovered or d > current.distance:
            continue
        if d == INFINITY:
            break

        tree.add_vertex(u)
        current.discovered = True

        for v, weight in graph.get_vertex(u).edges.items():
            neighbor = marks[v]
            if neighbor.discovered:
                continue
            if weight < 0:
                raise NegativeWeightOnActivePath(u, v, weight)
            new_distance = d + weight
            if new_distance < neighbor.distance:
                neighbor.distance = new_distance
                neighbor.predecessor = u
                heapq.heappush(heap, (new_distance, v))

    _link_predecessors(graph, tree, marks)

    logger.debug(
        "Dijkstra from %r: %d of %d vertices reachable", source, tree.size(), graph.size()
    )

    if is_debug_enabled():
        assert_no_dangling_edges(tree)
        assert_roots_subset(tree)

    return tree


def _link_predecessors(graph: "Graph", tree: "Graph", marks: Dict[str, TraversalMarks]) -> None:
    """Add parent -> child edges for every tree vertex and copy its marks."""
    for label, vertex in tree.vertices():
        vertex.apply_marks(marks[label])
        parent = marks[label].predecessor
        if parent is not None:
            tree.add_directed_edge(parent, label, graph.get_weight(parent, label))

"""
Graph traversal algorithms: breadth-first and depth-first forests.

Both traversals cover the whole graph. They start at the requested source and
then restart from every vertex still undiscovered, so a disconnected graph
yields one tree per restart. The result is a new Graph whose roots are the
tree heads. Restart order follows the graph's key order and neighbors are
visited in set order; neither is meaningful.

Transient state lives in a per-call table from ``Graph.reset_marks``; the
final marks are copied onto the forest's vertices.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

from ..diagnostics.core import assert_spanning_forest, assert_valid_timestamps
from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .errors import SourceNotFound
from .vertex import TraversalMarks

if TYPE_CHECKING:
    from .core import Graph

logger = get_logger(__name__)

# Weight of every DFS tree edge. DFS results are read for their timestamps,
# so tree edges do not carry the source graph's weights.
DFS_TREE_EDGE_WEIGHT = 1


def _restart_order(graph: "Graph", source: str) -> Iterator[str]:
    yield source
    yield from graph


def _stamp(forest: "Graph", marks: Dict[str, TraversalMarks]) -> None:
    for label, vertex in forest.vertices():
        vertex.apply_marks(marks[label])


def bfs_forest(graph: "Graph", source: str) -> "Graph":
    """
    Breadth-first forest of the whole graph, first tree rooted at ``source``.

    A vertex is flagged discovered the first time it is reached; the edge it
    was reached through becomes a tree edge with its original weight.

    Args:
        graph: Graph to traverse. Not modified.
        source: Label of the first root.

    Returns:
        New Graph holding the forest. Every vertex of ``graph`` appears in
        exactly one tree; ``roots()`` gives the tree heads.

    Raises:
        SourceNotFound: If ``source`` is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('A', 'B', 1)
        True
        >>> G.add_vertex('C')
        True
        >>> forest = bfs_forest(G, 'A')
        >>> sorted(label for label, _ in forest.roots())
        ['A', 'C']
    """
    if source not in graph:
        raise SourceNotFound(source)

    marks = graph.reset_marks()
    forest = type(graph)()

    for root in _restart_order(graph, source):
        if marks[root].discovered:
            continue
        forest.add_vertex(root, is_root=True)
        _bfs_visit(graph, forest, root, marks)

    _stamp(forest, marks)
    logger.debug(
        "BFS from %r: %d vertices in %d trees", source, forest.size(), len(forest.roots())
    )

    if is_debug_enabled():
        assert_spanning_forest(graph, forest)

    return forest


def _bfs_visit(graph: "Graph", forest: "Graph", root: str, marks: Dict[str, TraversalMarks]) -> None:
    marks[root].discovered = True
    queue = deque([root])

    while queue:
        u = queue.popleft()
        vertex = graph.get_vertex(u)
        for v in vertex.get_neighbors():
            if not marks[v].discovered:
                marks[v].discovered = True
                forest.add_directed_edge(u, v, vertex.get_weight(v))
                queue.append(v)


def dfs_forest(graph: "Graph", source: str) -> "Graph":
    """
    Depth-first forest of the whole graph with discovery/finish timestamps.

    A single clock starts at 0 for the call and keeps running across trees.
    Each vertex gets ``start`` when first visited and ``finish`` once all its
    neighbors are explored, each time after the clock is advanced, so
    timestamps run 1..2V. Tree edges always have weight
    ``DFS_TREE_EDGE_WEIGHT`` (1), whatever the original edge weight.

    The traversal keeps an explicit stack of (vertex, pending neighbors)
    frames, so long chains do not hit the interpreter's recursion limit.

    Args:
        graph: Graph to traverse. Not modified.
        source: Label of the first root.

    Returns:
        New Graph holding the forest; its vertices carry ``start`` and
        ``finish``.

    Raises:
        SourceNotFound: If ``source`` is not in the graph.

    Complexity: O(V + E).

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('A', 'B', 7)
        True
        >>> forest = dfs_forest(G, 'A')
        >>> a, b = forest.get_vertex('A'), forest.get_vertex('B')
        >>> (a.start, b.start, b.finish, a.finish)
        (1, 2, 3, 4)
        >>> forest.get_weight('A', 'B')
        1
    """
    if source not in graph:
        raise SourceNotFound(source)

    marks = graph.reset_marks()
    forest = type(graph)()
    clock = 0

    for root in _restart_order(graph, source):
        if marks[root].discovered:
            continue
        forest.add_vertex(root, is_root=True)
        clock = _dfs_visit(graph, forest, root, marks, clock)

    _stamp(forest, marks)
    logger.debug(
        "DFS from %r: %d vertices in %d trees, clock=%d",
        source,
        forest.size(),
        len(forest.roots()),
        clock,
    )

    if is_debug_enabled():
        assert_spanning_forest(graph, forest)
        assert_valid_timestamps(forest)

    return forest


def _dfs_visit(
    graph: "Graph",
    forest: "Graph",
    root: str,
    marks: Dict[str, TraversalMarks],
    clock: int,
) -> int:
    """Visit everything reachable from ``root``; returns the advanced clock."""
    clock += 1
    marks[root].discovered = True
    marks[root].start = clock
    stack: List[Tuple[str, Iterator[str]]] = [
        (root, iter(graph.get_vertex(root).get_neighbors()))
    ]

    while stack:
        u, pending = stack[-1]
        for v in pending:
            if not marks[v].discovered:
                forest.add_directed_edge(u, v, DFS_TREE_EDGE_WEIGHT)
                clock += 1
                marks[v].discovered = True
                marks[v].start = clock
                stack.append((v, iter(graph.get_vertex(v).get_neighbors())))
                break
        else:
            stack.pop()
            clock += 1
            marks[u].finish = clock

    return clock

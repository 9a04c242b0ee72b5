"""
Core graph data structure.

Provides a mutable directed weighted Graph keyed by string labels, with a
root registry used by algorithm results (BFS/DFS forests and shortest-path
trees). Edges can only be added through an operation that first creates both
endpoints, so no edge ever points at a missing vertex.

Complexity:
    - add_vertex / add_directed_edge / contains_edge / get_weight: O(1)
    - remove_directed_edge: O(1)
    - remove_vertex: O(V), every remaining vertex is scanned because no
      reverse adjacency is kept
"""

from typing import Dict, Iterator, List, Optional, Tuple

from ..logging import get_logger
from .errors import EdgeNotFound, SelfLoopRejected, VertexNotFound
from .shortest import dijkstra_tree
from .traversal import bfs_forest, dfs_forest
from .vertex import TraversalMarks, Vertex

logger = get_logger(__name__)


class Graph:
    """
    Directed weighted graph with dynamic vertex and edge mutation.

    Mutation methods return whether the graph changed, so a caller mirroring
    the graph elsewhere (e.g. a rendered view) can decide whether to follow.

    Algorithm methods (``bfs``, ``dfs``, ``dijkstra``) return a new, independent
    Graph whose roots mark the head of each tree. The source graph is not
    modified by them.

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('A', 'B', 4)
        True
        >>> G.add_directed_edge('A', 'C', 1)
        True
        >>> G.add_directed_edge('C', 'B', 1)
        True
        >>> tree = G.dijkstra('A')
        >>> tree.get_vertex('B').distance
        2
    """

    def __init__(self):
        self._vertices: Dict[str, Vertex] = {}
        self._roots: Dict[str, Vertex] = {}

    # -- structural operations -------------------------------------------

    def add_vertex(self, label: str, is_root: bool = False) -> bool:
        """
        Add a vertex if it is not in the graph.

        Args:
            label: Vertex label.
            is_root: Register the new vertex as a forest/tree root. Ignored
                when the vertex already exists.

        Returns:
            True if a vertex was created, False if ``label`` was present.
        """
        if label in self._vertices:
            return False
        vertex = Vertex()
        self._vertices[label] = vertex
        if is_root:
            self._roots[label] = vertex
        logger.debug("Added vertex %r (root=%s)", label, is_root)
        return True

    def add_directed_edge(self, u: str, v: str, weight: int) -> bool:
        """
        Add a directed edge u -> v, creating missing endpoints as non-roots.

        If the edge already exists its stored weight is kept and ``weight`` is
        discarded.

        Args:
            u: Source label.
            v: Target label.
            weight: Edge weight.

        Returns:
            True if the edge was created, False if it already existed.

        Raises:
            SelfLoopRejected: If ``u == v``.
        """
        if u == v:
            raise SelfLoopRejected(u)
        self.add_vertex(u)
        self.add_vertex(v)
        added = self._vertices[u].add_edge(v, weight)
        if added:
            logger.debug("Added edge %r -> %r (weight=%s)", u, v, weight)
        return added

    def remove_vertex(self, u: str) -> bool:
        """
        Remove vertex ``u`` with all of its incoming and outgoing edges.

        Returns:
            True if the vertex was removed, False if it was not in the graph.
        """
        if u not in self._vertices:
            return False
        del self._vertices[u]
        self._roots.pop(u, None)
        for vertex in self._vertices.values():
            vertex.remove_edge(u)
        logger.debug("Removed vertex %r", u)
        return True

    def remove_directed_edge(self, u: str, v: str) -> bool:
        """
        Remove the directed edge u -> v if it exists.

        Returns:
            True if the edge was removed, False if there was no such edge.

        Raises:
            SelfLoopRejected: If ``u == v``.
            VertexNotFound: If either endpoint is not in the graph.
        """
        if u == v:
            raise SelfLoopRejected(u)
        self._require(u, v)
        removed = self._vertices[u].remove_edge(v)
        if removed:
            logger.debug("Removed edge %r -> %r", u, v)
        return removed

    # -- queries -----------------------------------------------------------

    def contains_edge(self, u: str, v: str) -> bool:
        """
        Check whether the directed edge u -> v is in the graph.

        Raises:
            VertexNotFound: If either endpoint is not in the graph.
        """
        self._require(u, v)
        return self._vertices[u].has_neighbor(v)

    def get_weight(self, u: str, v: str) -> int:
        """
        Return the weight of the directed edge u -> v.

        Raises:
            VertexNotFound: If either endpoint is not in the graph.
            EdgeNotFound: If both endpoints exist but are not connected.
        """
        self._require(u, v)
        vertex = self._vertices[u]
        if not vertex.has_neighbor(v):
            raise EdgeNotFound(u, v)
        return vertex.get_weight(v)

    def size(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def get_vertex(self, label: str) -> Optional[Vertex]:
        """Return the vertex for ``label``, or None if absent."""
        return self._vertices.get(label)

    def vertices(self) -> List[Tuple[str, Vertex]]:
        """Return all (label, Vertex) pairs. Order is not meaningful."""
        return list(self._vertices.items())

    def roots(self) -> List[Tuple[str, Vertex]]:
        """Return the (label, Vertex) pairs registered as roots."""
        return list(self._roots.items())

    def is_root(self, label: str) -> bool:
        return label in self._roots

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __iter__(self) -> Iterator[str]:
        return iter(self._vertices)

    def __repr__(self) -> str:
        edge_count = sum(v.out_degree() for v in self._vertices.values())
        return f"Graph(vertices={len(self._vertices)}, edges={edge_count}, roots={sorted(self._roots)})"

    # -- algorithms --------------------------------------------------------

    def reset_marks(self) -> Dict[str, TraversalMarks]:
        """
        Return a fresh transient-state table for one algorithm call.

        Every vertex starts undiscovered, with zero timestamps, infinite
        distance and no predecessor.
        """
        return {label: TraversalMarks() for label in self._vertices}

    def bfs(self, source: str) -> "Graph":
        """Breadth-first forest rooted at ``source``. See ``bfs_forest``."""
        return bfs_forest(self, source)

    def dfs(self, source: str) -> "Graph":
        """Depth-first forest rooted at ``source``. See ``dfs_forest``."""
        return dfs_forest(self, source)

    def dijkstra(self, source: str) -> "Graph":
        """Shortest-path tree rooted at ``source``. See ``dijkstra_tree``."""
        return dijkstra_tree(self, source)

    def _require(self, *labels: str) -> None:
        for label in labels:
            if label not in self._vertices:
                raise VertexNotFound(label)

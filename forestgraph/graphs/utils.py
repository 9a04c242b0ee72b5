"""
Utility functions for graphs and algorithm results.

Provides edge listing, tree walking for per-tree layout, parent-chain path
reconstruction and a dense weight matrix view.
"""

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .errors import VertexNotFound

if TYPE_CHECKING:
    from .core import Graph


def edges(graph: "Graph") -> List[Tuple[str, str, int]]:
    """
    Return all edges as (u, v, weight) triples sorted by (u, v).

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('B', 'A', 2)
        True
        >>> G.add_directed_edge('A', 'B', 1)
        True
        >>> edges(G)
        [('A', 'B', 1), ('B', 'A', 2)]
    """
    return sorted(
        (u, v, weight) for u, vertex in graph.vertices() for v, weight in vertex.edges.items()
    )


def parent_map(forest: "Graph") -> Dict[str, Optional[str]]:
    """
    Map every forest vertex to its tree parent (None for roots).

    Built in one pass over all edges since vertices only know their children.
    """
    parents: Dict[str, Optional[str]] = {label: None for label in forest}
    for u, vertex in forest.vertices():
        for v in vertex.get_neighbors():
            parents[v] = u
    return parents


def tree_parent(forest: "Graph", label: str) -> Optional[str]:
    """
    Return the tree parent of ``label``, or None if it is a root.

    Raises:
        VertexNotFound: If ``label`` is not in the forest.
    """
    if label not in forest:
        raise VertexNotFound(label)
    for u, vertex in forest.vertices():
        if vertex.has_neighbor(label):
            return u
    return None


def walk_tree(forest: "Graph", root: str) -> Iterator[Tuple[str, Optional[str], int]]:
    """
    Pre-order walk of the tree hanging from ``root``.

    Children are visited in sorted label order so the walk is reproducible,
    which lets a caller lay out each tree level by level.

    Args:
        forest: BFS/DFS forest or shortest-path tree.
        root: Label to start from (normally one of ``forest.roots()``).

    Yields:
        (label, parent, depth) triples; the root has parent None and depth 0.

    Raises:
        VertexNotFound: If ``root`` is not in the forest.

    Example:
        >>> for label, parent, depth in walk_tree(tree, 'A'):
        ...     print('  ' * depth + label)
    """
    if root not in forest:
        raise VertexNotFound(root)

    stack: List[Tuple[str, Optional[str], int]] = [(root, None, 0)]
    while stack:
        label, parent, depth = stack.pop()
        yield label, parent, depth
        children = sorted(forest.get_vertex(label).get_neighbors(), reverse=True)
        stack.extend((child, label, depth + 1) for child in children)


def tree_path(tree: "Graph", target: str) -> Optional[List[str]]:
    """
    Reconstruct the root-to-target path in a forest or tree.

    Args:
        tree: Algorithm result (e.g. a Dijkstra tree).
        target: Label to reach.

    Returns:
        List of labels from the tree root to ``target`` (inclusive), or None
        if ``target`` is not in the tree.

    Example:
        >>> tree = G.dijkstra('A')
        >>> tree_path(tree, 'B')
        ['A', 'C', 'B']
    """
    if target not in tree:
        return None

    parents = parent_map(tree)
    path = [target]
    current = parents[target]
    while current is not None:
        path.append(current)
        current = parents[current]
    path.reverse()
    return path


def path_weight(graph: "Graph", path: Sequence[str]) -> int:
    """
    Sum the weights of consecutive edges along ``path``.

    Raises:
        VertexNotFound: If a label on the path is not in the graph.
        EdgeNotFound: If two consecutive labels are not connected.
    """
    return sum(graph.get_weight(u, v) for u, v in zip(path, path[1:]))


def adjacency_matrix(
    graph: "Graph", labels: Optional[Sequence[str]] = None
) -> Tuple[np.ndarray, List[str]]:
    """
    Dense weight matrix of the graph.

    ``W[i, j]`` is the weight of edge labels[i] -> labels[j], ``np.inf`` when
    there is no edge, and 0 on the diagonal.

    Args:
        graph: Graph to convert.
        labels: Vertices to include, in row order. Defaults to all labels
            sorted.

    Returns:
        Tuple of (W, labels) where W has shape (n, n).

    Raises:
        VertexNotFound: If a requested label is not in the graph.
    """
    if labels is None:
        labels = sorted(graph)
    else:
        labels = list(labels)
        for label in labels:
            if label not in graph:
                raise VertexNotFound(label)

    index = {label: i for i, label in enumerate(labels)}
    n = len(labels)
    W = np.full((n, n), np.inf)
    np.fill_diagonal(W, 0.0)

    for label in labels:
        i = index[label]
        for v, weight in graph.get_vertex(label).edges.items():
            if v in index:
                W[i, index[v]] = weight

    return W, labels

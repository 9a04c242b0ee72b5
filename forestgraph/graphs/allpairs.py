"""
All-pairs shortest distances: Floyd-Warshall.

Used as a brute-force reference for shortest-path trees. Vectorized over
numpy rows, one pass per intermediate vertex.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import TYPE_CHECKING, Dict, List, Tuple

import numpy as np

from .errors import SourceNotFound
from .utils import adjacency_matrix

if TYPE_CHECKING:
    from .core import Graph


def floyd_warshall(graph: "Graph") -> Tuple[np.ndarray, List[str]]:
    """
    Floyd-Warshall algorithm for all-pairs shortest distances.

    Handles negative edge weights but not negative cycles (distances are
    meaningless if one exists).

    Args:
        graph: Graph to analyse.

    Returns:
        Tuple of (D, labels): D[i, j] is the shortest distance from labels[i]
        to labels[j] (``np.inf`` if unreachable); labels are sorted.

    Complexity: O(V^3).

    Example:
        >>> G = Graph()
        >>> G.add_directed_edge('A', 'B', 1)
        True
        >>> G.add_directed_edge('B', 'C', 2)
        True
        >>> D, labels = floyd_warshall(G)
        >>> D[labels.index('A'), labels.index('C')]
        3.0
    """
    D, labels = adjacency_matrix(graph)
    for k in range(len(labels)):
        D = np.minimum(D, D[:, k, None] + D[None, k, :])
    return D, labels


def distances_from(graph: "Graph", source: str) -> Dict[str, float]:
    """
    Shortest distance from ``source`` to every vertex, via Floyd-Warshall.

    Returns:
        Mapping label -> distance (``np.inf`` if unreachable).

    Raises:
        SourceNotFound: If ``source`` is not in the graph.
    """
    if source not in graph:
        raise SourceNotFound(source)
    D, labels = floyd_warshall(graph)
    row = D[labels.index(source)]
    return {label: float(row[i]) for i, label in enumerate(labels)}

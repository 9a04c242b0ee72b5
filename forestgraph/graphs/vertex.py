"""
Vertex: outgoing edges and transient traversal state of one labelled node.

A vertex does not know its own label; the owning Graph keys vertices by label
and every neighbor is referenced by label as well.
"""

import math
from dataclasses import dataclass
from typing import Dict, Optional, Set

from .errors import EdgeNotFound

# Distance of a vertex not (yet) reached by Dijkstra.
INFINITY = math.inf


@dataclass
class TraversalMarks:
    """
    Per-vertex bookkeeping for a single algorithm call.

    Default values are the reset state every algorithm starts from.

    Attributes:
        discovered: Whether the traversal has reached the vertex.
        start: DFS discovery timestamp (0 until discovered by DFS).
        finish: DFS completion timestamp (0 until finished by DFS).
        distance: Tentative shortest distance (INFINITY until relaxed).
        predecessor: Label that last improved ``distance``.
    """

    discovered: bool = False
    start: int = 0
    finish: int = 0
    distance: float = INFINITY
    predecessor: Optional[str] = None


class Vertex:
    """
    Node of a directed weighted graph.

    Attributes:
        edges: Mapping neighbor label -> edge weight. Weights are set when
            the edge is created and never overwritten afterwards.
        discovered, start, finish, distance, predecessor: Transient traversal
            state. Algorithm result graphs carry the final values; the fields
            are plain attributes with no validation.
    """

    def __init__(self):
        self.edges: Dict[str, int] = {}
        self.reset_state()

    def reset_state(self) -> None:
        """Restore every transient field to its pre-traversal value."""
        self.apply_marks(TraversalMarks())

    def apply_marks(self, marks: TraversalMarks) -> None:
        """Copy a traversal's bookkeeping onto this vertex."""
        self.discovered = marks.discovered
        self.start = marks.start
        self.finish = marks.finish
        self.distance = marks.distance
        self.predecessor = marks.predecessor

    def has_neighbor(self, v: str) -> bool:
        """Return True iff a directed edge to ``v`` exists."""
        return v in self.edges

    def add_edge(self, v: str, weight: int) -> bool:
        """
        Add a directed edge to ``v``.

        An existing edge keeps its stored weight; ``weight`` is then ignored.

        Returns:
            True if the edge was inserted, False if it already existed.
        """
        if v in self.edges:
            return False
        self.edges[v] = weight
        return True

    def remove_edge(self, v: str) -> bool:
        """Remove the edge to ``v``; returns False if there was none."""
        if v not in self.edges:
            return False
        del self.edges[v]
        return True

    def get_weight(self, v: str) -> int:
        """
        Return the weight of the edge to ``v``.

        Raises:
            EdgeNotFound: If there is no edge to ``v``.
        """
        try:
            return self.edges[v]
        except KeyError:
            raise EdgeNotFound(None, v) from None

    def get_neighbors(self) -> Set[str]:
        """Return the labels this vertex has edges to (unordered)."""
        return set(self.edges)

    def out_degree(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return (
            f"Vertex(edges={self.edges!r}, discovered={self.discovered}, "
            f"start={self.start}, finish={self.finish}, "
            f"distance={self.distance}, predecessor={self.predecessor!r})"
        )

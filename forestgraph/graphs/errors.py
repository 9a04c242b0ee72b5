"""
Error taxonomy for graph operations.

Every error is a ``ValueError`` subclass through ``GraphError``; lookups of
missing vertices or edges are additionally ``KeyError`` so callers can treat
them as plain missing-key failures. All errors are raised synchronously and
abort the current operation before any mutation happens.
"""

from typing import Optional


class GraphError(ValueError):
    """Base class for all graph errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class VertexNotFound(GraphError, KeyError):
    """Raised when an operation references a label absent from the graph."""

    def __init__(self, label: str, message: Optional[str] = None):
        super().__init__(message or f"Vertex {label!r} is not in graph")
        self.label = label


class EdgeNotFound(GraphError, KeyError):
    """Raised when both endpoints exist but no edge connects them."""

    def __init__(self, u: Optional[str], v: str):
        if u is None:
            message = f"No edge to {v!r}"
        else:
            message = f"No edge {u!r} -> {v!r}"
        super().__init__(message)
        self.u = u
        self.v = v


class SelfLoopRejected(GraphError):
    """Raised when the same label is given as both endpoints of an edge."""

    def __init__(self, label: str):
        super().__init__(f"Self-loops are not allowed: {label!r} -> {label!r}")
        self.label = label


class SourceNotFound(VertexNotFound):
    """Raised when an algorithm's source label is absent."""

    def __init__(self, label: str):
        super().__init__(label, f"Source {label!r} is not in graph")


class NegativeWeightOnActivePath(GraphError):
    """Raised by Dijkstra when a finalized vertex has a negative outgoing edge."""

    def __init__(self, u: str, v: str, weight: int):
        super().__init__(
            f"Dijkstra requires non-negative weights. "
            f"Found negative weight {weight} on edge ({u}, {v}) reachable from source"
        )
        self.u = u
        self.v = v
        self.weight = weight

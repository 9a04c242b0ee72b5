"""forestgraph - a mutable directed weighted graph with BFS/DFS forests and Dijkstra trees."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_no_dangling_edges,
    assert_roots_subset,
    assert_spanning_forest,
    assert_valid_timestamps,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Graph core, algorithms and helpers
from .graphs import (
    DFS_TREE_EDGE_WEIGHT,
    INFINITY,
    EdgeNotFound,
    Graph,
    GraphError,
    NegativeWeightOnActivePath,
    SelfLoopRejected,
    SourceNotFound,
    TraversalMarks,
    Vertex,
    VertexNotFound,
    adjacency_matrix,
    bfs_forest,
    dfs_forest,
    dijkstra_tree,
    distances_from,
    edges,
    floyd_warshall,
    parent_map,
    path_weight,
    tree_parent,
    tree_path,
    walk_tree,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graph core
    "Graph",
    "Vertex",
    "TraversalMarks",
    "INFINITY",
    # Algorithms
    "bfs_forest",
    "dfs_forest",
    "dijkstra_tree",
    "DFS_TREE_EDGE_WEIGHT",
    "floyd_warshall",
    "distances_from",
    # Helpers
    "adjacency_matrix",
    "edges",
    "parent_map",
    "path_weight",
    "tree_parent",
    "tree_path",
    "walk_tree",
    # Errors
    "GraphError",
    "VertexNotFound",
    "EdgeNotFound",
    "SelfLoopRejected",
    "SourceNotFound",
    "NegativeWeightOnActivePath",
    # Diagnostics
    "assert_no_dangling_edges",
    "assert_roots_subset",
    "assert_spanning_forest",
    "assert_valid_timestamps",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

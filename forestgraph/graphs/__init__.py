"""
Graph package for forestgraph.

This package provides:
- A mutable directed weighted Graph keyed by string labels (Vertex, Graph)
- Breadth-first and depth-first forests (with DFS timestamps)
- Dijkstra shortest-path trees
- Read-only helpers for walking and checking algorithm results

Algorithm results are new Graph instances whose roots mark the tree heads.
Vertex and neighbor iteration order is not meaningful.
"""

from .allpairs import distances_from, floyd_warshall
from .core import Graph
from .errors import (
    EdgeNotFound,
    GraphError,
    NegativeWeightOnActivePath,
    SelfLoopRejected,
    SourceNotFound,
    VertexNotFound,
)
from .shortest import dijkstra_tree
from .traversal import DFS_TREE_EDGE_WEIGHT, bfs_forest, dfs_forest
from .utils import (
    adjacency_matrix,
    edges,
    parent_map,
    path_weight,
    tree_parent,
    tree_path,
    walk_tree,
)
from .vertex import INFINITY, TraversalMarks, Vertex

__all__ = [
    "Graph",
    "Vertex",
    "TraversalMarks",
    "INFINITY",
    "bfs_forest",
    "dfs_forest",
    "dijkstra_tree",
    "DFS_TREE_EDGE_WEIGHT",
    "floyd_warshall",
    "distances_from",
    "adjacency_matrix",
    "edges",
    "parent_map",
    "path_weight",
    "tree_parent",
    "tree_path",
    "walk_tree",
    "GraphError",
    "VertexNotFound",
    "EdgeNotFound",
    "SelfLoopRejected",
    "SourceNotFound",
    "NegativeWeightOnActivePath",
]

# Example usage:
# from forestgraph.graphs import Graph, tree_path
#
# G = Graph()
# G.add_directed_edge('A', 'B', 4)
# G.add_directed_edge('A', 'C', 1)
# G.add_directed_edge('C', 'B', 1)
# tree = G.dijkstra('A')
# path = tree_path(tree, 'B')  # ['A', 'C', 'B']

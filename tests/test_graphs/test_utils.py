"""Tests for graph utility functions and all-pairs distances."""

import numpy as np
import pytest

from forestgraph.graphs import (
    EdgeNotFound,
    Graph,
    SourceNotFound,
    VertexNotFound,
    adjacency_matrix,
    distances_from,
    edges,
    floyd_warshall,
    parent_map,
    path_weight,
    tree_parent,
    tree_path,
    walk_tree,
)


@pytest.fixture
def two_trees() -> Graph:
    """Forest with trees R(->X->Y, ->Z) and S."""
    F = Graph()
    F.add_vertex("R", is_root=True)
    F.add_directed_edge("R", "X", 1)
    F.add_directed_edge("X", "Y", 1)
    F.add_directed_edge("R", "Z", 1)
    F.add_vertex("S", is_root=True)
    return F


class TestEdges:
    """Tests for edge listing."""

    def test_edges_sorted(self):
        """Edges come back sorted by (u, v)."""
        G = Graph()
        G.add_directed_edge("B", "A", 2)
        G.add_directed_edge("A", "C", 5)
        G.add_directed_edge("A", "B", 1)
        assert edges(G) == [("A", "B", 1), ("A", "C", 5), ("B", "A", 2)]

    def test_edges_empty(self):
        """A graph without edges lists nothing."""
        G = Graph()
        G.add_vertex("A")
        assert edges(G) == []


class TestTreeHelpers:
    """Tests for parent lookup, tree walks and paths."""

    def test_parent_map(self, two_trees):
        """Roots map to None, everything else to its parent."""
        assert parent_map(two_trees) == {
            "R": None,
            "X": "R",
            "Y": "X",
            "Z": "R",
            "S": None,
        }

    def test_tree_parent(self, two_trees):
        """tree_parent finds the unique parent."""
        assert tree_parent(two_trees, "Y") == "X"
        assert tree_parent(two_trees, "R") is None

    def test_tree_parent_missing(self, two_trees):
        """Unknown labels raise VertexNotFound."""
        with pytest.raises(VertexNotFound):
            tree_parent(two_trees, "Q")

    def test_walk_tree_preorder(self, two_trees):
        """Walk is pre-order with children in sorted order and depths."""
        walk = list(walk_tree(two_trees, "R"))
        assert walk == [
            ("R", None, 0),
            ("X", "R", 1),
            ("Y", "X", 2),
            ("Z", "R", 1),
        ]

    def test_walk_single_vertex_tree(self, two_trees):
        """A lone root yields only itself."""
        assert list(walk_tree(two_trees, "S")) == [("S", None, 0)]

    def test_walk_missing_root(self, two_trees):
        """Unknown roots raise VertexNotFound."""
        with pytest.raises(VertexNotFound):
            list(walk_tree(two_trees, "Q"))

    def test_walks_cover_bfs_forest(self, disconnected):
        """Walking every root of a BFS forest visits each vertex once."""
        forest = disconnected.bfs("A")
        visited = [label for root, _ in forest.roots() for label, _, _ in walk_tree(forest, root)]
        assert sorted(visited) == ["A", "B", "C"]

    def test_tree_path(self, two_trees):
        """Paths run from the tree root to the target."""
        assert tree_path(two_trees, "Y") == ["R", "X", "Y"]
        assert tree_path(two_trees, "S") == ["S"]
        assert tree_path(two_trees, "Q") is None

    def test_path_weight(self, triangle_shortcut):
        """path_weight sums consecutive edge weights."""
        assert path_weight(triangle_shortcut, ["A", "C", "B"]) == 2
        assert path_weight(triangle_shortcut, ["A"]) == 0

    def test_path_weight_missing_edge(self, triangle_shortcut):
        """A path using a non-edge raises EdgeNotFound."""
        with pytest.raises(EdgeNotFound):
            path_weight(triangle_shortcut, ["B", "A"])


class TestAdjacencyMatrix:
    """Tests for the dense weight matrix."""

    def test_matrix_default_order(self, triangle_shortcut):
        """Labels are sorted; missing edges are inf; diagonal is zero."""
        W, labels = adjacency_matrix(triangle_shortcut)
        assert labels == ["A", "B", "C"]
        expected = np.array(
            [
                [0.0, 4.0, 1.0],
                [np.inf, 0.0, np.inf],
                [np.inf, 1.0, 0.0],
            ]
        )
        np.testing.assert_array_equal(W, expected)

    def test_matrix_subset(self, triangle_shortcut):
        """A label subset restricts rows and columns."""
        W, labels = adjacency_matrix(triangle_shortcut, ["C", "B"])
        assert labels == ["C", "B"]
        np.testing.assert_array_equal(W, np.array([[0.0, 1.0], [np.inf, 0.0]]))

    def test_matrix_unknown_label(self, triangle_shortcut):
        """Unknown labels raise VertexNotFound."""
        with pytest.raises(VertexNotFound):
            adjacency_matrix(triangle_shortcut, ["A", "Q"])

    def test_matrix_empty_graph(self):
        """An empty graph gives a 0x0 matrix."""
        W, labels = adjacency_matrix(Graph())
        assert W.shape == (0, 0)
        assert labels == []


class TestFloydWarshall:
    """Tests for all-pairs distances."""

    def test_floyd_warshall(self, triangle_shortcut):
        """All-pairs distances use the detour through C."""
        D, labels = floyd_warshall(triangle_shortcut)
        idx = {label: i for i, label in enumerate(labels)}
        assert D[idx["A"], idx["B"]] == 2.0
        assert D[idx["A"], idx["C"]] == 1.0
        assert np.isinf(D[idx["B"], idx["A"]])

    def test_floyd_warshall_negative_edge(self):
        """Negative edges are handled when there is no negative cycle."""
        G = Graph()
        G.add_directed_edge("A", "B", 4)
        G.add_directed_edge("B", "C", -2)
        D, labels = floyd_warshall(G)
        assert D[labels.index("A"), labels.index("C")] == 2.0

    def test_distances_from(self, disconnected):
        """Single-source view of the all-pairs result."""
        dist = distances_from(disconnected, "A")
        assert dist["A"] == 0.0
        assert dist["B"] == 1.0
        assert np.isinf(dist["C"])

    def test_distances_from_missing_source(self, disconnected):
        """An unknown source raises SourceNotFound."""
        with pytest.raises(SourceNotFound):
            distances_from(disconnected, "Q")

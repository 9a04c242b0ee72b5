"""Forest demo: build a small road network and print its three derived trees.

This example mutates a graph the way an interactive front end would, then
prints the BFS forest, the DFS forest with discovery/finish times, and the
Dijkstra shortest-path tree with its edge weights.
"""

from __future__ import annotations

import forestgraph as fg


def print_forest(title: str, forest: fg.Graph, show_times: bool = False, show_weights: bool = False) -> None:
    """Print every tree of ``forest``, one indented line per vertex."""
    print(title)
    for root, _ in sorted(forest.roots()):
        for label, parent, depth in fg.walk_tree(forest, root):
            line = "  " * (depth + 1) + label
            vertex = forest.get_vertex(label)
            if show_times:
                line += f"  {vertex.start}/{vertex.finish}"
            if show_weights and parent is not None:
                line += f"  (+{forest.get_weight(parent, label)}, total {vertex.distance})"
            print(line)


def main() -> None:
    """Build the demo graph and print BFS, DFS and Dijkstra results."""
    graph = fg.Graph()
    for u, v, w in [
        ("depot", "north", 4),
        ("depot", "east", 1),
        ("east", "north", 1),
        ("north", "harbor", 3),
        ("east", "harbor", 7),
        ("harbor", "depot", 2),
    ]:
        graph.add_directed_edge(u, v, w)

    # Disconnected part of the network
    graph.add_directed_edge("island", "lighthouse", 5)

    # Rejected mutations report through exceptions or a False return
    try:
        graph.add_directed_edge("depot", "depot", 1)
    except fg.SelfLoopRejected as exc:
        print(f"Rejected: {exc}")
    print(f"Duplicate edge added: {graph.add_directed_edge('depot', 'east', 9)}")

    print(f"Graph has {graph.size()} vertices")

    print_forest("BFS forest:", graph.bfs("depot"))
    print_forest("DFS forest:", graph.dfs("depot"), show_times=True)

    tree = graph.dijkstra("depot")
    print_forest("Shortest-path tree:", tree, show_weights=True)
    print(f"Shortest route to harbor: {' -> '.join(fg.tree_path(tree, 'harbor'))}")


if __name__ == "__main__":
    main()

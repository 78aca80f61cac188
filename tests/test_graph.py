import random

import networkx as nx
import pytest

from avlst import AVLTreeST, Direction, to_graph


@pytest.fixture
def tree():
    tree = AVLTreeST()
    for key in [5, 3, 8, 1, 4, 7, 9]:
        tree.put(key, str(key))
    yield tree


def test_empty_graph():
    G = to_graph(AVLTreeST())

    assert G.number_of_nodes() == 0
    assert "root" not in G.graph


def test_graph_shape(tree: AVLTreeST):
    G = to_graph(tree)

    assert G.graph["root"] == 5
    assert set(G.nodes) == {1, 3, 4, 5, 7, 8, 9}
    assert G.number_of_edges() == 6
    assert G.edges[5, 3]["direction"] == Direction.LEFT
    assert G.edges[5, 8]["direction"] == Direction.RIGHT
    assert G.nodes[8]["value"] == "8"
    assert G.nodes[5]["size"] == 7
    assert G.nodes[1]["height"] == 0


@pytest.mark.parametrize("seed", [11, 12])
def test_graph_matches_tree(seed):
    rng = random.Random(seed)
    tree = AVLTreeST()
    for _ in range(300):
        tree.put(rng.randrange(1000), 1)
    for _ in range(100):
        tree.delete(rng.randrange(1000))

    G = to_graph(tree)

    assert nx.is_arborescence(G)
    assert nx.dag_longest_path_length(G) == tree.height()
    root = G.graph["root"]
    assert len(nx.descendants(G, root)) + 1 == tree.size()
    # every node has at most one child on each side
    for key in G:
        sides = [G.edges[key, child]["direction"] for child in G.successors(key)]
        assert len(sides) == len(set(sides))
    assert nx.shortest_path_length(G, root, tree.min()) <= tree.height()

import networkx as nx

from .avltree import AVLTreeST, Direction


def to_graph(tree: AVLTreeST) -> nx.DiGraph:
    """Export the shape of the tree as a directed graph

    Nodes are the keys of the tree, carrying their value, height and size.
    Edges run from parent to child and record which side the child hangs on.
    """
    G = nx.DiGraph()
    if tree.root is None:
        return G

    stack = [tree.root]
    while stack:
        node = stack.pop()
        G.add_node(node.key, value=node.value, height=node.height, size=node.size)
        for direction in (Direction.LEFT, Direction.RIGHT):
            child = node.get_child(direction)
            if child is not None:
                G.add_edge(node.key, child.key, direction=direction)
                stack.append(child)
    G.graph["root"] = tree.root.key
    return G

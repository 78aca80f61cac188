from .avltree import AVLTreeST, Direction, Node
from .errors import EmptyCollection, InvalidArgument
from .graph import to_graph

__all__ = [
    "AVLTreeST",
    "Direction",
    "EmptyCollection",
    "InvalidArgument",
    "Node",
    "to_graph",
]

import collections
import copy
import enum
import logging
from typing import Any, List, Optional

from . import check
from .errors import EmptyCollection, InvalidArgument

logger = logging.getLogger(__name__)

# run the full consistency check after every mutating call
CHECK_INVARIANTS = False


class Direction(enum.IntEnum):
    ROOT = -1
    LEFT = 0
    RIGHT = 1


class Node:

    def __init__(self, key, value, height: int = 0, size: int = 1):
        self.key = key
        self.value = value
        self.height = height
        self.size = size
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def get_child(self, direction: Direction):
        if direction == Direction.LEFT:
            return self.left
        return self.right

    def set_child(self, direction: Direction, node: Optional["Node"]):
        if direction == Direction.LEFT:
            self.left = node
        else:
            self.right = node


def size(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return node.size


def height(node: Optional[Node]) -> int:
    if node is None:
        return -1
    return node.height


def balance_factor(node: Node) -> int:
    return height(node.left) - height(node.right)


def update(node: Node):
    """Recompute the cached size and height of node from its children"""
    node.size = 1 + size(node.left) + size(node.right)
    node.height = 1 + max(height(node.left), height(node.right))


def rotate(sub: Node, direction: Direction) -> Node:
    """Rotate the subtree rooted at sub towards direction, returning the new root

    A LEFT rotation lifts the right child of sub, a RIGHT rotation lifts the
    left child. Membership of the subtree is unchanged, so the new root
    inherits the size of sub.
    """
    logger.debug("rotating %r %s", sub.key, direction.name)
    new_root = sub.get_child(Direction(1 - direction))
    sub.set_child(Direction(1 - direction), new_root.get_child(direction))
    new_root.set_child(direction, sub)
    new_root.size = sub.size
    update(sub)
    new_root.height = 1 + max(height(new_root.left), height(new_root.right))
    return new_root


def rotate_left(node: Node) -> Node:
    return rotate(node, Direction.LEFT)


def rotate_right(node: Node) -> Node:
    return rotate(node, Direction.RIGHT)


def balance(node: Node) -> Node:
    """Restore the AVL property at node, whose children are already balanced"""
    if balance_factor(node) > 1:
        # left-right case becomes left-left
        if balance_factor(node.left) < 0:
            node.left = rotate_left(node.left)
        node = rotate_right(node)
    elif balance_factor(node) < -1:
        if balance_factor(node.right) > 0:
            node.right = rotate_right(node.right)
        node = rotate_left(node)
    return node


def rebuild(node: Node) -> Node:
    update(node)
    return balance(node)


class AVLTreeST:
    """Ordered symbol table backed by an AVL tree

    Keys must be mutually comparable and not None. Storing None as a value
    removes the key.
    """

    def __init__(self):
        self.root: Optional[Node] = None

    def is_empty(self) -> bool:
        return self.root is None

    def size(self) -> int:
        return size(self.root)

    def height(self) -> int:
        return height(self.root)

    def __len__(self):
        return self.size()

    def __contains__(self, key):
        return key is not None and self._get(self.root, key) is not None

    def __iter__(self):
        return iter(self.keys())

    def get(self, key) -> Any:
        """Returns the value stored under key, or None if key is absent"""
        if key is None:
            raise InvalidArgument("argument to get() is None")
        node = self._get(self.root, key)
        if node is None:
            return None
        return node.value

    def _get(self, node: Optional[Node], key) -> Optional[Node]:
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def contains(self, key) -> bool:
        if key is None:
            raise InvalidArgument("argument to contains() is None")
        return self._get(self.root, key) is not None

    def put(self, key, value):
        if key is None:
            raise InvalidArgument("argument to put() is None")
        if value is None:
            self.delete(key)
            return
        self.root = self._put(self.root, key, value)
        self._check()

    def _put(self, node: Optional[Node], key, value) -> Node:
        if node is None:
            return Node(key, value)
        if key < node.key:
            node.left = self._put(node.left, key, value)
        elif key > node.key:
            node.right = self._put(node.right, key, value)
        else:
            # overwriting a value leaves the shape untouched
            node.value = value
            return node
        return rebuild(node)

    def delete(self, key):
        if key is None:
            raise InvalidArgument("argument to delete() is None")
        if not self.contains(key):
            return
        self.root = self._delete(self.root, key)
        self._check()

    def _delete(self, node: Node, key) -> Optional[Node]:
        if key < node.key:
            node.left = self._delete(node.left, key)
        elif key > node.key:
            node.right = self._delete(node.right, key)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left
            # node has 2 children, replace it with its in-order successor,
            # the leftmost node of its right subtree
            successor = copy.copy(self._min(node.right))
            successor.right = self._delete_min(node.right)
            successor.left = node.left
            node = successor
        return rebuild(node)

    def min(self):
        if self.is_empty():
            raise EmptyCollection("call min() with empty tree")
        return self._min(self.root).key

    def _min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def max(self):
        if self.is_empty():
            raise EmptyCollection("call max() with empty tree")
        return self._max(self.root).key

    def _max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def delete_min(self):
        if self.is_empty():
            raise EmptyCollection("call delete_min() with empty tree")
        self.root = self._delete_min(self.root)
        self._check()

    def _delete_min(self, node: Node) -> Optional[Node]:
        if node.left is None:
            return node.right
        node.left = self._delete_min(node.left)
        return rebuild(node)

    def delete_max(self):
        if self.is_empty():
            raise EmptyCollection("call delete_max() with empty tree")
        self.root = self._delete_max(self.root)
        self._check()

    def _delete_max(self, node: Node) -> Optional[Node]:
        if node.right is None:
            return node.left
        node.right = self._delete_max(node.right)
        return rebuild(node)

    def floor(self, key):
        """Returns the largest key less than or equal to key, or None"""
        if key is None:
            raise InvalidArgument("argument to floor() is None")
        if self.is_empty():
            raise EmptyCollection("call floor() with empty tree")
        node = self._floor(self.root, key)
        if node is None:
            return None
        return node.key

    def _floor(self, node: Optional[Node], key) -> Optional[Node]:
        if node is None:
            return None
        if key == node.key:
            return node
        if key < node.key:
            return self._floor(node.left, key)
        # a closer match in the right subtree beats this node
        found = self._floor(node.right, key)
        return node if found is None else found

    def ceiling(self, key):
        """Returns the smallest key greater than or equal to key, or None"""
        if key is None:
            raise InvalidArgument("argument to ceiling() is None")
        if self.is_empty():
            raise EmptyCollection("call ceiling() with empty tree")
        node = self._ceiling(self.root, key)
        if node is None:
            return None
        return node.key

    def _ceiling(self, node: Optional[Node], key) -> Optional[Node]:
        if node is None:
            return None
        if key == node.key:
            return node
        if key > node.key:
            return self._ceiling(node.right, key)
        found = self._ceiling(node.left, key)
        return node if found is None else found

    def select(self, k: int):
        """Returns the key of rank k, counting from 0 in ascending order"""
        if isinstance(k, bool) or not isinstance(k, int) or not 0 <= k < self.size():
            raise InvalidArgument(f"k is not in range 0 - {self.size() - 1}")
        node = self.root
        while True:
            left_size = size(node.left)
            if k < left_size:
                node = node.left
            elif k > left_size:
                k -= left_size + 1
                node = node.right
            else:
                return node.key

    def rank(self, key) -> int:
        """Returns the number of keys strictly less than key"""
        if key is None:
            raise InvalidArgument("argument to rank() is None")
        if self.is_empty():
            raise EmptyCollection("call rank() with empty tree")
        rank = 0
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                rank += size(node.left) + 1
                node = node.right
            else:
                return rank + size(node.left)
        return rank

    def keys(self) -> List:
        """Returns all keys in ascending order"""
        keys = []
        self._keys(self.root, keys)
        return keys

    def _keys(self, node: Optional[Node], keys: list):
        if node is None:
            return
        self._keys(node.left, keys)
        keys.append(node.key)
        self._keys(node.right, keys)

    def keys_level_order(self) -> List:
        """Returns all keys breadth first, root first and left to right"""
        keys = []
        if self.is_empty():
            return keys
        queue = collections.deque([self.root])
        while queue:
            node = queue.popleft()
            keys.append(node.key)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return keys

    def _check(self):
        if CHECK_INVARIANTS and not check.check(self):
            raise AssertionError("AVL tree invariants violated")

    def pprint(self, node: Node = None, depth=0, direction=Direction.ROOT):
        if depth == 0 and node is None:
            node = self.root
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        return ("\t" * depth + f"|_ {direction.name} | {node.key}: {node.value}"
                + f" (h={node.height}, n={node.size})\n"
                + self.pprint(node.left, depth + 1, Direction.LEFT)
                + self.pprint(node.right, depth + 1, Direction.RIGHT))

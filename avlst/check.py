# consistency checks for an AVLTreeST. these walk the whole tree, so they are
# meant for tests and debugging rather than for use after every operation
import logging

logger = logging.getLogger(__name__)


def _height(node) -> int:
    return -1 if node is None else node.height


def _size(node) -> int:
    return 0 if node is None else node.size


def is_bst(tree) -> bool:
    """Every key lies strictly between the bounds set by its ancestors"""
    stack = [(tree.root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if low is not None and not node.key > low:
            return False
        if high is not None and not node.key < high:
            return False
        stack.append((node.left, low, node.key))
        stack.append((node.right, node.key, high))
    return True


def _nodes(tree):
    stack = [tree.root]
    while stack:
        node = stack.pop()
        if node is None:
            continue
        yield node
        stack.append(node.left)
        stack.append(node.right)


def is_avl(tree) -> bool:
    return all(abs(_height(n.left) - _height(n.right)) <= 1 for n in _nodes(tree))


def is_size_consistent(tree) -> bool:
    return all(n.size == _size(n.left) + _size(n.right) + 1 for n in _nodes(tree))


def is_height_consistent(tree) -> bool:
    return all(n.height == 1 + max(_height(n.left), _height(n.right))
               for n in _nodes(tree))


def is_rank_consistent(tree) -> bool:
    for i in range(tree.size()):
        if tree.rank(tree.select(i)) != i:
            return False
    for key in tree.keys():
        if tree.select(tree.rank(key)) != key:
            return False
    return True


def check(tree) -> bool:
    ok = True
    if not is_bst(tree):
        logger.warning("symmetric order not consistent")
        ok = False
    if not is_avl(tree):
        logger.warning("AVL property not consistent")
        ok = False
    if not is_size_consistent(tree):
        logger.warning("subtree counts not consistent")
        ok = False
    if not is_height_consistent(tree):
        logger.warning("subtree heights not consistent")
        ok = False
    # rank and select rely on correct sizes, don't bother if those are broken
    if ok and not is_rank_consistent(tree):
        logger.warning("ranks not consistent")
        ok = False
    return ok

"""Binary trees: building, traversing and enumerating search trees."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_NULL = -1


@dataclass
class Node:
    """A binary tree node."""

    value: int
    left: Node | None = None
    right: Node | None = None


def bst_insert(root: Node | None, value: int) -> Node:
    """Insert ``value`` into a binary search tree and return its root.

    Equal values go to the right.
    """
    new = Node(value)
    if root is None:
        return new
    node = root
    while True:
        if value < node.value:
            if node.left is None:
                node.left = new
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new
                return root
            node = node.right


def build_bst(values: Iterable[int]) -> Node | None:
    """Build a binary search tree from ``values``, read up to the first -1."""
    root = None
    for value in values:
        if value == _NULL:
            break
        root = bst_insert(root, value)
    return root


def build_tree(values: Iterable[int]) -> Node | None:
    """Build a tree from its preorder listing, where -1 marks a missing child."""
    stream = iter(values)

    def take() -> int:
        try:
            return next(stream)
        except StopIteration:
            raise ValueError("the preorder listing ends too early") from None

    def grow() -> Node | None:
        value = take()
        if value == _NULL:
            return None
        node = Node(value)
        node.left = grow()
        node.right = grow()
        return node

    return grow()


def preorder(root: Node | None) -> list[int]:
    """Values in root, left, right order."""
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is not None:
            result.append(node.value)
            stack.append(node.right)
            stack.append(node.left)
    return result


def inorder(root: Node | None) -> list[int]:
    """Values in left, root, right order."""
    result = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: Node | None) -> list[int]:
    """Values in left, right, root order."""
    result = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node is not None:
            result.append(node.value)
            stack.append(node.left)
            stack.append(node.right)
    result.reverse()
    return result


def _all_trees(start: int, end: int) -> list[Node | None]:
    if start > end:
        return [None]
    if start == end:
        return [Node(start)]
    trees: list[Node | None] = []
    for root in range(start, end + 1):
        lefts = _all_trees(start, root - 1)
        rights = _all_trees(root + 1, end)
        trees.extend(Node(root, left, right) for left in lefts for right in rights)
    return trees


def generate_trees(n: int) -> list[Node]:
    """Every structurally distinct binary search tree holding 1..n.

    Trees may share subtrees.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return []
    return [tree for tree in _all_trees(1, n) if tree is not None]


def _tokens(root: Node | None) -> Iterator[str]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node is None:
            yield "null"
        else:
            yield str(node.value)
            stack.append(node.right)
            stack.append(node.left)


def serialize_preorder(root: Node | None) -> str:
    """Preorder listing with ``null`` for every missing child, space-separated."""
    return " ".join(_tokens(root))
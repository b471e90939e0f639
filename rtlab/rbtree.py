"""A red-black tree of ordered keys."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, List, Optional


class Color(Enum):
    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class RBNode:
    """A tree node; links are kept out of repr to avoid cycles."""

    key: Any
    color: Color = Color.RED
    left: Optional["RBNode"] = field(default=None, repr=False)
    right: Optional["RBNode"] = field(default=None, repr=False)
    parent: Optional["RBNode"] = field(default=None, repr=False)


def _is_red(node: Optional[RBNode]) -> bool:
    return node is not None and node.color is Color.RED


class RBTree:
    """Red-black tree; equal keys are kept and go to the right."""

    def __init__(self) -> None:
        self.root: Optional[RBNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.iterative_search(key) is not None

    # traversal

    def preorder(self) -> List[Any]:
        return list(self._preorder(self.root))

    def inorder(self) -> List[Any]:
        return list(self._inorder(self.root))

    def postorder(self) -> List[Any]:
        return list(self._postorder(self.root))

    def _preorder(self, node: Optional[RBNode]) -> Iterator[Any]:
        if node is not None:
            yield node.key
            yield from self._preorder(node.left)
            yield from self._preorder(node.right)

    def _inorder(self, node: Optional[RBNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._inorder(node.left)
            yield node.key
            yield from self._inorder(node.right)

    def _postorder(self, node: Optional[RBNode]) -> Iterator[Any]:
        if node is not None:
            yield from self._postorder(node.left)
            yield from self._postorder(node.right)
            yield node.key

    # lookup

    def search(self, key: Any) -> Optional[RBNode]:
        """Recursive lookup of the node holding ``key``."""
        return self._search(self.root, key)

    def _search(self, node: Optional[RBNode], key: Any) -> Optional[RBNode]:
        if node is None or node.key == key:
            return node
        if key < node.key:
            return self._search(node.left, key)
        return self._search(node.right, key)

    def iterative_search(self, key: Any) -> Optional[RBNode]:
        """Loop-based lookup of the node holding ``key``."""
        node = self.root
        while node is not None and node.key != key:
            node = node.right if node.key < key else node.left
        return node

    @staticmethod
    def _min_node(node: RBNode) -> RBNode:
        while node.left is not None:
            node = node.left
        return node

    @staticmethod
    def _max_node(node: RBNode) -> RBNode:
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> Any:
        """Smallest key, or None for an empty tree."""
        return None if self.root is None else self._min_node(self.root).key

    def maximum(self) -> Any:
        """Largest key, or None for an empty tree."""
        return None if self.root is None else self._max_node(self.root).key

    def successor(self, node: RBNode) -> Optional[RBNode]:
        """The node that follows ``node`` in key order, or None."""
        if node.right is not None:
            return self._min_node(node.right)
        parent = node.parent
        while parent is not None and node is parent.right:
            node, parent = parent, parent.parent
        return parent

    def predecessor(self, node: RBNode) -> Optional[RBNode]:
        """The node that precedes ``node`` in key order, or None."""
        if node.left is not None:
            return self._max_node(node.left)
        parent = node.parent
        while parent is not None and node is parent.left:
            node, parent = parent, parent.parent
        return parent

    # rotations

    def _left_rotate(self, x: RBNode) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x.parent.left is x:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, y: RBNode) -> None:
        x = y.left
        assert x is not None
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self.root = x
        elif y.parent.left is y:
            y.parent.left = x
        else:
            y.parent.right = x
        x.right = y
        y.parent = x

    # insertion

    def insert(self, key: Any) -> RBNode:
        """Insert ``key`` and return its new node."""
        node = RBNode(key)
        parent: Optional[RBNode] = None
        current = self.root
        while current is not None:
            parent = current
            current = current.left if key < current.key else current.right
        node.parent = parent
        if parent is None:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        self._insert_fixup(node)
        return node

    def _insert_fixup(self, node: RBNode) -> None:
        while _is_red(node.parent):
            parent = node.parent
            grandparent = parent.parent
            assert grandparent is not None
            if parent is grandparent.left:
                uncle = grandparent.right
                if _is_red(uncle):
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grandparent
                    continue
                if node is parent.right:
                    self._left_rotate(parent)
                    parent, node = node, parent
                grandparent.color = Color.RED
                parent.color = Color.BLACK
                self._right_rotate(grandparent)
            else:
                uncle = grandparent.left
                if _is_red(uncle):
                    grandparent.color = Color.RED
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    node = grandparent
                    continue
                if node is parent.left:
                    self._right_rotate(parent)
                    parent, node = node, parent
                parent.color = Color.BLACK
                grandparent.color = Color.RED
                self._left_rotate(grandparent)
        assert self.root is not None
        self.root.color = Color.BLACK
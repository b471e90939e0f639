"""A B-tree of distinct, ordered keys with a configurable minimum degree."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass(eq=False)
class BTreeNode:
    """A node holding sorted keys and, unless it is a leaf, one more child than keys."""

    keys: List[Any] = field(default_factory=list)
    children: List["BTreeNode"] = field(default_factory=list)
    leaf: bool = True


class BTree:
    """B-tree with minimum degree ``t``: every node but the root holds t-1 to 2t-1 keys."""

    def __init__(self, t: int = 2) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self.t = t
        self.root = BTreeNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def search(self, key: Any) -> Optional[BTreeNode]:
        """Return the node holding ``key``, or None."""
        node = self.root
        while True:
            i = bisect_left(node.keys, key)
            if i < len(node.keys) and node.keys[i] == key:
                return node
            if node.leaf:
                return None
            node = node.children[i]

    def keys(self) -> List[Any]:
        """All keys in ascending order."""
        return list(self._walk(self.root))

    def _walk(self, node: BTreeNode) -> Iterator[Any]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    # insertion

    def insert(self, key: Any) -> bool:
        """Insert ``key``; return False if it was already present."""
        if key in self:
            return False
        if len(self.root.keys) == 2 * self.t - 1:
            new_root = BTreeNode(leaf=False, children=[self.root])
            self.root = new_root
            self._split_child(new_root, 0)
        self._insert_nonfull(self.root, key)
        self._size += 1
        return True

    def _split_child(self, parent: BTreeNode, i: int) -> None:
        t = self.t
        full = parent.children[i]
        left = BTreeNode(keys=full.keys[: t - 1], leaf=full.leaf)
        right = BTreeNode(keys=full.keys[t:], leaf=full.leaf)
        if not full.leaf:
            left.children = full.children[:t]
            right.children = full.children[t:]
        parent.keys.insert(i, full.keys[t - 1])
        parent.children[i : i + 1] = [left, right]

    def _insert_nonfull(self, node: BTreeNode, key: Any) -> None:
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if len(node.children[i].keys) == 2 * self.t - 1:
                self._split_child(node, i)
                if key > node.keys[i]:
                    i += 1
            node = node.children[i]
        insort(node.keys, key)

    # deletion

    def delete(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is not present."""
        if key not in self:
            raise KeyError(key)
        root = self.root
        if len(root.keys) == 1 and root.leaf:
            self.root = BTreeNode()
        elif len(root.keys) == 1:
            left, right = root.children
            if len(left.keys) == len(right.keys) == self.t - 1:
                self.root = self._merge(root, 0)
            self._delete(self.root, key)
        else:
            self._delete(root, key)
        self._size -= 1

    def _merge(self, node: BTreeNode, i: int) -> BTreeNode:
        """Fold key i of ``node`` and child i+1 into child i, which is returned."""
        left = node.children[i]
        right = node.children.pop(i + 1)
        left.keys = left.keys + [node.keys.pop(i)] + right.keys
        if not left.leaf:
            left.children = left.children + right.children
        return left

    @staticmethod
    def _shift_to_left_child(node: BTreeNode, i: int) -> None:
        left, right = node.children[i], node.children[i + 1]
        left.keys.append(node.keys[i])
        node.keys[i] = right.keys.pop(0)
        if not right.leaf:
            left.children.append(right.children.pop(0))

    @staticmethod
    def _shift_to_right_child(node: BTreeNode, i: int) -> None:
        left, right = node.children[i], node.children[i + 1]
        right.keys.insert(0, node.keys[i])
        node.keys[i] = left.keys.pop()
        if not right.leaf:
            right.children.insert(0, left.children.pop())

    @staticmethod
    def _max_key(node: BTreeNode) -> Any:
        while not node.leaf:
            node = node.children[-1]
        return node.keys[-1]

    @staticmethod
    def _min_key(node: BTreeNode) -> Any:
        while not node.leaf:
            node = node.children[0]
        return node.keys[0]

    def _delete(self, node: BTreeNode, key: Any) -> None:
        minimum = self.t - 1
        while True:
            i = bisect_left(node.keys, key)
            found = i < len(node.keys) and node.keys[i] == key
            if node.leaf:
                if not found:
                    raise KeyError(key)
                del node.keys[i]
                return
            child = node.children[i]
            if found:
                right = node.children[i + 1]
                if len(child.keys) > minimum:
                    replacement = self._max_key(child)
                    self._delete(child, replacement)
                    node.keys[i] = replacement
                    return
                if len(right.keys) > minimum:
                    replacement = self._min_key(right)
                    self._delete(right, replacement)
                    node.keys[i] = replacement
                    return
                node = self._merge(node, i)
                continue
            if len(child.keys) == minimum:
                if i > 0 and len(node.children[i - 1].keys) > minimum:
                    self._shift_to_right_child(node, i - 1)
                elif i < len(node.keys) and len(node.children[i + 1].keys) > minimum:
                    self._shift_to_left_child(node, i)
                elif i > 0:
                    child = self._merge(node, i - 1)
                else:
                    child = self._merge(node, i)
            node = child

    # display

    def format(self) -> str:
        """Level-by-level rendering; internal nodes are fenced and their keys separated by '|'."""
        parts: List[str] = []
        queue = deque([self.root])
        last = self.root
        while queue:
            node = queue.popleft()
            sep = "" if node.leaf else "|"
            parts.append(f"{sep}({sep.join(str(k) for k in node.keys)}){sep}")
            if not node.leaf:
                queue.extend(node.children)
            if not last.leaf and node is last:
                parts.append("\n")
                last = last.children[-1]
        parts.append("\n")
        return "".join(parts)
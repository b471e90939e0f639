"""Binary tree algorithms, including threaded binary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence


@dataclass
class TreeNode:
    val: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


@dataclass(eq=False)
class LinkedTreeNode:
    """A tree node that also knows its parent."""

    val: Any
    left: Optional["LinkedTreeNode"] = None
    right: Optional["LinkedTreeNode"] = None
    parent: Optional["LinkedTreeNode"] = field(default=None, repr=False)


def level_order(root: Optional[TreeNode]) -> List[Any]:
    """Values breadth-first, left to right."""
    result: List[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        result.append(node.val)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return result


def _is_bst_postorder(nodes: Sequence[Any]) -> bool:
    if len(nodes) <= 1:
        return True
    *body, root = nodes
    split = next((i for i, value in enumerate(body) if not value < root), len(body))
    left, right = body[:split], body[split:]
    if any(value < root for value in right):
        return False
    return _is_bst_postorder(left) and _is_bst_postorder(right)


def verify_postorder_bst(sequence: Sequence[Any]) -> bool:
    """Whether distinct values could be the postorder walk of a binary search tree."""
    if not sequence:
        return False
    return _is_bst_postorder(list(sequence))


def find_paths(root: Optional[TreeNode], target: Any) -> List[List[Any]]:
    """Root-to-leaf paths whose values add up to ``target``, left subtrees first."""
    result: List[List[Any]] = []
    path: List[Any] = []

    def walk(node: Optional[TreeNode], remaining: Any) -> None:
        if node is None:
            return
        path.append(node.val)
        remaining -= node.val
        if remaining == 0 and node.left is None and node.right is None:
            result.append(list(path))
        walk(node.left, remaining)
        walk(node.right, remaining)
        path.pop()

    walk(root, target)
    return result


def convert_to_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink a search tree in place into a sorted doubly linked list; return its head.

    ``left`` becomes the previous link and ``right`` the next.
    """
    if root is None:
        return None
    prev: Optional[TreeNode] = None

    def relink(node: Optional[TreeNode]) -> None:
        nonlocal prev
        if node is None:
            return
        relink(node.left)
        node.left = prev
        if prev is not None:
            prev.right = node
        prev = node
        relink(node.right)

    relink(root)
    head = root
    while head.left is not None:
        head = head.left
    return head


def inorder_next(node: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """The node visited after ``node`` in an inorder walk, or None."""
    if node is None:
        return None
    if node.right is not None:
        node = node.right
        while node.left is not None:
            node = node.left
        return node
    while node.parent is not None:
        parent = node.parent
        if parent.left is node:
            return parent
        node = parent
    return None


def _mirrored(left: Optional[TreeNode], right: Optional[TreeNode]) -> bool:
    if left is None or right is None:
        return left is right
    return (
        left.val == right.val
        and _mirrored(left.left, right.right)
        and _mirrored(left.right, right.left)
    )


def is_symmetrical(root: Optional[TreeNode]) -> bool:
    """Whether the tree equals its own mirror image."""
    return root is None or _mirrored(root.left, root.right)


def zigzag_levels(root: Optional[TreeNode]) -> List[List[Any]]:
    """Levels alternately left-to-right and right-to-left, starting left-to-right."""
    result: List[List[Any]] = []
    if root is None:
        return result
    current = [root]
    left_to_right = True
    while current:
        following: List[TreeNode] = []
        level: List[Any] = []
        while current:
            node = current.pop()
            level.append(node.val)
            children = (node.left, node.right) if left_to_right else (node.right, node.left)
            following.extend(child for child in children if child is not None)
        result.append(level)
        current = following
        left_to_right = not left_to_right
    return result


def inorder(root: Optional[TreeNode]) -> List[Any]:
    """Inorder values, walked with an explicit stack."""
    result: List[Any] = []
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def preorder(root: Optional[TreeNode]) -> List[Any]:
    """Preorder values, walked with an explicit stack."""
    result: List[Any] = []
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            result.append(node.val)
            stack.append(node)
            node = node.left
        node = stack.pop().right
    return result


def postorder(root: Optional[TreeNode]) -> List[Any]:
    """Postorder values, walked with an explicit stack and a last-visited marker."""
    result: List[Any] = []
    stack: List[TreeNode] = []
    node = root
    last: Optional[TreeNode] = None
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        top = stack[-1]
        if top.right is None or top.right is last:
            result.append(top.val)
            last = stack.pop()
        else:
            node = top.right
    return result


def depth(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return max(depth(root.left), depth(root.right)) + 1


def node_count(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    return node_count(root.left) + node_count(root.right) + 1


def leaf_count(root: Optional[TreeNode]) -> int:
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return leaf_count(root.left) + leaf_count(root.right)


def copy_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """A deep copy of the tree's structure and values."""
    if root is None:
        return None
    return TreeNode(root.val, copy_tree(root.left), copy_tree(root.right))


class PointerTag(Enum):
    LINK = "link"
    THREAD = "thread"


@dataclass(eq=False)
class ThreadedNode:
    """A node whose empty child links may be replaced by threads."""

    data: Any
    lchild: Optional["ThreadedNode"] = field(default=None, repr=False)
    rchild: Optional["ThreadedNode"] = field(default=None, repr=False)
    ltag: PointerTag = PointerTag.LINK
    rtag: PointerTag = PointerTag.LINK


EMPTY_MARK = "#"


def build_threaded_tree(tokens: Iterable[Any]) -> Optional[ThreadedNode]:
    """Build a tree from a preorder token stream in which '#' marks an empty subtree."""
    stream = iter(tokens)

    def build() -> Optional[ThreadedNode]:
        try:
            token = next(stream)
        except StopIteration:
            raise ValueError("token stream ended before the tree was complete") from None
        if token == EMPTY_MARK:
            return None
        node = ThreadedNode(token)
        node.lchild = build()
        node.rchild = build()
        return node

    return build()


def preorder_threading(root: Optional[ThreadedNode]) -> ThreadedNode:
    """Thread the tree in preorder and return a head node linking to both ends."""
    head = ThreadedNode(None, ltag=PointerTag.LINK, rtag=PointerTag.THREAD)
    head.rchild = head
    if root is None:
        head.lchild = head
        return head
    head.lchild = root
    pre = head

    def thread(node: Optional[ThreadedNode]) -> None:
        nonlocal pre
        if node is None:
            return
        if node.lchild is None:
            node.ltag = PointerTag.THREAD
            node.lchild = pre
        if pre.rchild is None:
            pre.rtag = PointerTag.THREAD
            pre.rchild = node
        pre = node
        if node.ltag is PointerTag.LINK:
            thread(node.lchild)
        if node.rtag is PointerTag.LINK:
            thread(node.rchild)

    thread(root)
    pre.rchild = head
    pre.rtag = PointerTag.THREAD
    head.rchild = pre
    return head


def threaded_preorder(head: ThreadedNode) -> List[Any]:
    """Walk a preorder-threaded tree from its head node without a stack."""
    result: List[Any] = []
    node = head.lchild
    while node is not head and node is not None:
        result.append(node.data)
        node = node.lchild if node.ltag is PointerTag.LINK else node.rchild
    return result
"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.val
    yield from _inorder(node.right)


def _preorder(node: TreeNode | None) -> Iterator[int]:
    if node is None:
        return
    yield node.val
    yield from _preorder(node.left)
    yield from _preorder(node.right)


def inorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in left, node, right order."""
    return list(_inorder(root))


def preorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in node, left, right order."""
    return list(_preorder(root))


def postorder_traversal(root: TreeNode | None) -> list[int]:
    """Return the values of the tree in left, right, node order.

    Iterative: every node is pushed twice, and seeing the same node on top
    of the stack after a pop means its right subtree is still to be visited.
    """
    result: list[int] = []
    stack: list[TreeNode] = []
    current = root
    while True:
        while current is not None:
            stack.append(current)
            stack.append(current)
            current = current.left
        if not stack:
            break
        current = stack.pop()
        if stack and stack[-1] is current:
            current = current.right
        else:
            result.append(current.val)
            current = None
    return result


def right_side_view(root: TreeNode | None) -> list[int]:
    """Return the rightmost value on each level, from the top down."""
    if root is None:
        return []
    view: list[int] = []
    queue: deque[TreeNode] = deque([root])
    while queue:
        view.append(queue[-1].val)
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return view
"""Singly and multilevel doubly linked list operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None


@dataclass(eq=False)
class MultilevelNode:
    """A node of a doubly linked list that may own a child list."""

    val: int = 0
    prev: MultilevelNode | None = None
    next: MultilevelNode | None = None
    child: MultilevelNode | None = None


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only that node.

    The node takes over the value and link of its successor, so it must
    not be the last node of the list.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node of a list in place")
    node.val = successor.val
    node.next = successor.next


def middle_node(head: ListNode) -> ListNode:
    """Return the middle node; of two middles, the second."""
    if head is None:
        raise ValueError("list is empty")
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    if fast is not None:
        slow = slow.next
    return slow


def _values(head: ListNode | None):
    while head is not None:
        yield head.val
        head = head.next


def is_palindrome_list(head: ListNode | None) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = list(_values(head))
    return values == values[::-1]


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list ``k`` places to the right and return the new head."""
    if head is None:
        return None
    length = 1
    tail = head
    while tail.next is not None:
        length += 1
        tail = tail.next

    tail.next = head
    k %= length
    if k:
        for _ in range(length - k):
            tail = tail.next

    new_head = tail.next
    tail.next = None
    return new_head


def flatten(head: MultilevelNode | None) -> MultilevelNode | None:
    """Flatten a multilevel list depth first, in place, and return its head.

    Each child list is spliced in right after its parent node and all child
    links are cleared.
    """
    if head is None:
        return None
    stack = [head]
    previous: MultilevelNode | None = None
    while stack:
        node = stack.pop()
        if previous is not None:
            previous.next = node
        node.prev = previous
        previous = node

        if node.next is not None:
            stack.append(node.next)
        if node.child is not None:
            stack.append(node.child)
            node.child = None
    return head
import pytest

from algokata.linked_lists import (
    ListNode,
    MultilevelNode,
    delete_node,
    flatten,
    is_palindrome_list,
    middle_node,
    rotate_right,
)


def build(values):
    head = None
    for value in reversed(values):
        head = ListNode(value, head)
    return head


def to_list(head):
    out = []
    while head is not None:
        out.append(head.val)
        head = head.next
    return out


def nodes_of(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def test_delete_node_removes_value():
    values = [4, 5, 1, 9]
    head = build(values)
    delete_node(head.next)
    assert to_list(head) == [v for v in values if v != 5]


def test_delete_last_node_raises():
    head = build([1, 2])
    with pytest.raises(ValueError):
        delete_node(head.next)


@pytest.mark.parametrize("length", range(1, 9))
def test_middle_node_is_second_middle(length):
    values = list(range(10, 10 + length))
    assert middle_node(build(values)).val == values[length // 2]


def test_middle_node_of_empty_list_raises():
    with pytest.raises(ValueError):
        middle_node(None)


@pytest.mark.parametrize("half", [[], [1], [1, 2], [3, 1, 4, 1, 5]])
def test_mirrored_lists_are_palindromes(half):
    assert is_palindrome_list(build(half + half[::-1])) is True
    assert is_palindrome_list(build(half + [7] + half[::-1])) is True


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 2, 3]])
def test_non_palindromes(values):
    assert is_palindrome_list(build(values)) is False


def test_rotate_empty():
    assert rotate_right(None, 3) is None


@pytest.mark.parametrize("k", range(0, 12))
def test_rotate_matches_slicing(k):
    values = [1, 2, 3, 4, 5]
    shift = k % len(values)
    expected = values[len(values) - shift:] + values[:len(values) - shift]
    assert to_list(rotate_right(build(values), k)) == expected


def test_rotate_back_restores_list():
    values = [9, 8, 7, 6, 5, 4]
    head = rotate_right(build(values), 4)
    head = rotate_right(head, len(values) - 4)
    assert to_list(head) == values


def test_rotate_by_length_keeps_head():
    head = build([1, 2, 3])
    assert rotate_right(head, 3) is head
    assert to_list(head) == [1, 2, 3]


def chain(values):
    nodes = [MultilevelNode(v) for v in values]
    for left, right in zip(nodes, nodes[1:]):
        left.next = right
        right.prev = left
    return nodes


def test_flatten_worked_example():
    top = chain([1, 2, 3, 4, 5, 6])
    middle = chain([7, 8, 9, 10])
    bottom = chain([11, 12])
    top[2].child = middle[0]
    middle[1].child = bottom[0]

    head = flatten(top[0])
    nodes = nodes_of(head)
    assert [n.val for n in nodes] == [1, 2, 3, 7, 8, 11, 12, 9, 10, 4, 5, 6]
    assert all(n.child is None for n in nodes)
    assert head.prev is None
    for left, right in zip(nodes, nodes[1:]):
        assert right.prev is left


def test_flatten_without_children_is_unchanged():
    nodes = chain([1, 2, 3])
    head = flatten(nodes[0])
    assert nodes_of(head) == nodes


def test_flatten_empty():
    assert flatten(None) is None
import random

import pytest

from algokata.min_stack import MinStack


def test_min_tracks_pushes_and_pops():
    stack = MinStack()
    values = [5, 3, 7, 3, 1, 8, 2]
    for i, value in enumerate(values):
        stack.push(value)
        assert stack.top() == value
        assert stack.get_min() == min(values[: i + 1])
    for i in range(len(values) - 1, 0, -1):
        stack.pop()
        assert stack.top() == values[i - 1]
        assert stack.get_min() == min(values[:i])


@pytest.mark.parametrize("seed", range(5))
def test_random_operations_match_list_minimum(seed):
    rng = random.Random(seed)
    stack = MinStack()
    first = rng.randint(-1000, 1000)
    stack.push(first)
    shadow = [first]
    for _ in range(200):
        pop_now = len(shadow) > 1 and rng.random() < 0.4
        value = rng.randint(-1000, 1000)
        stack.pop() if pop_now else stack.push(value)
        shadow.pop() if pop_now else shadow.append(value)
        assert stack.get_min() == min(shadow)
        assert stack.top() == shadow[-1]


def test_large_values_are_kept():
    stack = MinStack()
    stack.push(2**40)
    assert stack.get_min() == 2**40


def test_pop_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()


def test_top_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.top()


def test_get_min_on_empty_stack_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.get_min()


def test_emptied_stack_raises():
    stack = MinStack()
    stack.push(1)
    stack.pop()
    with pytest.raises(IndexError):
        stack.get_min()
import pytest

from algokata.backtracking import (
    can_partition_k_subsets,
    partition_palindromes,
    solve_n_queens,
    subsets_with_dup,
)


def _valid_board(board):
    n = len(board)
    if any(len(row) != n or row.count("Q") != 1 for row in board):
        return False
    cols = [row.index("Q") for row in board]
    return (
        len(set(cols)) == n
        and len({r + c for r, c in enumerate(cols)}) == n
        and len({r - c for r, c in enumerate(cols)}) == n
    )


def test_four_queens():
    assert solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


def test_eight_queens_count():
    assert len(solve_n_queens(8)) == 92


def test_one_queen():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_no_solutions_for_small_boards(n):
    assert solve_n_queens(n) == []


@pytest.mark.parametrize("n", [5, 6])
def test_queen_boards_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_valid_board(board) for board in boards)
    assert len({tuple(board) for board in boards}) == len(boards)


def test_queens_rejects_zero():
    with pytest.raises(ValueError):
        solve_n_queens(0)


def test_partition_palindromes_example():
    assert partition_palindromes("aab") == [["a", "a", "b"], ["aa", "b"]]


@pytest.mark.parametrize("s", ["racecar", "abba", "abc"])
def test_partition_pieces_rejoin_and_are_palindromes(s):
    partitions = partition_palindromes(s)
    assert [list(s)] == partitions[:1]
    for pieces in partitions:
        assert "".join(pieces) == s
        assert all(piece == piece[::-1] for piece in pieces)


def test_partition_empty_string():
    assert partition_palindromes("") == []


@pytest.mark.parametrize("nums", [[3, 1, 2], [5, 9, 4, 7]])
def test_subsets_of_distinct_values(nums):
    subsets = subsets_with_dup(nums)
    assert len(subsets) == 2 ** len(nums)
    assert subsets[0] == []
    assert sorted(nums) in subsets


def test_subsets_with_duplicates_are_unique_and_sorted():
    nums = [2, 1, 2, 2, 3]
    subsets = subsets_with_dup(nums)
    assert len({tuple(s) for s in subsets}) == len(subsets)
    assert all(s == sorted(s) for s in subsets)


def test_subsets_of_repeated_value():
    nums = [4, 4, 4]
    assert len(subsets_with_dup(nums)) == len(nums) + 1


def test_k_subsets_examples():
    assert can_partition_k_subsets([4, 3, 2, 3, 5, 2, 1], 4)
    assert not can_partition_k_subsets([1, 2, 3, 4], 3)


def test_k_subsets_trivial_and_impossible():
    assert can_partition_k_subsets([3, 8], 1)
    assert not can_partition_k_subsets([1, 1], 3)
    assert not can_partition_k_subsets([1, 2, 4], 2)
    assert can_partition_k_subsets([1, 1, 1, 1], 2)


def test_k_subsets_rejects_zero():
    with pytest.raises(ValueError):
        can_partition_k_subsets([1, 2], 0)
"""Exhaustive search by backtracking: queens, partitions and subsets."""

from __future__ import annotations

from collections.abc import Sequence


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of 'Q' and '.'."""
    if n < 1:
        raise ValueError("n must be at least 1")
    boards: list[list[str]] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    rows: list[str] = []

    def place(row: int) -> None:
        if row == n:
            boards.append(list(rows))
            return
        for col in range(n):
            if col in columns or row + col in diagonals or row - col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row + col)
            anti_diagonals.add(row - col)
            rows.append("." * col + "Q" + "." * (n - col - 1))
            place(row + 1)
            rows.pop()
            columns.remove(col)
            diagonals.remove(row + col)
            anti_diagonals.remove(row - col)

    place(0)
    return boards


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition_palindromes(s: str) -> list[list[str]]:
    """Every way to split ``s`` into palindromic pieces."""
    if not s:
        return []
    result: list[list[str]] = []
    path: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if _is_palindrome(piece):
                path.append(piece)
                split(end)
                path.pop()

    split(0)
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct subset of ``nums``, each in ascending order."""
    values = sorted(nums)
    result: list[list[int]] = []
    chosen: list[int] = []

    def extend(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(values)):
            if i != start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            extend(i + 1)
            chosen.pop()

    extend(0)
    return result


def can_partition_k_subsets(nums: Sequence[int], k: int) -> bool:
    """Tell whether ``nums`` splits into ``k`` groups of equal sum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    total = sum(nums)
    if k == 1:
        return True
    if k > len(nums) or total % k != 0:
        return False

    target = total // k
    count = len(nums)
    sums = [0] * k
    taken = [False] * count
    sums[0] = nums[-1]
    taken[-1] = True

    def fill(bucket: int, limit: int) -> bool:
        if sums[bucket] == target:
            if bucket == k - 2:
                return True
            return fill(bucket + 1, count - 1)
        for i in range(limit, -1, -1):
            if taken[i] or nums[i] + sums[bucket] > target:
                continue
            taken[i] = True
            sums[bucket] += nums[i]
            found = fill(bucket, i - 1)
            taken[i] = False
            sums[bucket] -= nums[i]
            if found:
                return True
        return False

    return fill(0, count - 1)
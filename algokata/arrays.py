"""Array and matrix puzzles: sums, permutations, in-place rearrangements."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import MutableSequence, Sequence
from itertools import groupby


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of ``nums`` that sums to ``target``.

    Each quadruplet is in ascending order, and the list is ordered by the
    positions of its members in the sorted input.
    """
    values = sorted(nums)
    count = len(values)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        for j in range(i + 1, count):
            second = values[j]
            if j != i + 1 and second == values[j - 1]:
                continue
            left, right = j + 1, count - 1
            while left < right:
                if left != j + 1 and values[left] == values[left - 1]:
                    left += 1
                    continue
                total = first + second + values[left] + values[right]
                if total == target:
                    result.append([first, second, values[left], values[right]])
                    left += 1
                    right -= 1
                elif total < target:
                    left += 1
                else:
                    right -= 1
    return result


def arrange_coins(n: int) -> int:
    """Return how many complete staircase rows ``n`` coins can build."""
    if n < 0:
        raise ValueError("number of coins must not be negative")
    return (math.isqrt(1 + 8 * n) - 1) // 2


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether ``n`` flowers fit into the bed with no two adjacent."""
    runs = [(plot, len(list(group))) for plot, group in groupby(flowerbed)]
    if all(plot == 0 for plot in flowerbed):
        spots = (len(flowerbed) + 1) // 2
    else:
        leading = runs[0][1] if runs[0][0] == 0 else 0
        trailing = runs[-1][1] if runs[-1][0] == 0 else 0
        interior = sum((length - 1) // 2 for plot, length in runs[1:-1] if plot == 0)
        spots = interior + leading // 2 + trailing // 2
    return spots >= n


def candy(ratings: Sequence[int]) -> int:
    """Fewest candies so each child gets one and beats lower-rated neighbours."""
    candies = [1] * len(ratings)
    for i in range(1, len(ratings)):
        if ratings[i] > ratings[i - 1]:
            candies[i] = candies[i - 1] + 1
    for i in range(len(ratings) - 1, 0, -1):
        if ratings[i - 1] > ratings[i]:
            candies[i - 1] = max(candies[i - 1], candies[i] + 1)
    return sum(candies)


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index is reachable, each value being a maximum jump."""
    furthest = 0
    boundary = 0
    for i, step in enumerate(nums[:-1]):
        furthest = max(furthest, step + i)
        if i == boundary:
            if furthest <= i and step == 0:
                return False
            boundary = furthest
    return True


def majority_element(nums: Sequence[int]) -> int | None:
    """Return the voting candidate if it holds at least half the elements, else None."""
    if not nums:
        raise ValueError("sequence is empty")
    candidate, count = nums[0], 1
    for num in nums:
        count += 1 if num == candidate else -1
        if count == 0:
            candidate, count = num, 1
    occurrences = sum(1 for num in nums if num == candidate)
    return candidate if occurrences >= len(nums) // 2 else None


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return the elements that appear more than ``len(nums) // 3`` times."""
    if len(nums) == 1:
        return [nums[0]]
    if not nums:
        return []
    first, second = nums[0], nums[1]
    first_count = second_count = 0
    for num in nums:
        if num == first:
            first_count += 1
        elif num == second:
            second_count += 1
        elif first_count <= 0:
            first, first_count = num, 1
        elif second_count <= 0:
            second, second_count = num, 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = sum(1 for num in nums if num == first)
    second_count = sum(1 for num in nums if num == second and num != first)
    threshold = len(nums) // 3
    result = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of ones."""
    return max((len(list(run)) for value, run in groupby(nums) if value == 1), default=0)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into its next lexicographic permutation.

    The last permutation wraps round to the first, the sorted order.
    """
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums[:] = sorted(nums)
        return
    successor = next(i for i in range(len(nums) - 1, -1, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = sorted(nums[pivot + 1 :])


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values to the front of ``nums``; return how many remain.

    Elements past the returned length are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column)[::-1] for column in zip(*matrix)]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` is in a matrix whose rows are sorted."""
    for row in matrix:
        position = bisect_left(row, target)
        if position < len(row) and row[position] == target:
            return True
    return False


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {r for r, row in enumerate(matrix) if 0 in row}
    zero_cols = {c for row in matrix for c, value in enumerate(row) if value == 0}
    for r, row in enumerate(matrix):
        if r in zero_rows:
            row[:] = [0] * len(row)
        else:
            for c in zero_cols:
                row[c] = 0


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1


def kth_factor(n: int, k: int) -> int | None:
    """Return the ``k``-th smallest divisor of ``n``, or None if it has fewer."""
    if k < 1:
        raise ValueError("k must be at least 1")
    limit = math.isqrt(n) if n > 0 else 0
    factors: set[int] = set()
    for i in range(1, limit + 1):
        if n % i == 0:
            factors.update((i, n // i))
    ordered = sorted(factors)
    return ordered[k - 1] if len(ordered) >= k else None


def get_permutation(n: int, k: int) -> str:
    """Return the ``k``-th permutation (1-based, wrapping) of the digits 1 to ``n``."""
    symbols = [chr(ord("0") + i) for i in range(1, n + 1)]
    index = max(k - 1, 0) % math.factorial(n)
    result = []
    for remaining in range(n, 0, -1):
        choice, index = divmod(index, math.factorial(remaining - 1))
        result.append(symbols.pop(choice))
    return "".join(result)


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if rows:
            above = rows[-1]
            rows.append([1] + [a + b for a, b in zip(above, above[1:])] + [1])
        else:
            rows.append([1])
    return rows
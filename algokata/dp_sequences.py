"""Dynamic programming over sequences: robbing, subsequences and chains."""

from __future__ import annotations

from collections.abc import Sequence


def rob(nums: Sequence[int]) -> int:
    """Largest sum of elements of which no two are adjacent."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, current = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, current = current, max(current, before + value)
    return current


def max_sum_div_three(nums: Sequence[int]) -> int:
    """Largest sum of a subset of non-negative ``nums`` divisible by three."""
    best = [0, 0, 0]
    for num in nums:
        for subtotal in list(best):
            total = num + subtotal
            best[total % 3] = max(best[total % 3], total)
    return best[0]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(nums):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if value > nums[j]), default=0)
        )
    return max(lengths, default=0)


def count_lis(nums: Sequence[int]) -> int:
    """Number of longest strictly increasing subsequences."""
    lengths = [0] * len(nums)
    counts = [1] * len(nums)
    for i, value in enumerate(nums):
        for j in range(i):
            if value > nums[j]:
                if lengths[j] + 1 > lengths[i]:
                    lengths[i] = lengths[j] + 1
                    counts[i] = counts[j]
                elif lengths[j] + 1 == lengths[i]:
                    counts[i] += counts[j]
    longest = max(lengths, default=0)
    return sum(count for length, count in zip(lengths, counts) if length == longest)


def longest_arith_seq_length(nums: Sequence[int]) -> int:
    """Length of the longest arithmetic subsequence."""
    if len(nums) <= 2:
        return len(nums)
    by_step: list[dict[int, int]] = [{} for _ in nums]
    longest = 2
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            step = nums[j] - first
            by_step[j][step] = by_step[i].get(step, 1) + 1
            longest = max(longest, by_step[j][step])
    return longest


def largest_divisible_subset(nums: Sequence[int]) -> list[int]:
    """A largest subset of positive ``nums`` where each pair divides evenly.

    The subset is returned largest element first.
    """
    values = sorted(nums)
    if not values:
        raise ValueError("sequence is empty")
    if len(values) == 1:
        return [values[0]]
    sizes = [1]
    for i in range(1, len(values)):
        sizes.append(
            1 + max((sizes[j] for j in range(i) if values[i] % values[j] == 0), default=0)
        )
    wanted = max(sizes)
    result: list[int] = []
    previous: int | None = None
    for value, size in zip(reversed(values), reversed(sizes)):
        if size == wanted and (previous is None or previous % value == 0):
            result.append(value)
            wanted -= 1
            previous = value
    return result


def find_longest_chain(pairs: Sequence[Sequence[int]]) -> int:
    """Longest chain of pairs where each one starts after the previous one ends."""
    ordered = sorted(pairs)
    lengths: list[int] = []
    for i, (start, _) in enumerate(ordered):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if ordered[j][1] < start), default=0)
        )
    return max(lengths, default=0)


def max_envelopes(envelopes: Sequence[Sequence[int]]) -> int:
    """Most envelopes that nest, each strictly smaller in both dimensions."""
    ordered = sorted(envelopes)
    lengths: list[int] = []
    for i, (width, height) in enumerate(ordered):
        lengths.append(
            1
            + max(
                (
                    lengths[j]
                    for j in range(i)
                    if ordered[j][1] < height and ordered[j][0] < width
                ),
                default=0,
            )
        )
    return max(lengths, default=0)
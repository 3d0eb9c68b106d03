"""Knapsack-style dynamic programming: coins, subset sums and budgets."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins that make up ``amount``, or None if it cannot be made."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    fewest = [0] + [math.inf] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            fewest[value] = min(fewest[value], fewest[value - coin] + 1)
    best = fewest[amount]
    return None if best == math.inf else int(best)


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Number of unordered coin combinations that make up ``amount``."""
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        for value in range(coin, amount + 1):
            ways[value] += ways[value - coin]
    return ways[amount]


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Number of ordered sequences drawn from ``nums`` that sum to ``target``."""
    if any(num <= 0 for num in nums):
        raise ValueError("numbers must be positive")
    if target < 0:
        raise ValueError("target must not be negative")
    ways = [1] + [0] * target
    for value in range(1, target + 1):
        ways[value] = sum(ways[value - num] for num in nums if num <= value)
    return ways[target]


def last_stone_weight_ii(stones: Sequence[int]) -> int:
    """Smallest weight left after smashing stones together pairwise."""
    total = sum(stones)
    reachable = 1
    for stone in stones:
        reachable |= reachable << stone
    for half in range(total // 2, -1, -1):
        if reachable >> half & 1:
            return total - 2 * half
    return 0


def can_partition(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` splits into two parts of equal sum."""
    total = sum(nums)
    if total % 2 == 1:
        return False
    target = total // 2
    reachable = {0}
    for num in nums:
        reachable |= {subtotal + num for subtotal in reachable}
    return target in reachable


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Number of ways to sign each number so that they sum to ``target``.

    An empty sequence gives 0.
    """
    if not nums:
        return 0
    totals: Counter[int] = Counter({0: 1})
    for num in nums:
        following: Counter[int] = Counter()
        for subtotal, count in totals.items():
            following[subtotal + num] += count
            following[subtotal - num] += count
        totals = following
    return totals[target]


def find_max_form(strs: Sequence[str], m: int, n: int) -> int:
    """Largest number of strings using at most ``m`` zeros and ``n`` ones."""
    if m < 0 or n < 0:
        return 0
    best = [[0] * (n + 1) for _ in range(m + 1)]
    for word in reversed(strs):
        zeros, ones = word.count("0"), word.count("1")
        following = best
        best = [[0] * (n + 1) for _ in range(m + 1)]
        for a in range(m + 1):
            for b in range(n + 1):
                if a == 0 and b == 0:
                    continue
                skip = following[a][b]
                if a >= zeros and b >= ones:
                    best[a][b] = max(skip, 1 + following[a - zeros][b - ones])
                else:
                    best[a][b] = skip
    return best[m][n]


def num_squares(n: int) -> int:
    """Fewest perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    fewest = [0] * (n + 1)
    for value in range(1, n + 1):
        fewest[value] = 1 + min(
            fewest[value - root * root] for root in range(1, math.isqrt(value) + 1)
        )
    return fewest[n]
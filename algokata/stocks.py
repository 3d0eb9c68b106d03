"""Maximum trading profit under different transaction rules."""

from __future__ import annotations

import math
from collections.abc import Sequence


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from at most one buy followed by one sell."""
    profit = 0
    lowest = math.inf
    for price in prices:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit with any number of non-overlapping transactions."""
    free, holding = 0, -math.inf
    for price in prices:
        free, holding = max(free, holding + price), max(holding, free - price)
    return free


def max_profit_two(prices: Sequence[int]) -> int:
    """Best profit with at most two non-overlapping transactions."""
    sold_two, held_two = 0, -math.inf
    sold_one, held_one = 0, -math.inf
    for price in prices:
        sold_two = max(sold_two, held_two + price)
        held_two = max(held_two, sold_one - price)
        sold_one = max(sold_one, held_one + price)
        held_one = max(held_one, -price)
    return sold_two


def max_profit_k(k: int, prices: Sequence[int]) -> int:
    """Best profit with at most ``k`` non-overlapping transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    if k >= len(prices) // 2:
        return max_profit_unlimited(prices)

    sold = [0] * (k + 1)
    held = [-math.inf] * (k + 1)
    for price in prices:
        for j in range(k, 0, -1):
            sold[j] = max(sold[j], held[j] + price)
            held[j] = max(held[j], sold[j - 1] - price)
    return sold[k]


def max_profit_cooldown(prices: Sequence[int]) -> int:
    """Best profit with unlimited transactions and a one-day cooldown after a sale."""
    free, holding = 0, -math.inf
    free_before = 0
    for price in prices:
        previous_free = free
        free = max(free, holding + price)
        holding = max(holding, free_before - price)
        free_before = previous_free
    return free
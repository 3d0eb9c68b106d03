"""Optimal play, scheduling and cheapest-route problems."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence


def predict_the_winner(nums: Sequence[int]) -> bool:
    """Tell whether the first player, taking from either end, scores at least as much."""
    if not nums:
        raise ValueError("sequence is empty")
    lead = list(nums)
    for gap in range(1, len(nums)):
        lead = [
            max(nums[j + gap] - lead[j], nums[j] - lead[j + 1])
            for j in range(len(nums) - gap)
        ]
    return lead[0] >= 0


def stone_game(piles: Sequence[int]) -> bool:
    """Tell whether the first player ends with a non-zero haul.

    Each player takes a pile from either end; the opponent is assumed to
    leave the first player the smaller of the remaining options.
    """
    size = len(piles)
    if size == 0:
        raise ValueError("there are no piles")
    best = [[0] * size for _ in range(size)]
    for gap in range(size):
        for i in range(size - gap):
            j = i + gap
            if gap == 0:
                best[i][j] = piles[i]
            elif gap == 1:
                best[i][j] = max(piles[i], piles[j])
            else:
                take_first = piles[i] + min(best[i + 1][j - 1], best[i + 2][j])
                take_last = piles[j] + min(best[i + 1][j - 1], best[i][j - 2])
                best[i][j] = max(take_first, take_last)
    return best[0][size - 1] != 0


def min_difficulty(job_difficulty: Sequence[int], d: int) -> int | None:
    """Least total difficulty to do the jobs in order over ``d`` days.

    Each day does at least one job and costs its hardest job. Returns None
    when there are fewer jobs than days.
    """
    if d < 1:
        raise ValueError("d must be at least 1")
    count = len(job_difficulty)
    if count < d:
        return None
    # best[cut]: cost of finishing jobs[cut:] with the current number of days
    best = [math.inf] * (count + 1)
    hardest = -math.inf
    for cut in range(count - 1, -1, -1):
        hardest = max(hardest, job_difficulty[cut])
        best[cut] = hardest
    for days in range(2, d + 1):
        following = best
        best = [math.inf] * (count + 1)
        for cut in range(count - days + 1):
            hardest = 0
            for j in range(cut, count - days + 1):
                hardest = max(hardest, job_difficulty[j])
                best[cut] = min(best[cut], hardest + following[j + 1])
    return int(best[0])


def find_cheapest_price(
    n: int,
    flights: Sequence[Sequence[int]],
    src: int,
    dst: int,
    k: int,
) -> int | None:
    """Cheapest fare from ``src`` to ``dst`` with at most ``k`` stops, or None."""
    if k < 0:
        raise ValueError("k must not be negative")
    cost = [math.inf] * n
    cost[src] = 0
    for _ in range(k + 1):
        updated = list(cost)
        for origin, destination, price in flights:
            if cost[origin] + price < updated[destination]:
                updated[destination] = cost[origin] + price
        cost = updated
    return None if cost[dst] == math.inf else int(cost[dst])


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Least cost to travel on the given sorted days with 1, 7 and 30 day passes."""
    if len(costs) < 3:
        raise ValueError("costs must give the 1, 7 and 30 day prices")
    day_pass, week_pass, month_pass = costs[0], costs[1], costs[2]
    best = [0] * (len(days) + 1)
    for i in range(len(days) - 1, -1, -1):
        after_week = bisect_left(days, days[i] + 7, lo=i)
        after_month = bisect_left(days, days[i] + 30, lo=i)
        best[i] = min(
            day_pass + best[i + 1],
            week_pass + best[after_week],
            month_pass + best[after_month],
        )
    return best[0]
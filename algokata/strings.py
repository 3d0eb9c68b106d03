"""String puzzles: palindromes, rearrangement, subsequences and windows."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable


def can_construct_palindromes(s: str, k: int) -> bool:
    """Tell whether all characters of ``s`` can form exactly ``k`` palindromes."""
    odd = sum(1 for count in Counter(s).values() if count % 2 == 1)
    return k <= len(s) and odd <= k


def reorganize_string(s: str) -> str:
    """Rearrange ``s`` so no two neighbours are equal; empty if impossible."""
    if len(s) == 1:
        return s
    heap = [(-count, -ord(ch), ch) for ch, count in Counter(s).items()]
    heapq.heapify(heap)
    parts: list[str] = []
    while len(heap) >= 2:
        first = heapq.heappop(heap)
        second = heapq.heappop(heap)
        for negative_count, key, ch in (first, second):
            parts.append(ch)
            if negative_count + 1:
                heapq.heappush(heap, (negative_count + 1, key, ch))
    if heap:
        negative_count, _, ch = heap[0]
        if -negative_count >= 2:
            return ""
        parts.append(ch)
    return "".join(parts)


def _is_subsequence(word: str, s: str) -> bool:
    remaining = iter(s)
    return all(ch in remaining for ch in word)


def find_longest_word(s: str, dictionary: Iterable[str]) -> str:
    """Return the longest word obtainable by deleting characters from ``s``.

    Ties go to the lexicographically smallest word; no match gives "".
    """
    matches = [word for word in dictionary if _is_subsequence(word, s)]
    return min(matches, key=lambda word: (-len(word), word), default="")


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for i, ch in enumerate(s):
        if last_seen.get(ch, -1) >= start:
            start = last_seen[ch] + 1
        last_seen[ch] = i
        best = max(best, i - start + 1)
    return best
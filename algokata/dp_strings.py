"""Dynamic programming over strings: decodings, subsequences, palindromes."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")


def num_decodings(s: str) -> int:
    """Number of ways to read a digit string as letters with A=1 ... Z=26."""
    if not s:
        raise ValueError("string is empty")
    if not set(s) <= _DIGITS:
        raise ValueError(f"not a digit string: {s!r}")
    before, current = 1, 0 if s[0] == "0" else 1
    for i in range(1, len(s)):
        ways = 0
        if s[i] != "0":
            ways += current
        if 10 <= int(s[i - 1 : i + 1]) <= 26:
            ways += before
        before, current = current, ways
    return current


def num_distinct(s: str, t: str) -> int:
    """Number of distinct subsequences of ``s`` that equal ``t``."""
    ways = [1] + [0] * len(t)
    for ch in s:
        for j in range(len(t) - 1, -1, -1):
            if t[j] == ch:
                ways[j + 1] += ways[j]
    return ways[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    size = len(s)
    if size == 0:
        return 0
    table = [[0] * size for _ in range(size)]
    for gap in range(size):
        for i in range(size - gap):
            j = i + gap
            if gap == 0:
                table[i][j] = 1
            elif s[i] == s[j]:
                table[i][j] = 2 + (table[i + 1][j - 1] if gap > 1 else 0)
            else:
                table[i][j] = max(table[i][j - 1], table[i + 1][j])
    return table[0][size - 1]


def min_cut(s: str) -> int:
    """Fewest cuts that split ``s`` into palindromes."""
    size = len(s)
    if size == 0:
        return 0
    palindrome = [[False] * size for _ in range(size)]
    for j in range(size):
        for i in range(j, -1, -1):
            palindrome[i][j] = s[i] == s[j] and (j - i < 2 or palindrome[i + 1][j - 1])
    cuts = [0] * size
    for j in range(1, size):
        if palindrome[0][j]:
            cuts[j] = 0
        else:
            cuts[j] = 1 + min(cuts[i - 1] for i in range(1, j + 1) if palindrome[i][j])
    return cuts[-1]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Tell whether ``s`` is a concatenation of dictionary words."""
    words = set(word_dict)
    breakable = [False] * len(s) + [True]
    for start in range(len(s) - 1, -1, -1):
        breakable[start] = any(
            breakable[end] and s[start:end] in words for end in range(start + 1, len(s) + 1)
        )
    return breakable[0]
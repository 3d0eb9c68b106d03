"""Digit puzzles: reversing a number and counting its fours."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence


def _digits(n: int):
    """Yield the decimal digits of ``n``, least significant first."""
    while n > 0:
        n, digit = divmod(n, 10)
        yield digit


def reverse_digits(n: int) -> int:
    """Return ``n`` with its digits reversed; leading zeros of the result vanish."""
    result = 0
    for digit in _digits(n):
        result = result * 10 + digit
    return result


def count_fours(n: int) -> int:
    """Return how many of the decimal digits of ``n`` are 4."""
    return sum(1 for digit in _digits(n) if digit == 4)


def _run_cases(
    argv: Sequence[str] | None,
    prog: str,
    description: str,
    solve: Callable[[int], int],
) -> int:
    argparse.ArgumentParser(prog=prog, description=description).parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        return 0
    count = int(tokens[0])
    for token in tokens[1 : count + 1]:
        print(solve(int(token)))
    return 0


def reverse_main(argv: Sequence[str] | None = None) -> int:
    """Read a case count and that many numbers from stdin; print each reversed."""
    return _run_cases(
        argv,
        "reverse-digits",
        "Reverse the digits of each number read from standard input.",
        reverse_digits,
    )


def lucky_four_main(argv: Sequence[str] | None = None) -> int:
    """Read a case count and that many numbers from stdin; print their count of fours."""
    return _run_cases(
        argv,
        "lucky-four",
        "Count the digit 4 in each number read from standard input.",
        count_fours,
    )
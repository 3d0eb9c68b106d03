"""Classic algorithm exercises: dynamic programming, backtracking, arrays, strings, lists and trees."""

__version__ = "0.1.0"
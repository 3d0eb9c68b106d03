import math

import pytest

from algokata.dp_strings import (
    longest_palindrome_subseq,
    min_cut,
    num_decodings,
    num_distinct,
    word_break,
)


def test_num_decodings_example():
    assert num_decodings("226") == 3


def test_leading_zero_has_no_decoding():
    assert num_decodings("0") == 0
    assert num_decodings("06") == num_decodings("0")


@pytest.mark.parametrize("length", range(3, 12))
def test_ones_follow_fibonacci(length):
    assert num_decodings("1" * length) == num_decodings("1" * (length - 1)) + num_decodings(
        "1" * (length - 2)
    )


@pytest.mark.parametrize("bad", ["", "12a", "-1"])
def test_num_decodings_rejects_bad_input(bad):
    with pytest.raises(ValueError):
        num_decodings(bad)


def test_num_distinct_example():
    assert num_distinct("rabbbit", "rabbit") == 3


@pytest.mark.parametrize("size,pick", [(4, 2), (6, 3), (5, 1)])
def test_num_distinct_repeated_letter_is_binomial(size, pick):
    assert num_distinct("a" * size, "a" * pick) == math.comb(size, pick)


def test_num_distinct_identity_and_too_long():
    assert num_distinct("abc", "abc") == num_distinct("abc", "")
    assert num_distinct("ab", "abc") == 0


@pytest.mark.parametrize("s", ["racecar", "abba", "x", ""])
def test_palindrome_subseq_of_palindrome_is_whole(s):
    assert longest_palindrome_subseq(s) == len(s)


@pytest.mark.parametrize("s", ["bbbab", "cbbd", "character"])
def test_palindrome_subseq_reverse_invariant(s):
    result = longest_palindrome_subseq(s)
    assert result == longest_palindrome_subseq(s[::-1])
    assert 1 <= result <= len(s)


@pytest.mark.parametrize("s", ["a", "aba", "noon"])
def test_min_cut_palindrome_needs_none(s):
    assert min_cut(s) == min_cut("")


@pytest.mark.parametrize("s", ["abcd", "xyz"])
def test_min_cut_distinct_letters(s):
    assert min_cut(s) == len(s) - 1


@pytest.mark.parametrize("s", ["aab", "abccbd", "banana"])
def test_min_cut_bounded(s):
    assert 0 <= min_cut(s) <= len(s) - 1


def test_word_break_examples():
    assert word_break("leetcode", ["leet", "code"])
    assert word_break("applepenapple", ["apple", "pen"])
    assert not word_break("catsandog", ["cats", "dog", "sand", "and", "cat"])


def test_word_break_empty_string():
    assert word_break("", [])
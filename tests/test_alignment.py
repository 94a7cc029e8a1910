import pytest

from algokit.alignment import (
    is_interleave,
    longest_common_subsequence,
    min_insertions,
    minimum_delete_sum,
    num_distinct,
)


def test_lcs_worked_example():
    assert longest_common_subsequence("abcde", "ace") == 3


@pytest.mark.parametrize("text", ["", "a", "abcde", "zzyzx"])
def test_lcs_with_itself_is_full_length(text):
    assert longest_common_subsequence(text, text) == len(text)


def test_lcs_with_empty_string():
    assert longest_common_subsequence("abc", "") == len("")


@pytest.mark.parametrize("a,b", [("abcde", "ace"), ("xaybz", "abz"), ("kitten", "sitting")])
def test_lcs_is_symmetric_and_bounded(a, b):
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result <= min(len(a), len(b))


def test_num_distinct_example():
    assert num_distinct("rabbbit", "rabbit") == 3


@pytest.mark.parametrize("s,ch", [("banana", "a"), ("banana", "n"), ("xyz", "q")])
def test_num_distinct_single_char_counts_occurrences(s, ch):
    assert num_distinct(s, ch) == s.count(ch)


def test_num_distinct_target_longer_than_source():
    assert not num_distinct("ab", "abc")


def test_num_distinct_identical_strings():
    assert num_distinct("abc", "abc") == num_distinct("x", "x")


def test_is_interleave_examples():
    assert is_interleave("aabcc", "dbbca", "aadbbcbcac")
    assert not is_interleave("aabcc", "dbbca", "aadbbbaccc")


def test_is_interleave_length_mismatch():
    s1 = "a" * 27
    s2 = "a" * 82
    s3 = "a" * 53
    assert not is_interleave(s1, s2, s3)


@pytest.mark.parametrize("a,b", [("abc", "def"), ("", "xy"), ("xy", "")])
def test_is_interleave_concatenation(a, b):
    assert is_interleave(a, b, a + b)
    assert is_interleave(a, b, b + a)


def test_minimum_delete_sum_example():
    assert minimum_delete_sum("sea", "eat") == 231


def test_minimum_delete_sum_equal_strings():
    assert not minimum_delete_sum("delete", "delete")


def test_minimum_delete_sum_against_empty():
    assert minimum_delete_sum("leet", "") == sum(map(ord, "leet"))
    assert minimum_delete_sum("", "leet") == sum(map(ord, "leet"))


def test_minimum_delete_sum_symmetric():
    assert minimum_delete_sum("delete", "leet") == minimum_delete_sum("leet", "delete")


@pytest.mark.parametrize("s", ["", "a", "racecar", "abba"])
def test_min_insertions_palindrome_needs_none(s):
    assert not min_insertions(s)


@pytest.mark.parametrize("s", ["mbadm", "leetcode", "fomyxevyghcgdouxvio"])
def test_min_insertions_unique_tail_adds_one(s):
    assert min_insertions(s + "#") == min_insertions(s) + 1
    assert min_insertions(s) < len(s)
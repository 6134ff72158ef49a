import random

import pytest

from algocollection.sequences import (
    count_primes,
    max_subarray_sum,
    range_sums,
    shortest_uncommon_subsequence,
    z_array,
    z_search,
)


def test_shortest_uncommon_subsequence_example():
    assert shortest_uncommon_subsequence("babab", "babba") == 3


def test_shortest_uncommon_subsequence_none_when_contained():
    assert shortest_uncommon_subsequence("ab", "xaxbx") is None


def test_max_subarray_sum_example():
    assert max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3]) == 7


def test_max_subarray_sum_all_negative_is_largest_element():
    values = [-8, -3, -6, -2, -5, -4]
    assert max_subarray_sum(values) == max(values)


def test_max_subarray_sum_all_positive_is_total():
    values = [3, 1, 4, 1, 5, 9, 2, 6]
    assert max_subarray_sum(values) == sum(values)


def test_max_subarray_sum_accepts_iterators():
    values = [2, -1, 2]
    assert max_subarray_sum(iter(values)) == max_subarray_sum(values)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


VALUES = [1, 1, 2, 1, 3, 4, 5, 2, 8]


def test_range_sums_whole_range_is_total():
    assert range_sums(VALUES, [(0, len(VALUES) - 1)]) == [sum(VALUES)]


def test_range_sums_single_elements():
    assert range_sums(VALUES, [(i, i) for i in range(len(VALUES))]) == VALUES


def test_range_sums_are_additive():
    total = sum(VALUES)
    for k in range(len(VALUES) - 1):
        left, right = range_sums(VALUES, [(0, k), (k + 1, len(VALUES) - 1)])
        assert left + right == total


def test_range_sums_out_of_range_raises():
    with pytest.raises(IndexError):
        range_sums(VALUES, [(0, len(VALUES))])


def test_count_primes_negative_raises():
    with pytest.raises(ValueError):
        count_primes(-1)


def test_count_primes_small_steps():
    assert count_primes(0) == count_primes(1)
    assert count_primes(2) - count_primes(1) == 1
    assert count_primes(3) - count_primes(2) == 1
    assert count_primes(4) == count_primes(3)


@pytest.mark.parametrize("prime", [9973, 10007])
def test_count_primes_steps_at_primes(prime):
    assert count_primes(prime) - count_primes(prime - 1) == 1


@pytest.mark.parametrize("composite", [9999, 10000, 10001])
def test_count_primes_flat_at_composites(composite):
    assert count_primes(composite) == count_primes(composite - 1)


@pytest.mark.parametrize("text", ["aaaa", "abacaba", "abcabcab", "x", ""])
def test_z_array_matches_prefixes(text):
    z = z_array(text)
    assert len(z) == len(text)
    for i, length in enumerate(z[1:], start=1):
        assert text[:length] == text[i : i + length]
        assert i + length == len(text) or text[length] != text[i + length]


def test_z_search_source_example():
    text = "Hacktoberfest is Awesome"
    assert z_search(text, "Awesome") == [text.index("Awesome")]


def test_z_search_reports_every_occurrence():
    text = "ab" * 4
    found = z_search(text, "ab")
    assert len(found) == text.count("ab")
    assert all(text.startswith("ab", i) for i in found)


def test_z_search_handles_separator_characters():
    text = "a$b$a$b"
    found = z_search(text, "$b")
    assert all(text.startswith("$b", i) for i in found)
    assert len(found) == text.count("$b")


def test_z_search_empty_pattern_raises():
    with pytest.raises(ValueError):
        z_search("text", "")
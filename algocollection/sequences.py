"""Algorithms over strings and integer sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate

_SEGMENT = 10000
_SEPARATOR = object()


def shortest_uncommon_subsequence(s: str, v: str) -> int | None:
    """Length of the shortest subsequence of ``s`` that is not a subsequence of ``v``.

    Returns None when every subsequence of ``s`` is also one of ``v``.
    """
    m, n = len(s), len(v)
    dp = [[math.inf] * (n + 1) for _ in range(m + 1)]
    for row in dp[:m]:
        row[n] = 1
    for i in reversed(range(m)):
        below = dp[i + 1]
        row = dp[i]
        for j in reversed(range(n)):
            k = v.find(s[i], j)
            row[j] = 1 if k == -1 else min(below[j], 1 + below[k + 1])
    result = dp[0][0]
    return None if result == math.inf else int(result)


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``values``."""
    best: int | None = None
    running = 0
    for value in values:
        running += value
        if best is None or running > best:
            best = running
        if running < 0:
            running = 0
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Sums of ``values[left..right]`` (inclusive) for each query."""
    prefix = [0, *accumulate(values)]
    size = len(values)
    sums = []
    for left, right in queries:
        if left > right:
            sums.append(0)
            continue
        if left < 0 or right >= size:
            raise IndexError(f"query ({left}, {right}) out of range for {size} values")
        sums.append(prefix[right + 1] - prefix[left])
    return sums


def count_primes(n: int) -> int:
    """Number of primes not greater than ``n``, by a segmented sieve."""
    if n < 0:
        raise ValueError("n must not be negative")
    root = math.isqrt(n)
    small = bytearray([1]) * (root + 2)
    primes = []
    for i in range(2, root + 1):
        if small[i]:
            primes.append(i)
            small[i * i : root + 1 : i] = bytes(len(range(i * i, root + 1, i)))

    total = 0
    for start in range(0, n + 1, _SEGMENT):
        block = bytearray([1]) * _SEGMENT
        for p in primes:
            first = max((start + p - 1) // p, p) * p - start
            if first < _SEGMENT:
                block[first::p] = bytes(len(range(first, _SEGMENT, p)))
        if start == 0:
            block[0] = block[1] = 0
        total += block[: min(_SEGMENT, n - start + 1)].count(1)
    return total


def z_array(text: Sequence) -> list[int]:
    """Z-function of ``text``; the first entry is 0."""
    n = len(text)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i <= right and z[i - left] < right - i + 1:
            z[i] = z[i - left]
            continue
        if i > right:
            right = i
        left = i
        while right < n and text[right - left] == text[right]:
            right += 1
        z[i] = right - left
        right -= 1
    return z


def z_search(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    width = len(pattern)
    combined = [*pattern, _SEPARATOR, *text]
    return [i - width - 1 for i, length in enumerate(z_array(combined)) if length == width]
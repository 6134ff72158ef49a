"""Dynamic programming: segment partitioning and weighted job scheduling."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Callable, Sequence


def partition_cost(groups: int, n: int, cost: Callable[[int, int], int]) -> int:
    """Least total cost of splitting positions ``0..n-1`` into at most ``groups`` runs.

    ``cost(i, j)`` is the cost of the run from ``i`` to ``j`` inclusive. Uses the
    divide-and-conquer optimisation, so the cost must satisfy its monotonicity
    condition.
    """
    if groups < 1:
        raise ValueError("groups must be at least 1")
    if n < 1:
        raise ValueError("n must be at least 1")

    before = [cost(0, i) for i in range(n)]
    for _ in range(groups - 1):
        current = [0] * n

        def compute(left: int, right: int, opt_left: int, opt_right: int) -> None:
            if left > right:
                return
            mid = (left + right) // 2
            value, opt = min(
                ((before[k - 1] if k else 0) + cost(k, mid), k)
                for k in range(opt_left, min(mid, opt_right) + 1)
            )
            current[mid] = value
            compute(left, mid - 1, opt_left, opt)
            compute(mid + 1, right, opt, opt_right)

        compute(0, n - 1, 0, n - 1)
        before = current
    return before[-1]


def max_profit_schedule(
    start_times: Sequence[int], end_times: Sequence[int], profits: Sequence[int]
) -> int:
    """Greatest total profit from jobs that do not overlap.

    A job may start at the moment another one ends.
    """
    if not len(start_times) == len(end_times) == len(profits):
        raise ValueError("start_times, end_times and profits must have the same length")
    if not start_times:
        raise ValueError("at least one job is needed")

    jobs = sorted(zip(start_times, end_times, profits), key=lambda job: job[1])
    ends = [end for _, end, _ in jobs]
    best: list[int] = []
    for i, (start, _, profit) in enumerate(jobs):
        earlier = bisect_right(ends, start, 0, i)
        include = profit + (best[earlier - 1] if earlier else 0)
        best.append(max(include, best[-1]) if best else include)
    return best[-1]
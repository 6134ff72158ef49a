import pytest

from algocollection.dynamic import max_profit_schedule, partition_cost

VALUES = [1, 2, 3, 4]


def squared_run(i, j):
    return sum(VALUES[i : j + 1]) ** 2


def test_partition_cost_two_groups():
    assert partition_cost(2, len(VALUES), squared_run) == 52


def test_partition_cost_one_group_is_whole_run():
    assert partition_cost(1, len(VALUES), squared_run) == squared_run(0, len(VALUES) - 1)


def test_partition_cost_never_grows_with_more_groups():
    costs = [partition_cost(g, len(VALUES), squared_run) for g in range(1, 6)]
    assert costs == sorted(costs, reverse=True)


def test_partition_cost_all_singletons():
    expected = sum(squared_run(i, i) for i in range(len(VALUES)))
    assert partition_cost(len(VALUES), len(VALUES), squared_run) == expected


@pytest.mark.parametrize("groups, n", [(0, 3), (2, 0)])
def test_partition_cost_invalid_arguments(groups, n):
    with pytest.raises(ValueError):
        partition_cost(groups, n, squared_run)


def test_max_profit_example():
    assert max_profit_schedule([1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70]) == 120


def test_max_profit_single_job():
    assert max_profit_schedule([4], [9], [13]) == 13


def test_max_profit_back_to_back_jobs_all_count():
    profits = [5, 6, 7]
    assert max_profit_schedule([0, 2, 4], [2, 4, 6], profits) == sum(profits)


def test_max_profit_overlapping_jobs_take_best():
    profits = [5, 9, 7]
    assert max_profit_schedule([0, 0, 0], [5, 6, 7], profits) == max(profits)


def test_max_profit_order_of_input_does_not_matter():
    starts, ends, profits = [1, 2, 3, 3], [3, 4, 5, 6], [50, 10, 40, 70]
    forward = max_profit_schedule(starts, ends, profits)
    assert max_profit_schedule(starts[::-1], ends[::-1], profits[::-1]) == forward


def test_max_profit_mismatched_lengths():
    with pytest.raises(ValueError):
        max_profit_schedule([1, 2], [3], [4, 5])


def test_max_profit_empty():
    with pytest.raises(ValueError):
        max_profit_schedule([], [], [])
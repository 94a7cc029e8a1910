import pytest

from algokit.counting import count_ways, mincost_tickets, num_rolls_to_target


def test_num_rolls_two_dice_example():
    assert num_rolls_to_target(2, 6, 7) == 6


@pytest.mark.parametrize("target", range(1, 7))
def test_num_rolls_single_die(target):
    assert num_rolls_to_target(1, 6, target) == 1


def test_num_rolls_out_of_range():
    assert num_rolls_to_target(3, 4, 2) == 0
    assert num_rolls_to_target(3, 4, 13) == 0


def test_num_rolls_no_dice():
    assert num_rolls_to_target(0, 6, 0) == 1


def test_num_rolls_all_outcomes():
    n, k = 3, 5
    assert sum(num_rolls_to_target(n, k, t) for t in range(n, n * k + 1)) == k**n


def test_num_rolls_symmetric():
    n, k = 4, 6
    for t in range(n, n * k + 1):
        assert num_rolls_to_target(n, k, t) == num_rolls_to_target(n, k, n * (k + 1) - t)


def test_num_rolls_reduced_modulo():
    result = num_rolls_to_target(30, 30, 500)
    assert 0 <= result < 1000000007


def test_num_rolls_negative_target():
    assert num_rolls_to_target(2, 6, -1) == 0


def test_num_rolls_rejects_negative_dice():
    with pytest.raises(ValueError):
        num_rolls_to_target(-1, 6, 3)


@pytest.mark.parametrize("k", [1, 2, 5])
def test_count_ways_one_post(k):
    assert count_ways(1, k) == k


@pytest.mark.parametrize("k", [1, 2, 5])
def test_count_ways_two_posts(k):
    assert count_ways(2, k) == k * k


def test_count_ways_three_posts_two_colours():
    assert count_ways(3, 2) == 6


def test_count_ways_recurrence_holds():
    k = 4
    for n in range(3, 12):
        assert count_ways(n, k) == (k - 1) * (count_ways(n - 1, k) + count_ways(n - 2, k))


def test_count_ways_rejects_zero_posts():
    with pytest.raises(ValueError):
        count_ways(0, 3)


def test_mincost_tickets_example():
    assert mincost_tickets([1, 4, 6, 7, 8, 20], [2, 7, 15]) == 11


def test_mincost_tickets_single_day():
    costs = [9, 4, 20]
    assert mincost_tickets([5], costs) == min(costs)


def test_mincost_tickets_no_days():
    assert mincost_tickets([], [2, 7, 15]) == 0


def test_mincost_tickets_never_above_daily_passes():
    days = [1, 2, 3, 10, 11, 40, 41]
    costs = [3, 10, 25]
    assert mincost_tickets(days, costs) <= len(days) * costs[0]


def test_mincost_tickets_rejects_wrong_costs():
    with pytest.raises(ValueError):
        mincost_tickets([1, 2], [2, 7])
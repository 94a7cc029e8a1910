import pytest

from algokit.knapsack import (
    can_partition,
    coin_change,
    find_max_form,
    find_target_sum_ways,
    num_squares,
)


def test_coin_change_example():
    assert coin_change([1, 2, 5], 11) == 3


def test_coin_change_impossible():
    assert coin_change([2], 3) == -1


def test_coin_change_zero_amount():
    assert coin_change([4, 9], 0) == 0


def test_coin_change_only_unit_coins():
    assert coin_change([1], 9) == 9


def test_coin_change_single_coin_equals_amount():
    assert coin_change([3, 17], 17) == 1


def test_coin_change_rejects_negative_amount():
    with pytest.raises(ValueError):
        coin_change([1], -1)


def test_coin_change_rejects_zero_coin():
    with pytest.raises(ValueError):
        coin_change([0, 1], 5)


def test_find_max_form_example():
    assert find_max_form(["10", "0001", "111001", "1", "0"], 5, 3) == 4


def test_find_max_form_nothing_fits():
    assert find_max_form(["01", "10"], 0, 0) == 0


def test_find_max_form_everything_fits():
    strs = ["0", "1", "01", "0011"]
    assert find_max_form(strs, 10, 10) == len(strs)


def test_find_max_form_rejects_negative():
    with pytest.raises(ValueError):
        find_max_form(["0"], -1, 1)


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 5, 11, 5], True), ([1, 2, 3, 5], False), ([], True), ([2, 2], True), ([1, 2], False)],
)
def test_can_partition(nums, expected):
    assert can_partition(nums) is expected


def test_can_partition_rejects_negative():
    with pytest.raises(ValueError):
        can_partition([1, -1])


def test_find_target_sum_ways_example():
    assert find_target_sum_ways([1, 1, 1, 1, 1], 3) == 5


def test_find_target_sum_ways_unreachable():
    assert find_target_sum_ways([1, 2], 100) == 0


def test_find_target_sum_ways_total_over_all_targets():
    nums = [1, 2, 3, 4]
    total = sum(nums)
    counted = sum(find_target_sum_ways(nums, t) for t in range(-total, total + 1))
    assert counted == 2 ** len(nums)


def test_find_target_sum_ways_is_symmetric():
    nums = [2, 3, 5, 7]
    assert find_target_sum_ways(nums, 3) == find_target_sum_ways(nums, -3)


@pytest.mark.parametrize("root", [1, 2, 5, 12])
def test_num_squares_perfect_square(root):
    assert num_squares(root * root) == 1


def test_num_squares_zero():
    assert num_squares(0) == 0


def test_num_squares_never_more_than_four():
    assert all(1 <= num_squares(n) <= 4 for n in range(1, 200))


def test_num_squares_rejects_negative():
    with pytest.raises(ValueError):
        num_squares(-4)
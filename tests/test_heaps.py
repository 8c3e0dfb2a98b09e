from collections import Counter

import pytest

from algokit.heaps import furthest_building, kth_largest, nth_ugly_number, top_k_frequent


def test_furthest_building_worked_example():
    assert furthest_building([4, 2, 7, 6, 9, 14, 12], 5, 1) == 4


def test_furthest_building_enough_ladders_reaches_end():
    heights = [1, 5, 9, 20, 40]
    assert furthest_building(heights, 0, len(heights) - 1) == len(heights) - 1


def test_furthest_building_descending_needs_nothing():
    heights = [9, 7, 4, 1]
    assert furthest_building(heights, 0, 0) == len(heights) - 1


def test_furthest_building_blocked_at_first_climb():
    assert furthest_building([1, 2], 0, 0) == 0


def test_furthest_building_more_bricks_never_worse():
    heights = [3, 8, 2, 9, 4, 10, 15, 1, 7]
    reached = [furthest_building(heights, bricks, 1) for bricks in range(25)]
    assert all(later >= earlier for earlier, later in zip(reached, reached[1:]))
    assert reached[-1] <= len(heights) - 1


def test_furthest_building_empty_raises():
    with pytest.raises(ValueError):
        furthest_building([], 3, 1)


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_kth_largest_ranks_correctly(k):
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6][:6] + [6]
    result = kth_largest(nums, k)
    assert result in nums
    assert sum(1 for value in nums if value > result) < k
    assert sum(1 for value in nums if value >= result) >= k


def test_kth_largest_with_duplicates():
    assert kth_largest([3, 3, 3], 2) == 3


@pytest.mark.parametrize("k", [0, 4])
def test_kth_largest_rejects_out_of_range(k):
    with pytest.raises(ValueError):
        kth_largest([1, 2, 3], k)


def test_first_ugly_numbers():
    assert [nth_ugly_number(n) for n in range(1, 11)] == [1, 2, 3, 4, 5, 6, 8, 9, 10, 12]


def test_ugly_numbers_increase_and_have_only_small_factors():
    values = [nth_ugly_number(n) for n in range(1, 80)]
    assert all(a < b for a, b in zip(values, values[1:]))
    for value in values:
        for factor in (2, 3, 5):
            while value % factor == 0:
                value //= factor
        assert value == 1


def test_nth_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


def test_top_k_frequent_worked_example():
    assert top_k_frequent([1, 1, 1, 2, 2, 3], 2) == [2, 1]


def test_top_k_frequent_zero_is_empty():
    assert top_k_frequent([1, 1, 2], 0) == []


def test_top_k_frequent_large_k_returns_all_by_rising_frequency():
    nums = [7, 7, 7, 4, 4, 9, 5, 5, 5, 5]
    counts = Counter(nums)
    result = top_k_frequent(nums, 10)
    assert sorted(result) == sorted(counts)
    frequencies = [counts[value] for value in result]
    assert frequencies == sorted(frequencies)


def test_top_k_frequent_keeps_most_frequent():
    nums = [8, 8, 8, 8, 6, 6, 6, 1, 1, 2]
    counts = Counter(nums)
    result = top_k_frequent(nums, 2)
    left_out = set(counts) - set(result)
    assert len(result) == 2
    assert min(counts[v] for v in result) >= max(counts[v] for v in left_out)


def test_top_k_frequent_rejects_negative_k():
    with pytest.raises(ValueError):
        top_k_frequent([1], -1)
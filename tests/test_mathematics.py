import math
from itertools import combinations

import pytest

from algokit.mathematics import add_binary, maximum_product_of_three, product_except_self


def test_add_binary_worked_example():
    assert add_binary("11", "1") == "100"


@pytest.mark.parametrize("x", [0, 1, 2, 5, 13, 64, 255])
@pytest.mark.parametrize("y", [0, 1, 3, 7, 100])
def test_add_binary_matches_integer_sum(x, y):
    assert int(add_binary(bin(x)[2:], bin(y)[2:]), 2) == x + y


def test_add_binary_keeps_leading_zero_width():
    result = add_binary("0011", "1")
    assert len(result) == len("0011")
    assert int(result, 2) == 0b11 + 1


def test_add_binary_zero_plus_zero():
    assert add_binary("0", "0") == "0"


def test_add_binary_empty_operands():
    assert add_binary("", "") == ""
    assert add_binary("", "101") == "101"


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 3], [1, 2, 3, 4], [-10, -10, 1, 3, 2], [-5, -4, -3, -2], [0, -1, 3, 100, -70, -50]],
)
def test_maximum_product_of_three_bounds_every_triple(nums):
    result = maximum_product_of_three(nums)
    products = [math.prod(triple) for triple in combinations(nums, 3)]
    assert result in products
    assert all(result >= p for p in products)


def test_maximum_product_of_three_needs_three_values():
    with pytest.raises(ValueError):
        maximum_product_of_three([1, 2])


@pytest.mark.parametrize("nums", [[10, 3, 5, 6, 2], [-2, 4, 3], [7]])
def test_product_except_self_without_zeros(nums):
    result = product_except_self(nums)
    assert all(value * other == math.prod(nums) for value, other in zip(nums, result))


def test_product_except_self_with_one_zero():
    nums = [4, 0, 3, -2]
    result = product_except_self(nums)
    assert result[1] == 4 * 3 * -2
    assert [v for i, v in enumerate(result) if i != 1] == [0, 0, 0]


def test_product_except_self_with_two_zeros():
    assert product_except_self([0, 5, 0]) == [0, 0, 0]


def test_product_except_self_empty():
    assert product_except_self([]) == []
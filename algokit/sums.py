"""Sum, pair and profit problems over integer sequences."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterator, Sequence


def _pairs_with_sum(values: Sequence[int], lo: int, target: int) -> Iterator[tuple[int, int]]:
    """Yield distinct pairs from sorted ``values[lo:]`` whose sum equals ``target``."""
    hi = len(values) - 1
    while lo < hi:
        total = values[lo] + values[hi]
        if total < target:
            lo += 1
        elif total > target:
            hi -= 1
        else:
            yield values[lo], values[hi]
            lo += 1
            hi -= 1
            while lo < hi and values[lo] == values[lo - 1]:
                lo += 1
            while lo < hi and values[hi] == values[hi + 1]:
                hi -= 1


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct sorted triplet of ``nums`` that sums to zero."""
    values = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        triplets.extend([first, b, c] for b, c in _pairs_with_sum(values, i + 1, -first))
    return triplets


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruplet of ``nums`` that sums to ``target``."""
    values = sorted(nums)
    n = len(values)
    quadruplets: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        for j in range(i + 1, n - 1):
            second = values[j]
            if j != i + 1 and second == values[j - 1]:
                continue
            rest = target - first - second
            quadruplets.extend(
                [first, second, c, d] for c, d in _pairs_with_sum(values, j + 1, rest)
            )
    return quadruplets


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen.setdefault(value, index)
    return None


def subarrays_div_by_k(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must be non-zero")
    remainders: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        remainder = prefix % k
        count += remainders[remainder]
        remainders[remainder] += 1
    return count


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count contiguous subarrays whose sum equals ``k``."""
    prefixes: Counter[int] = Counter({0: 1})
    prefix = 0
    count = 0
    for value in nums:
        prefix += value
        count += prefixes[prefix - k]
        prefixes[prefix] += 1
    return count


def has_pair_with_difference(arr: Sequence[int], x: int) -> bool:
    """Tell whether two elements of ``arr`` differ by exactly ``x``."""
    seen: set[int] = set()
    for value in arr:
        if value + x in seen or value - x in seen:
            return True
        seen.add(value)
    return False


def max_area(height: Sequence[int]) -> int:
    """Return the most water a container formed by two of the lines can hold."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, min(height[left], height[right]) * (right - left))
        if height[left] <= height[right]:
            left += 1
        else:
            right -= 1
    return best


def min_chocolate_difference(packets: Sequence[int], students: int) -> int:
    """Return the smallest max-minus-min spread when handing one packet to each student."""
    if not 1 <= students <= len(packets):
        raise ValueError("students must be between 1 and the number of packets")
    ordered = sorted(packets)
    return min(high - low for low, high in zip(ordered, ordered[students - 1:]))


def max_card_score(cards: Sequence[int], k: int) -> int:
    """Return the best total of ``k`` cards taken from either end of the row."""
    if not 0 <= k <= len(cards):
        raise ValueError("k must be between 0 and the number of cards")
    window = sum(cards[:k])
    best = window
    for taken in range(1, k + 1):
        window += cards[-taken] - cards[k - taken]
        best = max(best, window)
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from a single buy followed by a single sell."""
    lowest = math.inf
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Return the best profit with any number of non-overlapping transactions."""
    can_buy = 0
    holding = 0
    for price in reversed(prices):
        can_buy, holding = (
            max(-price + holding, can_buy),
            max(price + can_buy, holding),
        )
    return can_buy


def can_pair_to_threshold(a: Sequence[int], b: Sequence[int], k: int) -> bool:
    """Tell whether ``b`` can be permuted so that every ``a[i] + b[i]`` is at least ``k``."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    ascending = sorted(a)
    descending = sorted(b, reverse=True)
    return all(x + y >= k for x, y in zip(ascending, descending))
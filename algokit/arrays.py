"""Searching, rearranging and decoding problems over sequences."""

from __future__ import annotations

import heapq
import re
from collections import Counter
from collections.abc import Sequence

_TRAILING_DIGITS = re.compile(r"[0-9]*\Z")


def find_all_duplicates(nums: Sequence[int]) -> list[int]:
    """Return values seen again, in the order their repeat occurrences appear."""
    seen: set[int] = set()
    repeats: list[int] = []
    for value in nums:
        if value in seen:
            repeats.append(value)
        else:
            seen.add(value)
    return repeats


def find_duplicate(arr: Sequence[int]) -> int:
    """Return the smallest value in ``0..len(arr)-1`` that occurs at least twice."""
    n = len(arr)
    if n == 0:
        raise ValueError("sequence is empty")
    counts = Counter(value % n for value in arr)
    for value in range(n):
        if counts[value] >= 2:
            return value
    raise ValueError("no duplicate value")


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours, or -1 if none is found."""
    n = len(nums)
    if n == 0:
        raise ValueError("sequence is empty")
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] > nums[mid - 1]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than ``len(nums) // 2`` times."""
    if nums:
        value, count = Counter(nums).most_common(1)[0]
        if count > len(nums) // 2:
            return value
    raise ValueError("no majority element")


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences; ties take the element of ``first`` first."""
    return list(heapq.merge(first, second))


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other values."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def remove_duplicates(nums: list[int]) -> int:
    """Write the distinct values, ascending, to the front of ``nums`` and return their count."""
    distinct = sorted(set(nums))
    nums[: len(distinct)] = distinct
    return len(distinct)


def search_rotated(arr: Sequence[int], k: int) -> int:
    """Return the index of ``k`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if arr[mid] == k:
            return mid
        if arr[low] <= arr[mid]:
            if arr[low] <= k <= arr[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif arr[mid] <= k <= arr[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0, 1 and 2 values in place."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"unexpected colour values: {sorted(unexpected)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def decode_string(s: str) -> str:
    """Expand ``count[text]`` groups, innermost first."""
    result = ""
    for char in s:
        if char != "]":
            result += char
            continue
        opening = result.rfind("[")
        if opening < 0:
            raise ValueError("unmatched ']'")
        body = result[opening + 1:]
        result = result[:opening]
        digits = _TRAILING_DIGITS.search(result).group()
        if not digits:
            raise ValueError("missing repeat count before '['")
        result = result[: len(result) - len(digits)] + body * int(digits)
    return result
"""Arithmetic puzzles: binary addition and products."""

from __future__ import annotations

import math
from collections.abc import Sequence


def add_binary(a: str, b: str) -> str:
    """Add two binary strings; the result is at least as wide as the wider operand."""
    if set(a + b) - {"0", "1"}:
        raise ValueError("operands must contain only binary digits")
    width = max(len(a), len(b))
    if width == 0:
        return ""
    total = int(a or "0", 2) + int(b or "0", 2)
    return format(total, f"0{width}b")


def maximum_product_of_three(nums: Sequence[int]) -> int:
    """Return the largest product of any three values."""
    if len(nums) < 3:
        raise ValueError("at least three values are needed")
    ordered = sorted(nums)
    return max(ordered[0] * ordered[1] * ordered[-1], ordered[-1] * ordered[-2] * ordered[-3])


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other value."""
    zeros = sum(1 for value in nums if value == 0)
    total = math.prod(value for value in nums if value != 0)
    if zeros > 1:
        return [0] * len(nums)
    if zeros == 1:
        return [total if value == 0 else 0 for value in nums]
    return [total // value for value in nums]
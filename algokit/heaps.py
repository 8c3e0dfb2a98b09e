"""Problems solved with binary heaps."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Sequence
from itertools import pairwise


def furthest_building(heights: Sequence[int], bricks: int, ladders: int) -> int:
    """Return the furthest building index reachable, using ladders for the largest climbs."""
    if not heights:
        raise ValueError("there are no buildings")
    climbs: list[int] = []
    for index, (here, there) in enumerate(pairwise(heights)):
        climb = there - here
        if climb > 0:
            heapq.heappush(climbs, climb)
        if len(climbs) > ladders:
            bricks -= heapq.heappop(climbs)
            if bricks < 0:
                return index
    return len(heights) - 1


def kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the number of values")
    return heapq.nlargest(k, nums)[-1]


def nth_ugly_number(n: int) -> int:
    """Return the ``n``-th positive number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    heap = [1]
    seen = {1}
    ugly = 1
    for _ in range(n):
        ugly = heapq.heappop(heap)
        for factor in (2, 3, 5):
            candidate = ugly * factor
            if candidate not in seen:
                seen.add(candidate)
                heapq.heappush(heap, candidate)
    return ugly


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, least frequent first.

    Ties in frequency are broken towards larger values, and the result is
    ordered by ``(frequency, value)`` ascending.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    counts = Counter(nums)
    kept = heapq.nlargest(k, ((count, value) for value, count in counts.items()))
    return [value for _, value in reversed(kept)]
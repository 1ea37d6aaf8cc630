"""Find two distinct indices whose values add up to a target."""

from itertools import combinations
from typing import Dict, Optional, Sequence, Tuple


def two_sum_brute(nums: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Try every pair in order; return the first matching index pair or None."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return i, j
    return None


def two_sum(nums: Sequence[int], target: int) -> Optional[Tuple[int, int]]:
    """Remember each value's index and look up the complement; None when no pair exists."""
    seen: Dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None
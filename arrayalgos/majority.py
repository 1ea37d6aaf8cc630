"""Majority element: a value occurring more than n/2 times."""

from collections import Counter
from typing import Optional, Sequence


def majority_element_brute(nums: Sequence[int]) -> Optional[int]:
    """Count each element against all others; None when there is no majority."""
    half = len(nums) // 2
    for value in nums:
        if sum(1 for other in nums if other == value) > half:
            return value
    return None


def majority_element_counting(nums: Sequence[int]) -> Optional[int]:
    """Tally frequencies; None when there is no majority."""
    half = len(nums) // 2
    counts = Counter(nums)
    for value in sorted(counts):
        if counts[value] > half:
            return value
    return None


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore voting; assumes a majority exists and returns the final candidate."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 0
    for value in nums:
        if count == 0:
            candidate = value
            count = 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate
"""Maximum sum over all non-empty contiguous subarrays."""

from itertools import accumulate
from typing import Sequence


def _require_items(nums: Sequence[int]) -> None:
    if not nums:
        raise ValueError("nums must not be empty")


def max_subarray_brute(nums: Sequence[int]) -> int:
    """Sum every subarray directly and keep the largest."""
    _require_items(nums)
    return max(
        max(accumulate(nums[start:])) for start in range(len(nums))
    )


def max_subarray_prefix(nums: Sequence[int]) -> int:
    """Use prefix sums to evaluate every subarray."""
    _require_items(nums)
    prefix = [0, *accumulate(nums)]
    n = len(nums)
    return max(
        prefix[end + 1] - prefix[start]
        for start in range(n)
        for end in range(start, n)
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Kadane's algorithm: extend the running sum, resetting it when it goes negative."""
    _require_items(nums)
    best = nums[0]
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best
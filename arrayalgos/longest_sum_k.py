"""Longest contiguous subarray whose sum equals k."""

from typing import Sequence


def longest_subarray_sum_k_brute(nums: Sequence[int], k: int) -> int:
    """Check every subarray; works for any integers."""
    longest = 0
    for start in range(len(nums)):
        total = 0
        for end in range(start, len(nums)):
            total += nums[end]
            if total == k:
                longest = max(longest, end - start + 1)
    return longest


def longest_subarray_sum_k(nums: Sequence[int], k: int) -> int:
    """Sliding window; correct only when all numbers are non-negative."""
    left = 0
    total = 0
    longest = 0
    for right, value in enumerate(nums):
        total += value
        while total > k and left <= right:
            total -= nums[left]
            left += 1
        if total == k:
            longest = max(longest, right - left + 1)
    return longest
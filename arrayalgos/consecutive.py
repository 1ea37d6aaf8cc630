"""Length of the longest run of consecutive integers present in a list."""

from typing import Iterable, Sequence


def longest_consecutive_brute(nums: Sequence[int]) -> int:
    """For each value, walk upward while the next integer is in the list."""
    longest = 0
    for value in nums:
        current, count = value, 1
        while current + 1 in nums:
            current += 1
            count += 1
        longest = max(longest, count)
    return longest


def longest_consecutive(nums: Iterable[int]) -> int:
    """Use a set and count only from values that start a run."""
    present = set(nums)
    longest = 0
    for value in present:
        if value - 1 not in present:
            current = value
            while current + 1 in present:
                current += 1
            longest = max(longest, current - value + 1)
    return longest
"""Sort a list holding only 0s, 1s and 2s, in place."""

from typing import List


def sort_colors_counting(nums: List[int]) -> None:
    """Count 0s and 1s (anything else counts as 2), then overwrite the list."""
    zeros = sum(1 for value in nums if value == 0)
    ones = sum(1 for value in nums if value == 1)
    twos = len(nums) - zeros - ones
    nums[:] = [0] * zeros + [1] * ones + [2] * twos


def sort_colors(nums: List[int]) -> None:
    """Dutch national flag partitioning in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1
"""Interleave positive and non-positive numbers, keeping their relative order."""

from typing import List, Sequence


def rearrange_by_sign(nums: Sequence[int]) -> List[int]:
    """Place positives at even positions and the rest at odd positions.

    The input must hold as many positive as non-positive numbers.
    """
    positives = [value for value in nums if value > 0]
    negatives = [value for value in nums if value <= 0]
    if len(positives) != len(negatives):
        raise ValueError("nums must hold equally many positive and non-positive numbers")
    result: List[int] = []
    for pos, neg in zip(positives, negatives):
        result.extend((pos, neg))
    return result
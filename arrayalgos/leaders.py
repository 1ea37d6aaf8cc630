"""Leaders: elements not smaller than anything to their right."""

from typing import List, Sequence


def leaders_brute(arr: Sequence[int]) -> List[int]:
    """Check, for each element, that nothing to its right is greater."""
    return [
        value
        for index, value in enumerate(arr)
        if all(other <= value for other in arr[index + 1:])
    ]


def leaders(arr: Sequence[int]) -> List[int]:
    """Scan from the right keeping the running maximum; return leaders left to right."""
    if not arr:
        raise ValueError("arr must not be empty")
    highest = arr[-1]
    found = [highest]
    for value in reversed(arr[:-1]):
        if value >= highest:
            highest = value
            found.append(value)
    found.reverse()
    return found
"""Best single buy/sell stock profit."""

from itertools import combinations
from typing import Sequence


def max_profit_brute(prices: Sequence[int]) -> int:
    """Try every buy/sell pair (buy strictly before sell); return the best profit, never below 0."""
    return max([0, *(sell - buy for buy, sell in combinations(prices, 2))])


def max_profit(prices: Sequence[int]) -> int:
    """Track the cheapest price so far and the best profit in one pass."""
    if not prices:
        raise ValueError("prices must not be empty")
    cheapest = prices[0]
    profit = 0
    for price in prices[1:]:
        profit = max(profit, price - cheapest)
        cheapest = min(cheapest, price)
    return profit
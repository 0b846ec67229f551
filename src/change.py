"""Coin and note breakdown for returning a balance."""
from __future__ import annotations

from typing import List, Tuple

from money import CURRENCY_SYMBOL

# Descending face values in pence. Greedy selection is optimal for this set.
DENOMINATIONS: Tuple[int, ...] = (200, 100, 50, 20, 10, 5, 2, 1)


def denomination_label(value: int) -> str:
    if value >= 100:
        return f"{CURRENCY_SYMBOL}{value // 100}"
    return f"{value}p"


class ChangeMaker:
    """Splits an amount into the fewest coins from a fixed table."""

    def __init__(self, denominations: Tuple[int, ...] = DENOMINATIONS) -> None:
        self._denominations = denominations

    def breakdown(self, amount: int) -> List[Tuple[int, int]]:
        """Return ``(denomination, count)`` pairs, largest denomination first."""
        if amount < 0:
            raise ValueError("Cannot make change for a negative amount")

        result: List[Tuple[int, int]] = []
        remaining = amount
        for denomination in self._denominations:
            count, remaining = divmod(remaining, denomination)
            if count > 0:
                result.append((denomination, count))
        return result

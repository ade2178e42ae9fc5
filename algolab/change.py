"""Making change with the fewest coins."""

from __future__ import annotations

from typing import Sequence

__all__ = ["get_change"]


def get_change(denominations: Sequence[int], amount: int) -> list[int]:
    """Return a minimal list of coins from ``denominations`` summing to ``amount``.

    Each denomination may be used any number of times. Raises ValueError when
    the amount is negative, a denomination is not positive, or no combination
    of coins gives the amount.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    coins = sorted(set(denominations))
    if any(coin <= 0 for coin in coins):
        raise ValueError("denominations must be positive")

    # fewest[a] is the minimal coin count for amount a; last_coin[a] is the coin used last.
    fewest: list[int | None] = [0] + [None] * amount
    last_coin = [0] * (amount + 1)
    for total in range(1, amount + 1):
        for coin in coins:
            if coin > total:
                break
            previous = fewest[total - coin]
            if previous is not None and (fewest[total] is None or previous + 1 < fewest[total]):
                fewest[total] = previous + 1
                last_coin[total] = coin

    if fewest[amount] is None:
        raise ValueError(f"amount {amount} cannot be made from {list(denominations)}")

    result = []
    remaining = amount
    while remaining:
        result.append(last_coin[remaining])
        remaining -= last_coin[remaining]
    return result
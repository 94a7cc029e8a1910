"""Maximum profit from trading a single stock under various rules.

Every function takes the day-by-day prices and returns the best total
profit.  At most one share is held at a time, and a share must be sold
before another one is bought.
"""

from __future__ import annotations

from collections.abc import Iterable


def max_profit_unlimited(prices: Iterable[int]) -> int:
    """Best profit when any number of transactions is allowed."""
    can_buy = holding = 0
    for price in reversed(list(prices)):
        can_buy, holding = (
            max(holding - price, can_buy),
            max(can_buy + price, holding),
        )
    return can_buy


def max_profit_k_transactions(k: int, prices: Iterable[int]) -> int:
    """Best profit with at most ``k`` completed transactions."""
    if k < 0:
        raise ValueError("the number of transactions must not be negative")
    can_buy = [0] * (k + 1)
    holding = [0] * (k + 1)
    for price in reversed(list(prices)):
        new_buy = [0] + [
            max(holding[limit] - price, can_buy[limit]) for limit in range(1, k + 1)
        ]
        new_hold = [0] + [
            max(can_buy[limit - 1] + price, holding[limit])
            for limit in range(1, k + 1)
        ]
        can_buy, holding = new_buy, new_hold
    return can_buy[k]


def max_profit_two_transactions(prices: Iterable[int]) -> int:
    """Best profit with at most two completed transactions."""
    return max_profit_k_transactions(2, prices)


def max_profit_with_cooldown(prices: Iterable[int]) -> int:
    """Best profit when a sale forbids buying on the following day."""
    can_buy_next = holding_next = can_buy_after_next = 0
    for price in reversed(list(prices)):
        can_buy = max(holding_next - price, can_buy_next)
        holding = max(can_buy_after_next + price, holding_next)
        can_buy_after_next = can_buy_next
        can_buy_next, holding_next = can_buy, holding
    return can_buy_next


def max_profit_with_fee(prices: Iterable[int], fee: int) -> int:
    """Best profit when every sale costs ``fee``."""
    can_buy = holding = 0
    for price in reversed(list(prices)):
        can_buy, holding = (
            max(holding - price, can_buy),
            max(can_buy + price - fee, holding),
        )
    return can_buy
"""Spend a fixed budget on as many items as it buys, drawing one mark per item."""

from __future__ import annotations

import sys
from typing import Sequence

MONEY = 3000


def purchase_line(name: str, price: int, money: int, stars_per_item: int) -> str:
    """Describe buying price-sized items until money runs short."""
    if price <= 0:
        raise ValueError(f"price must be positive: {price}")
    if stars_per_item < 0:
        raise ValueError(f"stars per item must not be negative: {stars_per_item}")
    count = money // price if money >= price else 0
    remaining = money - count * price
    return f"{name} {'*' * (count * stars_per_item)} Remaining ¥{remaining}"


def main(argv: Sequence[str] | None = None) -> int:
    sys.stdout.write(purchase_line("Apple", 120, MONEY, 1) + "\n")
    sys.stdout.write(purchase_line("Orange", 400, MONEY, 6) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
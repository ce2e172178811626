from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from bookstore.cart import ShoppingCart
from bookstore.models import CashDiscountCoupon, PercentageDiscountCoupon
from bookstore.services import BookstoreError, DiscountService, InventoryService
from bookstore.store import Store


def seed(store: Store) -> None:
    store.add_book("Effective Java", price=40, quantity=10)
    store.add_book("Clean Code", price=60, quantity=10)
    store.add_book("Head First Java", price=30, quantity=10)


def parse_line(value: str) -> Tuple[str, int]:
    """'Clean Code:3' -> ('Clean Code', 3); anything without a trailing integer is a title of one copy."""
    title, sep, qty = value.rpartition(":")
    if not sep or not title:
        return value, 1
    try:
        return title, int(qty)
    except ValueError:
        return value, 1


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Fill a cart from the seeded inventory and check it out.")
    p.add_argument("--add", type=parse_line, action="append", default=[], metavar="TITLE[:QTY]")
    coupon = p.add_mutually_exclusive_group()
    coupon.add_argument("--percent-coupon", type=int, default=None, help="Create and apply a percentage coupon")
    coupon.add_argument("--cash-coupon", type=int, default=None, help="Create and apply a flat cash coupon")
    p.add_argument("--valid-days", type=int, default=1, help="Coupon validity window starting now")
    args = p.parse_args(argv)

    store = Store()
    seed(store)
    discounts = DiscountService(store)
    cart = ShoppingCart(InventoryService(store), discounts)

    try:
        for title, qty in args.add:
            cart.add(title, qty)

        code = None
        start = datetime.now()
        end = start + timedelta(days=args.valid_days)
        if args.percent_coupon is not None:
            code = discounts.create(PercentageDiscountCoupon(args.percent_coupon, start, end))
        elif args.cash_coupon is not None:
            code = discounts.create(CashDiscountCoupon(args.cash_coupon, start, end))

        amount = cart.checkout(code)
    except (BookstoreError, ValueError) as e:
        print(f"error: {e}")
        return 1

    print("\n=== RESULT ===")
    print("items:", cart.items)
    print("amount:", amount)
    print("logs:", store.logs)
    return 0


if __name__ == "__main__":
    sys.exit(main())

from __future__ import annotations

import logging
from typing import Dict, List

from bookstore.models import Book, Coupon

logger = logging.getLogger(__name__)


class Store:
    """
    In-memory records behind the inventory and discount services.

    Holds only current state:
    - books by title
    - coupons by code
    - the list of log lines (for the CLI and tests)

    Carts are not stored here; each cart owns its own line items.
    """

    def __init__(self) -> None:
        self.books: Dict[str, Book] = {}
        self.coupons: Dict[str, Coupon] = {}

        self.logs: List[str] = []

    def log(self, message: str) -> None:
        self.logs.append(message)
        logger.info(message)

    # Seed helpers
    def add_book(self, title: str, price: int, quantity: int) -> None:
        self.books[title] = Book(title=title, price=price, quantity=quantity)

    def add_coupon(self, code: str, coupon: Coupon) -> None:
        self.coupons[code] = coupon

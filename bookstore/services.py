from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable, Optional

from bookstore.models import Book, Coupon
from bookstore.store import Store

COUPON_CODE_LENGTH = 8


class BookstoreError(Exception):
    pass


class BookNotFoundError(BookstoreError):
    def __init__(self, title: str):
        super().__init__(f"Sorry, '{title}' not in stock!!")
        self.title = title


class InsufficientStockError(BookstoreError):
    def __init__(self, title: str):
        super().__init__(f"There are not enough copies of '{title}' in the inventory.")
        self.title = title


class CouponNotFoundError(BookstoreError):
    def __init__(self, code: str):
        super().__init__(f"Coupon '{code}' does not exist.")
        self.code = code


class CouponExpiredError(BookstoreError):
    def __init__(self, code: str):
        super().__init__(f"Coupon '{code}' is not valid at this time.")
        self.code = code


class InventoryService:
    def __init__(self, store: Store):
        self.store = store

    def add(self, book: Book) -> None:
        self.store.books[book.title] = book
        self.store.log(f"inventory: added '{book.title}' price={book.price} quantity={book.quantity}")

    def find_by_title(self, title: str) -> Optional[Book]:
        return self.store.books.get(title)

    def decrement(self, title: str, quantity: int) -> None:
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValueError("quantity must be a positive int")
        book = self.store.books.get(title)
        if not book:
            raise BookNotFoundError(title)
        if book.quantity < quantity:
            raise InsufficientStockError(title)
        book.quantity -= quantity
        self.store.log(f"inventory: removed {quantity} of '{title}' (quantity={book.quantity})")


class DiscountService:
    def __init__(self, store: Store, clock: Optional[Callable[[], datetime]] = None):
        self.store = store
        self.clock = clock or datetime.now

    def _new_code(self) -> str:
        while True:
            code = uuid.uuid4().hex[:COUPON_CODE_LENGTH].upper()
            if code not in self.store.coupons:
                return code

    def create(self, coupon: Coupon) -> str:
        code = self._new_code()
        self.store.coupons[code] = coupon
        self.store.log(f"coupon created: {code} ({type(coupon).__name__})")
        return code

    def find_by_code(self, code: str) -> Coupon:
        coupon = self.store.coupons.get(code)
        if not coupon:
            raise CouponNotFoundError(code)
        if not coupon.is_valid_at(self.clock()):
            raise CouponExpiredError(code)
        return coupon

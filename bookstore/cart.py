from __future__ import annotations

import logging
import uuid
from typing import Dict, List, Optional, Protocol

from bookstore.models import Book, Coupon, LineItem
from bookstore.services import BookNotFoundError, BookstoreError, InsufficientStockError

logger = logging.getLogger(__name__)

# Payable amount after a coupon must stay >= 6/10 of the subtotal.
MIN_PAYABLE_NUMERATOR = 6
MIN_PAYABLE_DENOMINATOR = 10


class EmptyCartError(BookstoreError):
    def __init__(self) -> None:
        super().__init__("You can't checkout an empty cart!!")


class CouponNotApplicableError(BookstoreError):
    def __init__(self) -> None:
        super().__init__("This coupon is not applicable for this checkout amount.")


class Inventory(Protocol):
    def find_by_title(self, title: str) -> Optional[Book]: ...


class DiscountCatalog(Protocol):
    def find_by_code(self, code: str) -> Coupon: ...


class ShoppingCart:
    """
    Line items of one checkout session.

    Availability is checked against the inventory on every ``add``; prices are
    read from the inventory at checkout time. Checkout does not consume stock
    and does not modify the cart, so it can be repeated with another coupon.
    """

    def __init__(self, inventory: Inventory, discounts: DiscountCatalog, cart_id: Optional[str] = None):
        self.inventory = inventory
        self.discounts = discounts
        self.cart_id = cart_id or uuid.uuid4().hex[:8]
        self._lines: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def items(self) -> List[LineItem]:
        return [LineItem(title=title, quantity=qty) for title, qty in self._lines.items()]

    def quantity_of(self, title: str) -> int:
        return self._lines.get(title, 0)

    def _book(self, title: str) -> Book:
        book = self.inventory.find_by_title(title)
        if not book:
            raise BookNotFoundError(title)
        return book

    def add(self, title: str, quantity: int = 1) -> None:
        if not title:
            raise ValueError("title must not be empty")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValueError("quantity must be a positive int")

        book = self._book(title)
        wanted = self.quantity_of(title) + quantity
        if wanted > book.quantity:
            logger.warning(f"[cart={self.cart_id}] '{title}': wanted={wanted}, in stock={book.quantity}")
            raise InsufficientStockError(title)

        self._lines[title] = wanted
        logger.info(f"[cart={self.cart_id}] added '{title}' qty={quantity} (in cart={wanted})")

    def subtotal(self) -> int:
        return sum(self._book(title).price * qty for title, qty in self._lines.items())

    def checkout(self, coupon_code: Optional[str] = None) -> int:
        if self.is_empty:
            raise EmptyCartError()

        subtotal = self.subtotal()
        if coupon_code is None:
            logger.info(f"[cart={self.cart_id}] checkout: amount={subtotal}")
            return subtotal

        coupon = self.discounts.find_by_code(coupon_code)
        discount = coupon.compute_discount(subtotal)
        amount = subtotal - discount
        # Integer comparison: amount < 0.6 * subtotal
        if amount * MIN_PAYABLE_DENOMINATOR < subtotal * MIN_PAYABLE_NUMERATOR:
            logger.warning(
                f"[cart={self.cart_id}] coupon {coupon_code} rejected: subtotal={subtotal} discount={discount}"
            )
            raise CouponNotApplicableError()

        logger.info(
            f"[cart={self.cart_id}] checkout: subtotal={subtotal} coupon={coupon_code} "
            f"discount={discount} amount={amount}"
        )
        return amount

    def clear(self) -> None:
        self._lines.clear()
        logger.info(f"[cart={self.cart_id}] cleared")

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


def _check_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an int")


@dataclass(slots=True)
class Book:
    title: str
    price: int
    quantity: int

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("title must not be empty")
        _check_int("price", self.price)
        _check_int("quantity", self.quantity)
        if self.price < 0:
            raise ValueError("price must be >= 0")
        if self.quantity < 0:
            raise ValueError("quantity must be >= 0")


@dataclass(slots=True)
class LineItem:
    title: str
    quantity: int


class Coupon(Protocol):
    """
    Anything that can be stored in the discount service.

    A coupon is plain data plus one pure function: given the checkout subtotal
    it says how much to take off.
    """

    start: datetime
    end: datetime

    def compute_discount(self, amount: int) -> int: ...

    def is_valid_at(self, moment: datetime) -> bool: ...


def _check_window(start: datetime, end: datetime) -> None:
    if end < start:
        raise ValueError("coupon end must not be before its start")


@dataclass(slots=True, frozen=True)
class PercentageDiscountCoupon:
    percentage: int
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_int("percentage", self.percentage)
        if not 0 <= self.percentage <= 100:
            raise ValueError("percentage must be between 0 and 100")
        _check_window(self.start, self.end)

    def compute_discount(self, amount: int) -> int:
        return amount * self.percentage // 100

    def is_valid_at(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


@dataclass(slots=True, frozen=True)
class CashDiscountCoupon:
    amount: int
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        _check_int("amount", self.amount)
        if self.amount < 0:
            raise ValueError("amount must be >= 0")
        _check_window(self.start, self.end)

    def compute_discount(self, amount: int) -> int:
        # Flat amount, not capped by the subtotal.
        return self.amount

    def is_valid_at(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

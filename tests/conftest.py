"""Pytest fixtures for the bookstore checkout."""

from datetime import datetime, timedelta

import pytest

from bookstore.cart import ShoppingCart
from bookstore.models import CashDiscountCoupon, PercentageDiscountCoupon
from bookstore.services import DiscountService, InventoryService
from bookstore.store import Store

NOW = datetime(2024, 3, 1, 12, 0, 0)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def store() -> Store:
    store = Store()

    store.add_book("Effective Java", price=40, quantity=10)
    store.add_book("Clean Code", price=60, quantity=10)
    store.add_book("Head First Java", price=30, quantity=10)

    return store


@pytest.fixture
def inventory(store) -> InventoryService:
    return InventoryService(store)


@pytest.fixture
def discounts(store, now) -> DiscountService:
    return DiscountService(store, clock=lambda: now)


@pytest.fixture
def cart(inventory, discounts) -> ShoppingCart:
    return ShoppingCart(inventory, discounts, cart_id="test")


@pytest.fixture
def make_percentage_coupon(discounts, now):
    def make(percentage: int) -> str:
        return discounts.create(PercentageDiscountCoupon(percentage, now, now + timedelta(days=1)))

    return make


@pytest.fixture
def make_cash_coupon(discounts, now):
    def make(amount: int) -> str:
        return discounts.create(CashDiscountCoupon(amount, now, now + timedelta(days=1)))

    return make

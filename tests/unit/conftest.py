"""Shared fixtures for unit tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from nekoshop_cache.core.models import Order, OrderItem, OrderStatus, PaymentStatus, PurchaseInfo
from nekoshop_cache.monitoring.metrics import reset_all
from nekoshop_cache.storage.base import InMemoryStorage

T0 = datetime(2026, 10, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Manually advanced clock, passed to stores instead of sleeping."""

    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


def make_order(order_id: str = "ORD001", **overrides) -> Order:
    fields = dict(
        id=order_id,
        customer_contact="buyer@example.com",
        total_amount=19.9,
        status=OrderStatus.PENDING,
        created_at="2026-10-01T11:59:00.000Z",
        updated_at="2026-10-01T11:59:00.000Z",
        items=[OrderItem(product_id="P1", product_name="Neko Key", quantity=1, price=19.9, product_type="CARD_KEY")],
        payment_status=PaymentStatus.PENDING,
    )
    fields.update(overrides)
    return Order(**fields)


def make_purchase(order_id: str = "ORD001", **overrides) -> PurchaseInfo:
    fields = dict(
        order_id=order_id,
        customer_contact="123456@qq.com",
        query_password="pw-" + order_id,
        product_name="Neko Key",
        total_amount=10.0,
    )
    fields.update(overrides)
    return PurchaseInfo(**fields)


@pytest.fixture(autouse=True)
def _reset_metrics():
    reset_all()
    yield
    reset_all()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def sample_order():
    return make_order()


@pytest.fixture
def sample_purchase():
    return make_purchase()


@pytest.fixture
def order_factory():
    return make_order


@pytest.fixture
def purchase_factory():
    return make_purchase

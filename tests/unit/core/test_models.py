"""Unit tests for record models."""

import json
from datetime import datetime, timezone

import pytest

from nekoshop_cache.core.models import (
    CachedOrder,
    Order,
    OrderStatus,
    PaymentStatus,
    PurchaseInfo,
    PurchaseRecord,
)

BACKEND_ORDER = {
    "id": "ORD001",
    "customerContact": "123456@qq.com",
    "items": [
        {"productId": "P1", "productName": "Neko Key", "quantity": 2, "price": 5.5, "productType": "CARD_KEY"},
        {"productId": "P2", "productName": "Sticker", "quantity": 1, "price": 1},
    ],
    "totalAmount": 12,
    "status": "completed",
    "paymentStatus": "succeeded",
    "hasCardKeys": True,
    "createdAt": "2026-10-01T11:59:00.000Z",
    "updatedAt": "2026-10-01T12:01:00.000Z",
}


class TestOrderStatus:
    """Test status enums."""

    def test_values(self):
        assert OrderStatus.PENDING.value == "pending"
        assert OrderStatus.CANCELLED.value == "cancelled"
        assert PaymentStatus.REFUNDED.value == "refunded"

    def test_str_comparison(self):
        assert OrderStatus.COMPLETED == "completed"


class TestOrder:
    """Test Order snapshot (de)serialization."""

    def test_from_backend_payload(self):
        order = Order.from_dict(BACKEND_ORDER)

        assert order.id == "ORD001"
        assert order.status is OrderStatus.COMPLETED
        assert order.payment_status is PaymentStatus.SUCCEEDED
        assert order.has_card_keys is True
        assert len(order.items) == 2
        assert order.items[0].product_type == "CARD_KEY"
        assert order.items[1].product_type is None

    def test_round_trip_preserves_payload(self):
        assert Order.from_dict(BACKEND_ORDER).to_dict() == BACKEND_ORDER

    def test_unknown_fields_kept(self):
        payload = {**BACKEND_ORDER, "couponCode": "MEOW"}
        order = Order.from_dict(payload)
        assert order.extra == {"couponCode": "MEOW"}
        assert order.to_dict()["couponCode"] == "MEOW"

    def test_optional_fields_omitted(self):
        payload = {k: v for k, v in BACKEND_ORDER.items() if k not in ("paymentStatus", "hasCardKeys")}
        order = Order.from_dict(payload)
        assert order.payment_status is None
        assert "paymentStatus" not in order.to_dict()
        assert "hasCardKeys" not in order.to_dict()

    def test_missing_id_raises(self):
        payload = {k: v for k, v in BACKEND_ORDER.items() if k != "id"}
        with pytest.raises(KeyError):
            Order.from_dict(payload)

    def test_unknown_status_raises(self):
        with pytest.raises(ValueError):
            Order.from_dict({**BACKEND_ORDER, "status": "lost"})


class TestCachedOrder:
    """Test the order cache entry shape."""

    def test_to_dict_layout(self):
        entry = CachedOrder(
            order=Order.from_dict(BACKEND_ORDER),
            cached_at=datetime(2026, 10, 18, 8, 0, tzinfo=timezone.utc),
            query_password="c2VjcmV0MQ==",
        )
        data = entry.to_dict()
        assert set(data) == {"order", "cachedAt", "queryPassword"}
        assert data["cachedAt"] == "2026-10-18T08:00:00.000Z"
        assert CachedOrder.from_dict(json.loads(json.dumps(data))) == entry


class TestPurchaseRecord:
    """Test purchase records and the pre-timestamp info."""

    def test_stamp_adds_purchase_time(self):
        info = PurchaseInfo("ORD9", "buyer@example.com", "pw", "Neko Key", 9.9)
        when = datetime(2026, 10, 18, 8, 0, tzinfo=timezone.utc)
        record = info.stamp(when)

        assert isinstance(record, PurchaseRecord)
        assert record.purchase_time == when
        assert record.order_id == "ORD9"
        assert record.total_amount == 9.9

    def test_to_dict_layout(self):
        record = PurchaseRecord(
            order_id="ORD9",
            customer_contact="buyer@example.com",
            query_password="cHc=",
            product_name="Neko Key",
            total_amount=9.9,
            purchase_time=datetime(2026, 10, 18, 8, 0, tzinfo=timezone.utc),
        )
        assert record.to_dict() == {
            "orderId": "ORD9",
            "customerContact": "buyer@example.com",
            "queryPassword": "cHc=",
            "productName": "Neko Key",
            "totalAmount": 9.9,
            "purchaseTime": "2026-10-18T08:00:00.000Z",
        }
        assert PurchaseRecord.from_dict(record.to_dict()) == record

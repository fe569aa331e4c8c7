from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.common.money import Money
from kitchenpos.infrastructure.messaging.delivery_dispatcher import (
    DEFAULT_DELIVERY_CHANNEL,
    RedisDeliveryDispatcher,
    serialize_delivery_request,
)


class FakeRedis:
    def __init__(self, error: Exception | None = None) -> None:
        self.published: list[tuple[str, str]] = []
        self._error = error

    def publish(self, channel: str, message: str) -> int:
        if self._error is not None:
            raise self._error
        self.published.append((channel, message))
        return 1


def test_serialize_delivery_request_envelope() -> None:
    occurred_at = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    envelope = json.loads(
        serialize_delivery_request(
            order_id=OrderId("ord_001"),
            amount=Money(amount_cents=32000),
            address="12 Harbor Road",
            occurred_at=occurred_at,
        )
    )

    assert envelope["event_type"] == "delivery.requested"
    assert envelope["occurred_at"] == occurred_at.isoformat()
    assert envelope["payload"] == {
        "orderId": "ord_001",
        "amount": {"amountCents": 32000, "currency": "KRW"},
        "address": "12 Harbor Road",
    }


def test_dispatcher_publishes_to_configured_channel(monkeypatch) -> None:
    monkeypatch.delenv("DELIVERY_CHANNEL", raising=False)
    client = FakeRedis()
    timeouts: list[float] = []

    def factory(timeout_seconds: float) -> FakeRedis:
        timeouts.append(timeout_seconds)
        return client

    RedisDeliveryDispatcher(timeout_seconds=0.5, client_factory=factory).request_delivery(
        order_id=OrderId("ord_001"),
        amount=Money(amount_cents=32000),
        address="12 Harbor Road",
    )

    assert timeouts == [0.5]
    assert [channel for channel, _ in client.published] == [DEFAULT_DELIVERY_CHANNEL]
    assert json.loads(client.published[0][1])["payload"]["orderId"] == "ord_001"


def test_dispatcher_channel_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("DELIVERY_CHANNEL", "riders:test")
    client = FakeRedis()

    RedisDeliveryDispatcher(timeout_seconds=0.5, client_factory=lambda _: client).request_delivery(
        order_id=OrderId("ord_001"),
        amount=Money(amount_cents=1000),
        address="12 Harbor Road",
    )

    assert client.published[0][0] == "riders:test"


def test_dispatcher_propagates_publish_failures() -> None:
    client = FakeRedis(error=ConnectionError("redis down"))
    dispatcher = RedisDeliveryDispatcher(
        channel="riders:test",
        timeout_seconds=0.5,
        client_factory=lambda _: client,
    )

    with pytest.raises(ConnectionError):
        dispatcher.request_delivery(
            order_id=OrderId("ord_001"),
            amount=Money(amount_cents=1000),
            address="12 Harbor Road",
        )

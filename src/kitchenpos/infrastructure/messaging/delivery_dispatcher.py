from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Callable
from uuid import uuid4

import redis

from kitchenpos.application.ports.delivery import DeliveryDispatcher
from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.common.money import Money
from kitchenpos.infrastructure.messaging.redis_client import (
    delivery_timeout_seconds,
    get_redis_client,
)

DEFAULT_DELIVERY_CHANNEL = "kitchenriders:deliveries"

logger = logging.getLogger(__name__)


def delivery_channel() -> str:
    return os.getenv("DELIVERY_CHANNEL", DEFAULT_DELIVERY_CHANNEL)


def serialize_delivery_request(
    *,
    order_id: OrderId,
    amount: Money,
    address: str,
    occurred_at: datetime,
) -> str:
    envelope = {
        "event_id": str(uuid4()),
        "event_type": "delivery.requested",
        "occurred_at": occurred_at.isoformat(),
        "payload": {
            "orderId": str(order_id),
            "amount": {
                "amountCents": amount.amount_cents,
                "currency": amount.currency,
            },
            "address": address,
        },
    }
    return json.dumps(envelope, separators=(",", ":"), ensure_ascii=False)


class RedisDeliveryDispatcher(DeliveryDispatcher):
    """Asks the rider service for a pickup by publishing to its Redis channel.

    Publishing errors are not caught: the caller's accept fails with them.
    """

    def __init__(
        self,
        channel: str | None = None,
        timeout_seconds: float | None = None,
        client_factory: Callable[[float], redis.Redis] = get_redis_client,
    ) -> None:
        self._channel = channel or delivery_channel()
        self._timeout_seconds = (
            timeout_seconds if timeout_seconds is not None else delivery_timeout_seconds()
        )
        self._client_factory = client_factory

    def request_delivery(self, order_id: OrderId, amount: Money, address: str) -> None:
        message = serialize_delivery_request(
            order_id=order_id,
            amount=amount,
            address=address,
            occurred_at=datetime.now(timezone.utc),
        )
        receivers = self._client_factory(self._timeout_seconds).publish(self._channel, message)
        logger.info(
            "delivery_requested",
            extra={"order_id": str(order_id), "channel": self._channel, "receivers": receivers},
        )

from __future__ import annotations

from typing import Protocol

from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.common.money import Money


class DeliveryDispatcher(Protocol):
    def request_delivery(self, order_id: OrderId, amount: Money, address: str) -> None: ...

from __future__ import annotations

from datetime import datetime, timezone

from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.mappers.order_mapper import to_order_response
from kitchenpos.application.metrics.order_lifecycle import (
    record_delivery_requested,
    record_time_to_accept,
    record_transition,
)
from kitchenpos.application.ports.delivery import DeliveryDispatcher
from kitchenpos.application.ports.repositories import OrderRepository
from kitchenpos.application.use_cases.order_transitions import apply_transition, load_order
from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.order.entities import OrderTransition, OrderType


class AcceptOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        delivery_dispatcher: DeliveryDispatcher,
    ) -> None:
        self._order_repository = order_repository
        self._delivery_dispatcher = delivery_dispatcher

    def execute(self, order_id: OrderId) -> OrderResponse:
        order = load_order(self._order_repository, order_id)
        accepted_order = apply_transition(order, OrderTransition.ACCEPT)

        # Riders are requested before the status is stored; a failed request leaves it WAITING.
        if order.order_type == OrderType.DELIVERY:
            self._delivery_dispatcher.request_delivery(
                order_id=order.order_id,
                amount=order.total,
                address=order.delivery_address or "",
            )
            record_delivery_requested()

        self._order_repository.update(accepted_order)
        record_transition(accepted_order, from_status=order.status)
        record_time_to_accept(accepted_order, now=datetime.now(timezone.utc))
        return to_order_response(accepted_order)

from __future__ import annotations

from datetime import datetime, timezone

from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.mappers.order_mapper import to_order_response
from kitchenpos.application.metrics.order_lifecycle import (
    record_table_emptied,
    record_time_to_complete,
    record_transition,
)
from kitchenpos.application.ports.repositories import OrderRepository, TableRepository
from kitchenpos.application.use_cases.order_transitions import apply_transition, load_order
from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.order.entities import Order, OrderStatus, OrderTransition, OrderType


class CompleteOrder:
    def __init__(
        self,
        order_repository: OrderRepository,
        table_repository: TableRepository,
    ) -> None:
        self._order_repository = order_repository
        self._table_repository = table_repository

    def execute(self, order_id: OrderId) -> OrderResponse:
        order = load_order(self._order_repository, order_id)
        completed_order = apply_transition(order, OrderTransition.COMPLETE)

        self._order_repository.update(completed_order)
        record_transition(completed_order, from_status=order.status)
        record_time_to_complete(completed_order, now=datetime.now(timezone.utc))

        if completed_order.order_type == OrderType.DINE_IN:
            self._release_table(completed_order)

        return to_order_response(completed_order)

    def _release_table(self, order: Order) -> None:
        if order.table_id is None:
            return
        if self._order_repository.exists_for_tables(
            [order.table_id],
            excluding_status=OrderStatus.COMPLETED,
        ):
            return

        table = self._table_repository.get(order.table_id)
        if table is None:
            return
        self._table_repository.update(table.clear())
        record_table_emptied()

from __future__ import annotations

from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.mappers.order_mapper import to_order_response
from kitchenpos.application.ports.repositories import OrderRepository
from kitchenpos.application.use_cases.order_transitions import load_order
from kitchenpos.domain.common.ids import OrderId


class GetOrder:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId) -> OrderResponse:
        return to_order_response(load_order(self._order_repository, order_id))


class ListOrders:
    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self) -> list[OrderResponse]:
        return [to_order_response(order) for order in self._order_repository.list_all()]

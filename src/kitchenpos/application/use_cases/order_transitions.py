from __future__ import annotations

from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.errors import IllegalStateError, NotFoundError
from kitchenpos.application.mappers.order_mapper import to_order_response
from kitchenpos.application.metrics.order_lifecycle import record_transition
from kitchenpos.application.ports.repositories import OrderRepository
from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.order.entities import Order, OrderTransition, OrderTransitionError


class OrderNotFoundError(NotFoundError):
    pass


class InvalidOrderTransitionError(IllegalStateError):
    pass


def load_order(order_repository: OrderRepository, order_id: OrderId) -> Order:
    order = order_repository.get(order_id)
    if order is None:
        raise OrderNotFoundError(f"order {order_id} not found")
    return order


def apply_transition(order: Order, transition: OrderTransition) -> Order:
    try:
        return order.transition(transition)
    except OrderTransitionError as exc:
        raise InvalidOrderTransitionError(str(exc)) from exc


class ChangeOrderStatus:
    """Moves an order along a single edge with no side effects beyond persisting it."""

    transition: OrderTransition

    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, order_id: OrderId) -> OrderResponse:
        order = load_order(self._order_repository, order_id)
        updated = apply_transition(order, self.transition)
        self._order_repository.update(updated)
        record_transition(updated, from_status=order.status)
        return to_order_response(updated)


class ServeOrder(ChangeOrderStatus):
    transition = OrderTransition.SERVE


class StartDelivery(ChangeOrderStatus):
    transition = OrderTransition.START_DELIVERY


class CompleteDelivery(ChangeOrderStatus):
    transition = OrderTransition.COMPLETE_DELIVERY

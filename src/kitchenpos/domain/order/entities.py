from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from kitchenpos.domain.common.ids import MenuId, OrderId, OrderLineId, OrderTableId
from kitchenpos.domain.common.money import Money, zero


class OrderType(str, Enum):
    DINE_IN = "DINE_IN"
    TAKEOUT = "TAKEOUT"
    DELIVERY = "DELIVERY"


class OrderStatus(str, Enum):
    WAITING = "WAITING"
    ACCEPTED = "ACCEPTED"
    SERVED = "SERVED"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"
    COMPLETED = "COMPLETED"


class OrderTransition(str, Enum):
    ACCEPT = "ACCEPT"
    SERVE = "SERVE"
    START_DELIVERY = "START_DELIVERY"
    COMPLETE_DELIVERY = "COMPLETE_DELIVERY"
    COMPLETE = "COMPLETE"


_ALL_TYPES = frozenset(OrderType)
_DELIVERY_ONLY = frozenset({OrderType.DELIVERY})
_NOT_DELIVERY = frozenset({OrderType.DINE_IN, OrderType.TAKEOUT})

# (transition, current status) -> (next status, order types allowed to take the edge)
TRANSITIONS: dict[tuple[OrderTransition, OrderStatus], tuple[OrderStatus, frozenset[OrderType]]] = {
    (OrderTransition.ACCEPT, OrderStatus.WAITING): (OrderStatus.ACCEPTED, _ALL_TYPES),
    (OrderTransition.SERVE, OrderStatus.ACCEPTED): (OrderStatus.SERVED, _ALL_TYPES),
    (OrderTransition.START_DELIVERY, OrderStatus.SERVED): (OrderStatus.DELIVERING, _DELIVERY_ONLY),
    (OrderTransition.COMPLETE_DELIVERY, OrderStatus.DELIVERING): (
        OrderStatus.DELIVERED,
        _DELIVERY_ONLY,
    ),
    (OrderTransition.COMPLETE, OrderStatus.SERVED): (OrderStatus.COMPLETED, _NOT_DELIVERY),
    (OrderTransition.COMPLETE, OrderStatus.DELIVERED): (OrderStatus.COMPLETED, _DELIVERY_ONLY),
}

DELIVERY_TRANSITIONS = frozenset({OrderTransition.START_DELIVERY, OrderTransition.COMPLETE_DELIVERY})


@dataclass(frozen=True)
class OrderLineItem:
    line_id: OrderLineId
    menu_id: MenuId
    quantity: int
    price: Money

    @property
    def amount(self) -> Money:
        return self.price.times(self.quantity)


@dataclass(frozen=True)
class Order:
    order_id: OrderId
    order_type: OrderType
    status: OrderStatus
    lines: list[OrderLineItem]
    created_at: datetime
    table_id: OrderTableId | None = None
    delivery_address: str | None = None

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("order must contain at least one line item")
        if self.order_type == OrderType.DINE_IN and self.table_id is None:
            raise ValueError("dine-in order must reference a table")
        if self.order_type == OrderType.DELIVERY and not (self.delivery_address or "").strip():
            raise ValueError("delivery order must have a delivery address")

    @property
    def total(self) -> Money:
        total = zero(self.lines[0].price.currency)
        for line in self.lines:
            total = total.plus(line.amount)
        return total

    def transition(self, requested: OrderTransition) -> Order:
        """Return a copy of the order moved along ``requested``.

        Delivery-only transitions are rejected for other order types before the
        current status is considered, so a dine-in order asked to start delivery
        fails on its type whatever its status.
        """
        if requested in DELIVERY_TRANSITIONS and self.order_type != OrderType.DELIVERY:
            raise OrderTransitionError(
                f"cannot {requested.value.lower()} a {self.order_type.value} order"
            )
        edge = TRANSITIONS.get((requested, self.status))
        if edge is None or self.order_type not in edge[1]:
            raise OrderTransitionError(
                f"cannot {requested.value.lower()} {self.order_type.value} order "
                f"from status={self.status.value}"
            )
        return replace(self, status=edge[0])

    def accept(self) -> Order:
        return self.transition(OrderTransition.ACCEPT)

    def serve(self) -> Order:
        return self.transition(OrderTransition.SERVE)

    def start_delivery(self) -> Order:
        return self.transition(OrderTransition.START_DELIVERY)

    def complete_delivery(self) -> Order:
        return self.transition(OrderTransition.COMPLETE_DELIVERY)

    def complete(self) -> Order:
        return self.transition(OrderTransition.COMPLETE)


def create_waiting_order(
    order_id: OrderId,
    order_type: OrderType,
    lines: list[OrderLineItem],
    now: datetime,
    table_id: OrderTableId | None = None,
    delivery_address: str | None = None,
) -> Order:
    if not lines:
        raise ValueError("order must contain at least one line item")

    return Order(
        order_id=order_id,
        order_type=order_type,
        status=OrderStatus.WAITING,
        lines=lines,
        created_at=now,
        table_id=table_id if order_type == OrderType.DINE_IN else None,
        delivery_address=delivery_address if order_type == OrderType.DELIVERY else None,
    )


class OrderTransitionError(Exception):
    pass

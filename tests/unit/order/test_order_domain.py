from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from kitchenpos.domain.common.ids import MenuId, OrderId, OrderLineId, OrderTableId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.order.entities import (
    TRANSITIONS,
    Order,
    OrderLineItem,
    OrderStatus,
    OrderTransition,
    OrderTransitionError,
    OrderType,
    create_waiting_order,
)


def _line(quantity: int = 1, amount_cents: int = 16000) -> OrderLineItem:
    return OrderLineItem(
        line_id=OrderLineId("orl_001"),
        menu_id=MenuId("mnu_001"),
        quantity=quantity,
        price=Money(amount_cents=amount_cents),
    )


def _order(order_type: OrderType, status: OrderStatus = OrderStatus.WAITING) -> Order:
    return Order(
        order_id=OrderId("ord_001"),
        order_type=order_type,
        status=status,
        lines=[_line()],
        created_at=datetime.now(timezone.utc),
        table_id=OrderTableId("tbl_001") if order_type == OrderType.DINE_IN else None,
        delivery_address="12 Harbor Road" if order_type == OrderType.DELIVERY else None,
    )


def test_order_requires_line_items() -> None:
    with pytest.raises(ValueError):
        Order(
            order_id=OrderId("ord_001"),
            order_type=OrderType.TAKEOUT,
            status=OrderStatus.WAITING,
            lines=[],
            created_at=datetime.now(timezone.utc),
        )


def test_dine_in_order_requires_table() -> None:
    with pytest.raises(ValueError):
        Order(
            order_id=OrderId("ord_001"),
            order_type=OrderType.DINE_IN,
            status=OrderStatus.WAITING,
            lines=[_line()],
            created_at=datetime.now(timezone.utc),
        )


def test_delivery_order_requires_address() -> None:
    with pytest.raises(ValueError):
        Order(
            order_id=OrderId("ord_001"),
            order_type=OrderType.DELIVERY,
            status=OrderStatus.WAITING,
            lines=[_line()],
            created_at=datetime.now(timezone.utc),
            delivery_address="   ",
        )


def test_create_waiting_order_drops_fields_foreign_to_its_type() -> None:
    order = create_waiting_order(
        order_id=OrderId("ord_001"),
        order_type=OrderType.TAKEOUT,
        lines=[_line()],
        now=datetime.now(timezone.utc),
        table_id=OrderTableId("tbl_001"),
        delivery_address="12 Harbor Road",
    )

    assert order.status == OrderStatus.WAITING
    assert order.table_id is None
    assert order.delivery_address is None


def test_total_sums_price_times_quantity() -> None:
    order = Order(
        order_id=OrderId("ord_001"),
        order_type=OrderType.TAKEOUT,
        status=OrderStatus.WAITING,
        lines=[_line(quantity=2, amount_cents=16000), _line(quantity=1, amount_cents=1000)],
        created_at=datetime.now(timezone.utc),
    )

    assert order.total == Money(amount_cents=33000)


@pytest.mark.parametrize(
    ("order_type", "steps", "expected"),
    [
        (
            OrderType.DINE_IN,
            ["accept", "serve", "complete"],
            [OrderStatus.ACCEPTED, OrderStatus.SERVED, OrderStatus.COMPLETED],
        ),
        (
            OrderType.TAKEOUT,
            ["accept", "serve", "complete"],
            [OrderStatus.ACCEPTED, OrderStatus.SERVED, OrderStatus.COMPLETED],
        ),
        (
            OrderType.DELIVERY,
            ["accept", "serve", "start_delivery", "complete_delivery", "complete"],
            [
                OrderStatus.ACCEPTED,
                OrderStatus.SERVED,
                OrderStatus.DELIVERING,
                OrderStatus.DELIVERED,
                OrderStatus.COMPLETED,
            ],
        ),
    ],
)
def test_happy_path_per_order_type(
    order_type: OrderType,
    steps: list[str],
    expected: list[OrderStatus],
) -> None:
    order = _order(order_type)
    seen = []
    for step in steps:
        order = getattr(order, step)()
        seen.append(order.status)

    assert seen == expected


def test_transition_returns_copy_and_keeps_original() -> None:
    order = _order(OrderType.TAKEOUT)

    accepted = order.accept()

    assert order.status == OrderStatus.WAITING
    assert accepted.status == OrderStatus.ACCEPTED
    assert accepted.order_id == order.order_id


@pytest.mark.parametrize("status", [s for s in OrderStatus if s != OrderStatus.WAITING])
def test_accept_only_from_waiting(status: OrderStatus) -> None:
    with pytest.raises(OrderTransitionError):
        _order(OrderType.TAKEOUT, status).accept()


def test_delivery_order_cannot_complete_from_served() -> None:
    with pytest.raises(OrderTransitionError):
        _order(OrderType.DELIVERY, OrderStatus.SERVED).complete()


@pytest.mark.parametrize("order_type", [OrderType.DINE_IN, OrderType.TAKEOUT])
@pytest.mark.parametrize("status", list(OrderStatus))
def test_delivery_steps_rejected_for_other_types_in_any_status(
    order_type: OrderType,
    status: OrderStatus,
) -> None:
    order = _order(order_type, status)

    with pytest.raises(OrderTransitionError, match=order_type.value):
        order.start_delivery()
    with pytest.raises(OrderTransitionError, match=order_type.value):
        order.complete_delivery()


def test_completed_is_terminal() -> None:
    for order_type in OrderType:
        order = _order(order_type, OrderStatus.COMPLETED)
        for transition in OrderTransition:
            with pytest.raises(OrderTransitionError):
                order.transition(transition)


def test_transition_table_reaches_every_status_except_waiting() -> None:
    targets = {edge[0] for edge in TRANSITIONS.values()}

    assert targets == set(OrderStatus) - {OrderStatus.WAITING}
    assert all(status != OrderStatus.COMPLETED for _, status in TRANSITIONS)

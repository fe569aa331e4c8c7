from __future__ import annotations

from datetime import datetime, timezone

from prometheus_client import Counter, Histogram

from kitchenpos.domain.order.entities import Order, OrderStatus

ORDERS_CREATED_TOTAL = Counter(
    "kitchenpos_orders_created_total",
    "Total number of orders created by type.",
    ["order_type"],
)

ORDER_TRANSITION_TOTAL = Counter(
    "kitchenpos_order_transition_total",
    "Total number of order lifecycle transitions.",
    ["order_type", "from", "to"],
)

ORDER_TIME_TO_ACCEPT_SECONDS = Histogram(
    "kitchenpos_order_time_to_accept_seconds",
    "Time between order creation and acceptance.",
)

ORDER_TIME_TO_COMPLETE_SECONDS = Histogram(
    "kitchenpos_order_time_to_complete_seconds",
    "Time between order creation and completion.",
    ["order_type"],
)

DELIVERY_REQUESTS_TOTAL = Counter(
    "kitchenpos_delivery_requests_total",
    "Total number of rider dispatch requests sent for accepted delivery orders.",
)

TABLES_EMPTIED_TOTAL = Counter(
    "kitchenpos_tables_emptied_total",
    "Total number of tables reset to empty after their last order completed.",
)

TABLE_GROUPS_CREATED_TOTAL = Counter(
    "kitchenpos_table_groups_created_total",
    "Total number of table groups created.",
)

TABLE_GROUPS_UNGROUPED_TOTAL = Counter(
    "kitchenpos_table_groups_ungrouped_total",
    "Total number of table groups ungrouped.",
)

TABLE_UNGROUP_BLOCKED_TOTAL = Counter(
    "kitchenpos_table_ungroup_blocked_total",
    "Total number of blocked table group deletions.",
    ["reason"],
)


def record_order_created(order: Order) -> None:
    ORDERS_CREATED_TOTAL.labels(order_type=order.order_type.value).inc()


def record_transition(order: Order, from_status: OrderStatus) -> None:
    ORDER_TRANSITION_TOTAL.labels(
        **{
            "order_type": order.order_type.value,
            "from": from_status.value,
            "to": order.status.value,
        }
    ).inc()


def record_time_to_accept(order: Order, now: datetime | None = None) -> None:
    current = now or datetime.now(timezone.utc)
    ORDER_TIME_TO_ACCEPT_SECONDS.observe(_elapsed_seconds(order, current))


def record_time_to_complete(order: Order, now: datetime | None = None) -> None:
    current = now or datetime.now(timezone.utc)
    ORDER_TIME_TO_COMPLETE_SECONDS.labels(order_type=order.order_type.value).observe(
        _elapsed_seconds(order, current)
    )


def record_delivery_requested() -> None:
    DELIVERY_REQUESTS_TOTAL.inc()


def record_table_emptied() -> None:
    TABLES_EMPTIED_TOTAL.inc()


def record_table_group_created() -> None:
    TABLE_GROUPS_CREATED_TOTAL.inc()


def record_table_group_ungrouped() -> None:
    TABLE_GROUPS_UNGROUPED_TOTAL.inc()


def record_table_ungroup_blocked(reason: str) -> None:
    TABLE_UNGROUP_BLOCKED_TOTAL.labels(reason=reason).inc()


def _elapsed_seconds(order: Order, now: datetime) -> float:
    created_at = order.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return max((now - created_at).total_seconds(), 0.0)

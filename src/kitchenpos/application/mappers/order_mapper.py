from __future__ import annotations

from kitchenpos.application.dto.responses import OrderLineItemResponse, OrderResponse
from kitchenpos.application.mappers.menu_mapper import to_money_response
from kitchenpos.domain.order.entities import Order


def to_order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        orderId=str(order.order_id),
        type=order.order_type.value,
        status=order.status.value,
        orderLineItems=[
            OrderLineItemResponse(
                lineId=str(line.line_id),
                menuId=str(line.menu_id),
                quantity=line.quantity,
                price=to_money_response(line.price),
                amount=to_money_response(line.amount),
            )
            for line in order.lines
        ],
        total=to_money_response(order.total),
        orderTableId=str(order.table_id) if order.table_id is not None else None,
        deliveryAddress=order.delivery_address,
        createdAt=order.created_at,
    )

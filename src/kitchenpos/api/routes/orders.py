from __future__ import annotations

from fastapi import APIRouter, Depends, status

from kitchenpos.api.dependencies import (
    get_delivery_dispatcher,
    get_menu_repository,
    get_order_repository,
    get_table_repository,
)
from kitchenpos.application.dto.requests import PlaceOrderRequest
from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.ports.delivery import DeliveryDispatcher
from kitchenpos.application.ports.repositories import (
    MenuRepository,
    OrderRepository,
    TableRepository,
)
from kitchenpos.application.use_cases.accept_order import AcceptOrder
from kitchenpos.application.use_cases.complete_order import CompleteOrder
from kitchenpos.application.use_cases.get_order import GetOrder, ListOrders
from kitchenpos.application.use_cases.order_transitions import (
    CompleteDelivery,
    ServeOrder,
    StartDelivery,
)
from kitchenpos.application.use_cases.place_order import PlaceOrder
from kitchenpos.domain.common.ids import OrderId

router = APIRouter()


@router.post("/v1/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
def place_order(
    request_dto: PlaceOrderRequest,
    menu_repository: MenuRepository = Depends(get_menu_repository),
    table_repository: TableRepository = Depends(get_table_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return PlaceOrder(
        menu_repository=menu_repository,
        table_repository=table_repository,
        order_repository=order_repository,
    ).execute(request_dto)


@router.get("/v1/orders", response_model=list[OrderResponse])
def list_orders(
    order_repository: OrderRepository = Depends(get_order_repository),
) -> list[OrderResponse]:
    return ListOrders(order_repository=order_repository).execute()


@router.get("/v1/orders/{order_id}", response_model=OrderResponse)
def get_order(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return GetOrder(order_repository=order_repository).execute(OrderId(order_id))


@router.post("/v1/orders/{order_id}/accept", response_model=OrderResponse)
def accept_order(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
    delivery_dispatcher: DeliveryDispatcher = Depends(get_delivery_dispatcher),
) -> OrderResponse:
    return AcceptOrder(
        order_repository=order_repository,
        delivery_dispatcher=delivery_dispatcher,
    ).execute(OrderId(order_id))


@router.post("/v1/orders/{order_id}/serve", response_model=OrderResponse)
def serve_order(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return ServeOrder(order_repository=order_repository).execute(OrderId(order_id))


@router.post("/v1/orders/{order_id}/start-delivery", response_model=OrderResponse)
def start_delivery(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return StartDelivery(order_repository=order_repository).execute(OrderId(order_id))


@router.post("/v1/orders/{order_id}/complete-delivery", response_model=OrderResponse)
def complete_delivery(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return CompleteDelivery(order_repository=order_repository).execute(OrderId(order_id))


@router.post("/v1/orders/{order_id}/complete", response_model=OrderResponse)
def complete_order(
    order_id: str,
    order_repository: OrderRepository = Depends(get_order_repository),
    table_repository: TableRepository = Depends(get_table_repository),
) -> OrderResponse:
    return CompleteOrder(
        order_repository=order_repository,
        table_repository=table_repository,
    ).execute(OrderId(order_id))

from __future__ import annotations

from datetime import datetime, timezone

from kitchenpos.application.dto.requests import OrderLineItemRequest, PlaceOrderRequest
from kitchenpos.application.dto.responses import OrderResponse
from kitchenpos.application.errors import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.application.mappers.order_mapper import to_order_response
from kitchenpos.application.metrics.order_lifecycle import record_order_created
from kitchenpos.application.ports.repositories import (
    MenuRepository,
    OrderRepository,
    TableRepository,
)
from kitchenpos.domain.common.ids import MenuId, OrderId, OrderLineId, OrderTableId, new_id
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu
from kitchenpos.domain.order.entities import OrderLineItem, OrderType, create_waiting_order


class InvalidOrderTypeError(InvalidArgumentError):
    pass


class EmptyOrderLineItemsError(InvalidArgumentError):
    pass


class OrderMenuMismatchError(InvalidArgumentError):
    pass


class InvalidOrderQuantityError(InvalidArgumentError):
    pass


class MenuNotDisplayedError(InvalidArgumentError):
    pass


class OrderPriceMismatchError(InvalidArgumentError):
    pass


class MissingDeliveryAddressError(InvalidArgumentError):
    pass


class TableNotFoundError(NotFoundError):
    pass


class EmptyTableOrderError(IllegalStateError):
    pass


class PlaceOrder:
    def __init__(
        self,
        menu_repository: MenuRepository,
        table_repository: TableRepository,
        order_repository: OrderRepository,
    ) -> None:
        self._menu_repository = menu_repository
        self._table_repository = table_repository
        self._order_repository = order_repository

    def execute(self, request_dto: PlaceOrderRequest) -> OrderResponse:
        order_type = _parse_order_type(request_dto.order_type)

        request_lines = request_dto.order_line_items
        if not request_lines:
            raise EmptyOrderLineItemsError("order line items must not be empty")

        menu_ids = {MenuId(line.menu_id) for line in request_lines}
        menus = {menu.menu_id: menu for menu in self._menu_repository.get_many(menu_ids)}
        if len(menus) != len(request_lines):
            raise OrderMenuMismatchError(
                f"order references {len(request_lines)} line items "
                f"but {len(menus)} distinct known menus"
            )

        # Dine-in orders keep accepting zero and negative quantities.
        if order_type != OrderType.DINE_IN:
            for request_line in request_lines:
                if request_line.quantity < 1:
                    raise InvalidOrderQuantityError("quantity must be >= 1")

        order_lines = [self._to_line_item(request_line, menus) for request_line in request_lines]
        currencies = {line.price.currency for line in order_lines}
        if len(currencies) > 1:
            raise OrderPriceMismatchError(
                f"order line items mix currencies: {', '.join(sorted(currencies))}"
            )

        delivery_address = request_dto.delivery_address
        if order_type == OrderType.DELIVERY and not (delivery_address or "").strip():
            raise MissingDeliveryAddressError("delivery order requires a delivery address")

        table_id: OrderTableId | None = None
        if order_type == OrderType.DINE_IN:
            table_id = OrderTableId(request_dto.order_table_id or "")
            table = self._table_repository.get(table_id)
            if table is None:
                raise TableNotFoundError(f"order table {request_dto.order_table_id} not found")
            if table.empty:
                raise EmptyTableOrderError(f"order table {table_id} is empty")

        order = create_waiting_order(
            order_id=OrderId(new_id("ord")),
            order_type=order_type,
            lines=order_lines,
            now=datetime.now(timezone.utc),
            table_id=table_id,
            delivery_address=delivery_address,
        )
        self._order_repository.add(order)
        record_order_created(order)
        return to_order_response(order)

    def _to_line_item(
        self,
        request_line: OrderLineItemRequest,
        menus: dict[MenuId, Menu],
    ) -> OrderLineItem:
        menu = menus.get(MenuId(request_line.menu_id))
        if menu is None:
            raise OrderMenuMismatchError(f"menu {request_line.menu_id} not found")
        if not menu.displayed:
            raise MenuNotDisplayedError(f"menu {request_line.menu_id} is not displayed")

        requested_price = _to_money(request_line)
        if requested_price != menu.price:
            raise OrderPriceMismatchError(
                f"price {requested_price.amount_cents} {requested_price.currency} does not "
                f"match menu {menu.menu_id} price {menu.price.amount_cents} {menu.price.currency}"
            )

        return OrderLineItem(
            line_id=OrderLineId(new_id("orl")),
            menu_id=menu.menu_id,
            quantity=request_line.quantity,
            price=menu.price,
        )


def _parse_order_type(value: str | None) -> OrderType:
    if value is None:
        raise InvalidOrderTypeError("order type is required")
    try:
        return OrderType(value.upper())
    except ValueError as exc:
        raise InvalidOrderTypeError(f"unknown order type: {value}") from exc


def _to_money(request_line: OrderLineItemRequest) -> Money:
    try:
        return Money(
            amount_cents=request_line.price.amount_cents,
            currency=request_line.price.currency,
        )
    except ValueError as exc:
        raise OrderPriceMismatchError(str(exc)) from exc

from __future__ import annotations

from kitchenpos.application.dto.requests import (
    ChangeNumberOfGuestsRequest,
    CreateOrderTableRequest,
)
from kitchenpos.application.dto.responses import OrderTableResponse
from kitchenpos.application.errors import IllegalStateError, InvalidArgumentError, NotFoundError
from kitchenpos.application.mappers.table_mapper import to_table_response
from kitchenpos.application.ports.repositories import OrderRepository, TableRepository
from kitchenpos.domain.common.ids import OrderTableId, new_id
from kitchenpos.domain.order.entities import OrderStatus
from kitchenpos.domain.table.entities import OrderTable, TableEmptyError


class OrderTableNotFoundError(NotFoundError):
    pass


class InvalidTableNameError(InvalidArgumentError):
    pass


class InvalidNumberOfGuestsError(InvalidArgumentError):
    pass


class TableInGroupError(InvalidArgumentError):
    pass


class TableHasActiveOrdersError(InvalidArgumentError):
    pass


class EmptyTableGuestsError(IllegalStateError):
    pass


def _load_table(table_repository: TableRepository, table_id: OrderTableId) -> OrderTable:
    table = table_repository.get(table_id)
    if table is None:
        raise OrderTableNotFoundError(f"order table {table_id} not found")
    return table


def _validate_guests(number_of_guests: int) -> None:
    if number_of_guests < 0:
        raise InvalidNumberOfGuestsError("number of guests must be >= 0")


class CreateOrderTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self, request_dto: CreateOrderTableRequest) -> OrderTableResponse:
        if not request_dto.name.strip():
            raise InvalidTableNameError("order table name must be non-empty")
        table = OrderTable(
            table_id=OrderTableId(new_id("tbl")),
            name=request_dto.name,
            empty=True,
            number_of_guests=0,
        )
        self._table_repository.add(table)
        return to_table_response(table)


class ListOrderTables:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(self) -> list[OrderTableResponse]:
        return [to_table_response(table) for table in self._table_repository.list_all()]


class SitTable:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(
        self,
        table_id: OrderTableId,
        request_dto: ChangeNumberOfGuestsRequest,
    ) -> OrderTableResponse:
        _validate_guests(request_dto.number_of_guests)
        table = _load_table(self._table_repository, table_id)
        seated = table.sit(request_dto.number_of_guests)
        self._table_repository.update(seated)
        return to_table_response(seated)


class ChangeNumberOfGuests:
    def __init__(self, table_repository: TableRepository) -> None:
        self._table_repository = table_repository

    def execute(
        self,
        table_id: OrderTableId,
        request_dto: ChangeNumberOfGuestsRequest,
    ) -> OrderTableResponse:
        _validate_guests(request_dto.number_of_guests)
        table = _load_table(self._table_repository, table_id)
        try:
            updated = table.change_number_of_guests(request_dto.number_of_guests)
        except TableEmptyError as exc:
            raise EmptyTableGuestsError(str(exc)) from exc
        self._table_repository.update(updated)
        return to_table_response(updated)


class ClearTable:
    def __init__(
        self,
        table_repository: TableRepository,
        order_repository: OrderRepository,
    ) -> None:
        self._table_repository = table_repository
        self._order_repository = order_repository

    def execute(self, table_id: OrderTableId) -> OrderTableResponse:
        table = _load_table(self._table_repository, table_id)
        if table.grouped:
            raise TableInGroupError(
                f"order table {table_id} belongs to table group {table.table_group_id}"
            )
        if self._order_repository.exists_for_tables(
            [table_id],
            excluding_status=OrderStatus.COMPLETED,
        ):
            raise TableHasActiveOrdersError(f"order table {table_id} has orders in progress")

        cleared = table.clear()
        self._table_repository.update(cleared)
        return to_table_response(cleared)

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from kitchenpos.api.dependencies import (
    get_order_repository,
    get_table_group_repository,
    get_table_repository,
    ungroup_resets_empty,
)
from kitchenpos.application.dto.requests import (
    ChangeNumberOfGuestsRequest,
    CreateOrderTableRequest,
    CreateTableGroupRequest,
)
from kitchenpos.application.dto.responses import OrderTableResponse, TableGroupResponse
from kitchenpos.application.ports.repositories import (
    OrderRepository,
    TableGroupRepository,
    TableRepository,
)
from kitchenpos.application.use_cases.order_tables import (
    ChangeNumberOfGuests,
    ClearTable,
    CreateOrderTable,
    ListOrderTables,
    SitTable,
)
from kitchenpos.application.use_cases.table_groups import CreateTableGroup, DeleteTableGroup
from kitchenpos.domain.common.ids import OrderTableId, TableGroupId

router = APIRouter()


@router.post(
    "/v1/tables",
    response_model=OrderTableResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_table(
    request_dto: CreateOrderTableRequest,
    table_repository: TableRepository = Depends(get_table_repository),
) -> OrderTableResponse:
    return CreateOrderTable(table_repository=table_repository).execute(request_dto)


@router.get("/v1/tables", response_model=list[OrderTableResponse])
def list_tables(
    table_repository: TableRepository = Depends(get_table_repository),
) -> list[OrderTableResponse]:
    return ListOrderTables(table_repository=table_repository).execute()


@router.post("/v1/tables/{table_id}/sit", response_model=OrderTableResponse)
def sit_table(
    table_id: str,
    request_dto: ChangeNumberOfGuestsRequest,
    table_repository: TableRepository = Depends(get_table_repository),
) -> OrderTableResponse:
    return SitTable(table_repository=table_repository).execute(
        table_id=OrderTableId(table_id),
        request_dto=request_dto,
    )


@router.put("/v1/tables/{table_id}/guests", response_model=OrderTableResponse)
def change_number_of_guests(
    table_id: str,
    request_dto: ChangeNumberOfGuestsRequest,
    table_repository: TableRepository = Depends(get_table_repository),
) -> OrderTableResponse:
    return ChangeNumberOfGuests(table_repository=table_repository).execute(
        table_id=OrderTableId(table_id),
        request_dto=request_dto,
    )


@router.post("/v1/tables/{table_id}/clear", response_model=OrderTableResponse)
def clear_table(
    table_id: str,
    table_repository: TableRepository = Depends(get_table_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
) -> OrderTableResponse:
    return ClearTable(
        table_repository=table_repository,
        order_repository=order_repository,
    ).execute(OrderTableId(table_id))


@router.post(
    "/v1/table-groups",
    response_model=TableGroupResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_table_group(
    request_dto: CreateTableGroupRequest,
    table_repository: TableRepository = Depends(get_table_repository),
    table_group_repository: TableGroupRepository = Depends(get_table_group_repository),
) -> TableGroupResponse:
    return CreateTableGroup(
        table_repository=table_repository,
        table_group_repository=table_group_repository,
    ).execute(request_dto)


@router.delete("/v1/table-groups/{table_group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_table_group(
    table_group_id: str,
    table_repository: TableRepository = Depends(get_table_repository),
    table_group_repository: TableGroupRepository = Depends(get_table_group_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
    reset_empty: bool = Depends(ungroup_resets_empty),
) -> Response:
    DeleteTableGroup(
        table_repository=table_repository,
        table_group_repository=table_group_repository,
        order_repository=order_repository,
        reset_empty=reset_empty,
    ).execute(TableGroupId(table_group_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from kitchenpos.application.dto.responses import OrderTableResponse, TableGroupResponse
from kitchenpos.domain.table.entities import OrderTable, TableGroup


def to_table_response(table: OrderTable) -> OrderTableResponse:
    return OrderTableResponse(
        orderTableId=str(table.table_id),
        name=table.name,
        empty=table.empty,
        numberOfGuests=table.number_of_guests,
        tableGroupId=str(table.table_group_id) if table.table_group_id is not None else None,
    )


def to_table_group_response(
    table_group: TableGroup,
    tables: list[OrderTable],
) -> TableGroupResponse:
    return TableGroupResponse(
        tableGroupId=str(table_group.table_group_id),
        createdAt=table_group.created_at,
        orderTables=[to_table_response(table) for table in tables],
    )

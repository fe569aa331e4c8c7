from __future__ import annotations

from datetime import datetime, timezone

from kitchenpos.application.dto.requests import CreateTableGroupRequest
from kitchenpos.application.dto.responses import TableGroupResponse
from kitchenpos.application.errors import InvalidArgumentError, NotFoundError
from kitchenpos.application.mappers.table_mapper import to_table_group_response
from kitchenpos.application.metrics.order_lifecycle import (
    record_table_group_created,
    record_table_group_ungrouped,
    record_table_ungroup_blocked,
)
from kitchenpos.application.ports.repositories import (
    OrderRepository,
    TableGroupRepository,
    TableRepository,
)
from kitchenpos.domain.common.ids import OrderTableId, TableGroupId, new_id
from kitchenpos.domain.order.entities import OrderStatus
from kitchenpos.domain.table.entities import TableGroup


class TableGroupSizeError(InvalidArgumentError):
    pass


class TableGroupTablesMismatchError(InvalidArgumentError):
    pass


class TableNotGroupableError(InvalidArgumentError):
    pass


class TableGroupHasActiveOrdersError(InvalidArgumentError):
    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.details = {"reason": reason}


class TableGroupNotFoundError(NotFoundError):
    pass


class CreateTableGroup:
    def __init__(
        self,
        table_repository: TableRepository,
        table_group_repository: TableGroupRepository,
    ) -> None:
        self._table_repository = table_repository
        self._table_group_repository = table_group_repository

    def execute(self, request_dto: CreateTableGroupRequest) -> TableGroupResponse:
        requested_ids = request_dto.order_table_ids
        if requested_ids is None or len(requested_ids) < 2:
            raise TableGroupSizeError("a table group needs at least two order tables")

        table_ids = [OrderTableId(table_id) for table_id in requested_ids]
        tables = self._table_repository.get_many(table_ids)
        if len(tables) != len(table_ids):
            raise TableGroupTablesMismatchError(
                f"requested {len(table_ids)} order tables but found {len(tables)} distinct tables"
            )

        for table in tables:
            if not table.empty or table.grouped:
                raise TableNotGroupableError(
                    f"order table {table.table_id} must be empty and ungrouped"
                )

        table_group = TableGroup(
            table_group_id=TableGroupId(new_id("tgr")),
            created_at=datetime.now(timezone.utc),
            table_ids=[table.table_id for table in tables],
        )
        self._table_group_repository.add(table_group)

        grouped_tables = [table.join_group(table_group.table_group_id) for table in tables]
        for table in grouped_tables:
            self._table_repository.update(table)

        record_table_group_created()
        return to_table_group_response(table_group, grouped_tables)


class DeleteTableGroup:
    """Ungroups the member tables of a table group.

    The tables themselves survive; only their group reference is cleared. With
    ``reset_empty`` the tables are also marked empty again. A group whose
    tables were already released is reported as not found.
    """

    def __init__(
        self,
        table_repository: TableRepository,
        table_group_repository: TableGroupRepository,
        order_repository: OrderRepository,
        reset_empty: bool = False,
    ) -> None:
        self._table_repository = table_repository
        self._table_group_repository = table_group_repository
        self._order_repository = order_repository
        self._reset_empty = reset_empty

    def execute(self, table_group_id: TableGroupId) -> None:
        if self._table_group_repository.get(table_group_id) is None:
            raise TableGroupNotFoundError(f"table group {table_group_id} not found")

        tables = self._table_repository.list_by_group(table_group_id)
        if not tables:
            raise TableGroupNotFoundError(f"table group {table_group_id} is already ungrouped")
        if self._order_repository.exists_for_tables(
            [table.table_id for table in tables],
            excluding_status=OrderStatus.COMPLETED,
        ):
            reason = "HAS_ACTIVE_ORDERS"
            record_table_ungroup_blocked(reason=reason)
            raise TableGroupHasActiveOrdersError(
                f"table group {table_group_id} has orders that are not completed",
                reason=reason,
            )

        for table in tables:
            self._table_repository.update(table.leave_group(reset_empty=self._reset_empty))
        record_table_group_ungrouped()

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from kitchenpos.domain.common.ids import OrderTableId, TableGroupId


@dataclass(frozen=True)
class OrderTable:
    table_id: OrderTableId
    name: str
    empty: bool
    number_of_guests: int
    table_group_id: TableGroupId | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")

    @property
    def grouped(self) -> bool:
        return self.table_group_id is not None

    def sit(self, number_of_guests: int) -> OrderTable:
        return replace(self, empty=False, number_of_guests=number_of_guests)

    def change_number_of_guests(self, number_of_guests: int) -> OrderTable:
        if self.empty:
            raise TableEmptyError(f"table {self.table_id} is empty")
        return replace(self, number_of_guests=number_of_guests)

    def clear(self) -> OrderTable:
        return replace(self, empty=True, number_of_guests=0)

    def join_group(self, table_group_id: TableGroupId) -> OrderTable:
        return replace(self, table_group_id=table_group_id, empty=False)

    def leave_group(self, reset_empty: bool = False) -> OrderTable:
        if reset_empty:
            return replace(self, table_group_id=None, empty=True)
        return replace(self, table_group_id=None)


@dataclass(frozen=True)
class TableGroup:
    table_group_id: TableGroupId
    created_at: datetime
    table_ids: list[OrderTableId]

    def __post_init__(self) -> None:
        if len(self.table_ids) < 2:
            raise ValueError("table group must contain at least two tables")


class TableEmptyError(Exception):
    pass

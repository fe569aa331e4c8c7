from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from kitchenpos.domain.common.ids import (
    MenuGroupId,
    MenuId,
    OrderId,
    OrderTableId,
    TableGroupId,
)
from kitchenpos.domain.menu.entities import Menu, MenuGroup
from kitchenpos.domain.order.entities import Order, OrderStatus
from kitchenpos.domain.table.entities import OrderTable, TableGroup


class MenuGroupRepository(Protocol):
    def add(self, menu_group: MenuGroup) -> None: ...

    def get(self, menu_group_id: MenuGroupId) -> MenuGroup | None: ...

    def list_all(self) -> list[MenuGroup]: ...


class MenuRepository(Protocol):
    def add(self, menu: Menu) -> None: ...

    def update(self, menu: Menu) -> None: ...

    def get(self, menu_id: MenuId) -> Menu | None: ...

    def get_many(self, menu_ids: Iterable[MenuId]) -> list[Menu]: ...

    def list_all(self) -> list[Menu]: ...


class TableRepository(Protocol):
    def add(self, table: OrderTable) -> None: ...

    def update(self, table: OrderTable) -> None: ...

    def get(self, table_id: OrderTableId) -> OrderTable | None: ...

    def get_many(self, table_ids: Iterable[OrderTableId]) -> list[OrderTable]: ...

    def list_by_group(self, table_group_id: TableGroupId) -> list[OrderTable]: ...

    def list_all(self) -> list[OrderTable]: ...


class TableGroupRepository(Protocol):
    def add(self, table_group: TableGroup) -> None: ...

    def get(self, table_group_id: TableGroupId) -> TableGroup | None: ...


class OrderRepository(Protocol):
    def add(self, order: Order) -> None: ...

    def update(self, order: Order) -> None: ...

    def get(self, order_id: OrderId) -> Order | None: ...

    def list_all(self) -> list[Order]: ...

    def exists_for_tables(
        self,
        table_ids: Iterable[OrderTableId],
        excluding_status: OrderStatus,
    ) -> bool:
        """True when any order on ``table_ids`` has a status other than ``excluding_status``."""
        ...

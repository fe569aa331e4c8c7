from __future__ import annotations

from collections.abc import Iterable

from kitchenpos.application.ports.repositories import (
    MenuGroupRepository,
    MenuRepository,
    OrderRepository,
    TableGroupRepository,
    TableRepository,
)
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
from kitchenpos.infrastructure.memory.store import InMemoryStore


def _distinct(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(str(value) for value in ids))


class InMemoryMenuGroupRepository(MenuGroupRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, menu_group: MenuGroup) -> None:
        self._store.menu_groups[str(menu_group.menu_group_id)] = menu_group

    def get(self, menu_group_id: MenuGroupId) -> MenuGroup | None:
        return self._store.menu_groups.get(str(menu_group_id))

    def list_all(self) -> list[MenuGroup]:
        return list(self._store.menu_groups.values())


class InMemoryMenuRepository(MenuRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, menu: Menu) -> None:
        self._store.menus[str(menu.menu_id)] = menu

    def update(self, menu: Menu) -> None:
        self._store.menus[str(menu.menu_id)] = menu

    def get(self, menu_id: MenuId) -> Menu | None:
        return self._store.menus.get(str(menu_id))

    def get_many(self, menu_ids: Iterable[MenuId]) -> list[Menu]:
        menus = self._store.menus
        return [menus[menu_id] for menu_id in _distinct(menu_ids) if menu_id in menus]

    def list_all(self) -> list[Menu]:
        return list(self._store.menus.values())


class InMemoryTableRepository(TableRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, table: OrderTable) -> None:
        self._store.tables[str(table.table_id)] = table

    def update(self, table: OrderTable) -> None:
        self._store.tables[str(table.table_id)] = table

    def get(self, table_id: OrderTableId) -> OrderTable | None:
        return self._store.tables.get(str(table_id))

    def get_many(self, table_ids: Iterable[OrderTableId]) -> list[OrderTable]:
        tables = self._store.tables
        return [tables[table_id] for table_id in _distinct(table_ids) if table_id in tables]

    def list_by_group(self, table_group_id: TableGroupId) -> list[OrderTable]:
        return [
            table
            for table in self._store.tables.values()
            if table.table_group_id == table_group_id
        ]

    def list_all(self) -> list[OrderTable]:
        return list(self._store.tables.values())


class InMemoryTableGroupRepository(TableGroupRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, table_group: TableGroup) -> None:
        self._store.table_groups[str(table_group.table_group_id)] = table_group

    def get(self, table_group_id: TableGroupId) -> TableGroup | None:
        return self._store.table_groups.get(str(table_group_id))


class InMemoryOrderRepository(OrderRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, order: Order) -> None:
        self._store.orders[str(order.order_id)] = order

    def update(self, order: Order) -> None:
        self._store.orders[str(order.order_id)] = order

    def get(self, order_id: OrderId) -> Order | None:
        return self._store.orders.get(str(order_id))

    def list_all(self) -> list[Order]:
        return list(self._store.orders.values())

    def exists_for_tables(
        self,
        table_ids: Iterable[OrderTableId],
        excluding_status: OrderStatus,
    ) -> bool:
        wanted = set(_distinct(table_ids))
        return any(
            order.table_id is not None
            and str(order.table_id) in wanted
            and order.status != excluding_status
            for order in self._store.orders.values()
        )

from __future__ import annotations

from dataclasses import dataclass, field

from kitchenpos.domain.menu.entities import Menu, MenuGroup
from kitchenpos.domain.order.entities import Order
from kitchenpos.domain.table.entities import OrderTable, TableGroup


@dataclass
class InMemoryStore:
    """Entity maps shared by the in-memory repositories that receive it."""

    menu_groups: dict[str, MenuGroup] = field(default_factory=dict)
    menus: dict[str, Menu] = field(default_factory=dict)
    tables: dict[str, OrderTable] = field(default_factory=dict)
    table_groups: dict[str, TableGroup] = field(default_factory=dict)
    orders: dict[str, Order] = field(default_factory=dict)

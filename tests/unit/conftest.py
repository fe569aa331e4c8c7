from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from kitchenpos.domain.common.ids import MenuGroupId, MenuId, OrderTableId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu, MenuGroup
from kitchenpos.domain.table.entities import OrderTable
from kitchenpos.infrastructure.memory.store import InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    """Store preloaded with one menu group, two displayed menus, one hidden menu
    and three tables (one occupied)."""
    memory = InMemoryStore()
    memory.menu_groups["mgr_001"] = MenuGroup(
        menu_group_id=MenuGroupId("mgr_001"),
        name="Chicken",
    )
    for menu in (
        Menu(
            menu_id=MenuId("mnu_001"),
            name="Fried Chicken",
            price=Money(amount_cents=16000),
            displayed=True,
            menu_group_id=MenuGroupId("mgr_001"),
        ),
        Menu(
            menu_id=MenuId("mnu_002"),
            name="Seasoned Chicken",
            price=Money(amount_cents=17000),
            displayed=True,
            menu_group_id=MenuGroupId("mgr_001"),
        ),
        Menu(
            menu_id=MenuId("mnu_003"),
            name="Seasonal Salad",
            price=Money(amount_cents=5500),
            displayed=False,
            menu_group_id=MenuGroupId("mgr_001"),
        ),
    ):
        memory.menus[str(menu.menu_id)] = menu

    for table in (
        OrderTable(table_id=OrderTableId("tbl_001"), name="1", empty=False, number_of_guests=2),
        OrderTable(table_id=OrderTableId("tbl_002"), name="2", empty=True, number_of_guests=0),
        OrderTable(table_id=OrderTableId("tbl_003"), name="3", empty=True, number_of_guests=0),
    ):
        memory.tables[str(table.table_id)] = table
    return memory

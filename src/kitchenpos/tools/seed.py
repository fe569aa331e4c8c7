from __future__ import annotations

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from kitchenpos.infrastructure.db.models.menu import MenuGroupModel, MenuModel
from kitchenpos.infrastructure.db.models.table import OrderTableModel
from kitchenpos.infrastructure.db.session import get_engine

MENU_GROUPS = [
    {"id": "mgr_001", "name": "Chicken"},
    {"id": "mgr_002", "name": "Sides"},
]

MENUS = [
    {
        "id": "mnu_001",
        "menu_group_id": "mgr_001",
        "name": "Fried Chicken",
        "price_cents": 16000,
        "currency": "KRW",
        "displayed": True,
    },
    {
        "id": "mnu_002",
        "menu_group_id": "mgr_001",
        "name": "Seasoned Chicken",
        "price_cents": 17000,
        "currency": "KRW",
        "displayed": True,
    },
    {
        "id": "mnu_003",
        "menu_group_id": "mgr_002",
        "name": "Pickled Radish",
        "price_cents": 1000,
        "currency": "KRW",
        "displayed": True,
    },
    {
        "id": "mnu_004",
        "menu_group_id": "mgr_002",
        "name": "Seasonal Salad",
        "price_cents": 5500,
        "currency": "KRW",
        "displayed": False,
    },
]

ORDER_TABLES = [
    {"id": f"tbl_{number:03d}", "name": f"Table {number}", "empty": True, "number_of_guests": 0}
    for number in range(1, 9)
]


def main(engine: Engine | None = None) -> bool:
    engine = engine or get_engine(timeout_seconds=2.0)
    required_tables = {"menu_groups", "menus", "order_tables"}
    if not required_tables.issubset(set(inspect(engine).get_table_names())):
        print("no schema yet")
        return False

    with Session(engine) as session:
        for group in MENU_GROUPS:
            session.merge(MenuGroupModel(**group))
        for menu in MENUS:
            session.merge(MenuModel(**menu))
        for table in ORDER_TABLES:
            # Existing tables keep their live occupancy and group membership.
            if session.get(OrderTableModel, table["id"]) is None:
                session.add(OrderTableModel(**table))
        session.commit()

    print("seed complete")
    return True


if __name__ == "__main__":
    main()

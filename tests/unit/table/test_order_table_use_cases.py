from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from kitchenpos.application.dto.requests import (
    ChangeNumberOfGuestsRequest,
    CreateOrderTableRequest,
)
from kitchenpos.application.use_cases.order_tables import (
    ChangeNumberOfGuests,
    ClearTable,
    CreateOrderTable,
    EmptyTableGuestsError,
    InvalidNumberOfGuestsError,
    InvalidTableNameError,
    ListOrderTables,
    OrderTableNotFoundError,
    SitTable,
    TableHasActiveOrdersError,
    TableInGroupError,
)
from kitchenpos.domain.common.ids import MenuId, OrderId, OrderLineId, OrderTableId, TableGroupId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.order.entities import Order, OrderLineItem, OrderStatus, OrderType
from kitchenpos.infrastructure.memory.repositories import (
    InMemoryOrderRepository,
    InMemoryTableRepository,
)
from kitchenpos.infrastructure.memory.store import InMemoryStore


def _clear(store: InMemoryStore) -> ClearTable:
    return ClearTable(
        table_repository=InMemoryTableRepository(store),
        order_repository=InMemoryOrderRepository(store),
    )


def test_create_table_starts_empty(store: InMemoryStore) -> None:
    response = CreateOrderTable(table_repository=InMemoryTableRepository(store)).execute(
        CreateOrderTableRequest(name="Terrace 1")
    )

    assert response.orderTableId.startswith("tbl_")
    assert response.empty is True
    assert response.numberOfGuests == 0
    assert response.tableGroupId is None


def test_create_table_rejects_blank_name(store: InMemoryStore) -> None:
    with pytest.raises(InvalidTableNameError):
        CreateOrderTable(table_repository=InMemoryTableRepository(store)).execute(
            CreateOrderTableRequest(name="  ")
        )


def test_list_tables(store: InMemoryStore) -> None:
    listed = ListOrderTables(table_repository=InMemoryTableRepository(store)).execute()

    assert [table.orderTableId for table in listed] == ["tbl_001", "tbl_002", "tbl_003"]


def test_sit_and_change_guests(store: InMemoryStore) -> None:
    table_repository = InMemoryTableRepository(store)

    seated = SitTable(table_repository=table_repository).execute(
        table_id=OrderTableId("tbl_002"),
        request_dto=ChangeNumberOfGuestsRequest(number_of_guests=3),
    )
    changed = ChangeNumberOfGuests(table_repository=table_repository).execute(
        table_id=OrderTableId("tbl_002"),
        request_dto=ChangeNumberOfGuestsRequest(number_of_guests=5),
    )

    assert (seated.empty, seated.numberOfGuests) == (False, 3)
    assert changed.numberOfGuests == 5


def test_change_guests_on_empty_table_is_illegal(store: InMemoryStore) -> None:
    with pytest.raises(EmptyTableGuestsError):
        ChangeNumberOfGuests(table_repository=InMemoryTableRepository(store)).execute(
            table_id=OrderTableId("tbl_002"),
            request_dto=ChangeNumberOfGuestsRequest(number_of_guests=2),
        )


def test_negative_guests_rejected(store: InMemoryStore) -> None:
    with pytest.raises(InvalidNumberOfGuestsError):
        SitTable(table_repository=InMemoryTableRepository(store)).execute(
            table_id=OrderTableId("tbl_002"),
            request_dto=ChangeNumberOfGuestsRequest(number_of_guests=-1),
        )


def test_unknown_table(store: InMemoryStore) -> None:
    with pytest.raises(OrderTableNotFoundError):
        _clear(store).execute(OrderTableId("tbl_missing"))


def test_clear_table(store: InMemoryStore) -> None:
    cleared = _clear(store).execute(OrderTableId("tbl_001"))

    assert (cleared.empty, cleared.numberOfGuests) == (True, 0)


def test_clear_grouped_table_rejected(store: InMemoryStore) -> None:
    store.tables["tbl_001"] = store.tables["tbl_001"].join_group(TableGroupId("tgr_001"))

    with pytest.raises(TableInGroupError):
        _clear(store).execute(OrderTableId("tbl_001"))


def test_clear_table_with_open_order_rejected(store: InMemoryStore) -> None:
    store.orders["ord_001"] = Order(
        order_id=OrderId("ord_001"),
        order_type=OrderType.DINE_IN,
        status=OrderStatus.SERVED,
        lines=[
            OrderLineItem(
                line_id=OrderLineId("orl_001"),
                menu_id=MenuId("mnu_001"),
                quantity=1,
                price=Money(amount_cents=16000),
            )
        ],
        created_at=datetime.now(timezone.utc),
        table_id=OrderTableId("tbl_001"),
    )

    with pytest.raises(TableHasActiveOrdersError):
        _clear(store).execute(OrderTableId("tbl_001"))
    assert store.tables["tbl_001"].empty is False

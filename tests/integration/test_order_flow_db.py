from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from kitchenpos.api.dependencies import get_delivery_dispatcher
from kitchenpos.api.main import app
from kitchenpos.domain.common.ids import OrderId
from kitchenpos.domain.common.money import Money


class RecordingDispatcher:
    def __init__(self) -> None:
        self.requests: list[tuple[str, int]] = []

    def request_delivery(self, order_id: OrderId, amount: Money, address: str) -> None:
        self.requests.append((str(order_id), amount.amount_cents))


class FailingDispatcher:
    def request_delivery(self, order_id: OrderId, amount: Money, address: str) -> None:
        raise ConnectionError("rider service unreachable")


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def client(dispatcher: RecordingDispatcher) -> Iterator[TestClient]:
    app.dependency_overrides[get_delivery_dispatcher] = lambda: dispatcher
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _line(menu_id: str = "mnu_001", quantity: int = 1, amount_cents: int = 16000) -> dict:
    return {"menuId": menu_id, "quantity": quantity, "price": {"amountCents": amount_cents}}


def _seated_table(client: TestClient) -> str:
    table_id = client.post("/v1/tables", json={"name": "Window"}).json()["orderTableId"]
    client.post(f"/v1/tables/{table_id}/sit", json={"numberOfGuests": 2})
    return table_id


def test_seeded_catalogue_is_served(client: TestClient) -> None:
    menus = {menu["menuId"]: menu for menu in client.get("/v1/menus").json()}

    assert menus["mnu_001"]["price"] == {"amountCents": 16000, "currency": "KRW"}
    assert menus["mnu_004"]["displayed"] is False


def test_dine_in_flow_empties_table_after_last_order(client: TestClient) -> None:
    table_id = _seated_table(client)
    order_ids = [
        client.post(
            "/v1/orders",
            json={"type": "DINE_IN", "orderTableId": table_id, "orderLineItems": [_line()]},
        ).json()["orderId"]
        for _ in range(2)
    ]

    for order_id in order_ids:
        for step in ("accept", "serve"):
            assert client.post(f"/v1/orders/{order_id}/{step}").status_code == 200

    client.post(f"/v1/orders/{order_ids[0]}/complete")
    tables = {table["orderTableId"]: table for table in client.get("/v1/tables").json()}
    assert tables[table_id]["empty"] is False

    client.post(f"/v1/orders/{order_ids[1]}/complete")
    tables = {table["orderTableId"]: table for table in client.get("/v1/tables").json()}
    assert tables[table_id]["empty"] is True


def test_delivery_accept_dispatches_once(
    client: TestClient,
    dispatcher: RecordingDispatcher,
) -> None:
    created = client.post(
        "/v1/orders",
        json={
            "type": "DELIVERY",
            "deliveryAddress": "12 Harbor Road",
            "orderLineItems": [_line(quantity=2), _line("mnu_003", amount_cents=1000)],
        },
    )
    order_id = created.json()["orderId"]

    assert client.post(f"/v1/orders/{order_id}/accept").status_code == 200
    assert client.post(f"/v1/orders/{order_id}/accept").status_code == 409
    assert dispatcher.requests == [(order_id, 33000)]


def test_failed_dispatch_keeps_order_waiting() -> None:
    app.dependency_overrides[get_delivery_dispatcher] = lambda: FailingDispatcher()
    try:
        client = TestClient(app, raise_server_exceptions=False)
        created = client.post(
            "/v1/orders",
            json={
                "type": "DELIVERY",
                "deliveryAddress": "12 Harbor Road",
                "orderLineItems": [_line()],
            },
        )
        order_id = created.json()["orderId"]

        assert client.post(f"/v1/orders/{order_id}/accept").status_code == 500
        assert client.get(f"/v1/orders/{order_id}").json()["status"] == "WAITING"
    finally:
        app.dependency_overrides.clear()


def test_table_group_blocked_by_open_order(client: TestClient) -> None:
    table_ids = [
        client.post("/v1/tables", json={"name": f"Patio {n}"}).json()["orderTableId"]
        for n in range(2)
    ]
    group = client.post("/v1/table-groups", json={"orderTableIds": table_ids}).json()

    order = client.post(
        "/v1/orders",
        json={"type": "DINE_IN", "orderTableId": table_ids[0], "orderLineItems": [_line()]},
    )
    assert order.status_code == 201

    blocked = client.delete(f"/v1/table-groups/{group['tableGroupId']}")
    assert blocked.status_code == 400
    assert blocked.json()["error"]["details"] == {"reason": "HAS_ACTIVE_ORDERS"}

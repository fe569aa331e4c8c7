from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kitchenpos.domain.common.money import DEFAULT_CURRENCY


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class MoneyRequest(CamelBaseModel):
    amount_cents: int
    currency: str = DEFAULT_CURRENCY


class OrderLineItemRequest(CamelBaseModel):
    menu_id: str
    quantity: int
    price: MoneyRequest


# Type and line items stay optional here: the order use case owns those checks.
class PlaceOrderRequest(CamelBaseModel):
    order_type: str | None = Field(default=None, alias="type")
    order_line_items: list[OrderLineItemRequest] | None = None
    order_table_id: str | None = None
    delivery_address: str | None = None


class CreateTableGroupRequest(CamelBaseModel):
    order_table_ids: list[str] | None = None


class CreateOrderTableRequest(CamelBaseModel):
    name: str


class ChangeNumberOfGuestsRequest(CamelBaseModel):
    number_of_guests: int


class CreateMenuGroupRequest(CamelBaseModel):
    name: str


class CreateMenuRequest(CamelBaseModel):
    name: str
    price: MoneyRequest
    menu_group_id: str
    displayed: bool = True

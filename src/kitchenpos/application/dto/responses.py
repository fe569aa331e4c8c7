from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class MoneyResponse(BaseModel):
    amountCents: int
    currency: str


class MenuGroupResponse(BaseModel):
    menuGroupId: str
    name: str


class MenuResponse(BaseModel):
    menuId: str
    name: str
    price: MoneyResponse
    displayed: bool
    menuGroupId: str


class OrderLineItemResponse(BaseModel):
    lineId: str
    menuId: str
    quantity: int
    price: MoneyResponse
    amount: MoneyResponse


class OrderResponse(BaseModel):
    orderId: str
    type: str
    status: str
    orderLineItems: list[OrderLineItemResponse] = Field(default_factory=list)
    total: MoneyResponse
    orderTableId: str | None = None
    deliveryAddress: str | None = None
    createdAt: datetime


class OrderTableResponse(BaseModel):
    orderTableId: str
    name: str
    empty: bool
    numberOfGuests: int
    tableGroupId: str | None = None


class TableGroupResponse(BaseModel):
    tableGroupId: str
    createdAt: datetime
    orderTables: list[OrderTableResponse] = Field(default_factory=list)

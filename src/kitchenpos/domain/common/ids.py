from __future__ import annotations

from typing import NewType
from uuid import uuid4

MenuGroupId = NewType("MenuGroupId", str)
MenuId = NewType("MenuId", str)
OrderTableId = NewType("OrderTableId", str)
TableGroupId = NewType("TableGroupId", str)
OrderId = NewType("OrderId", str)
OrderLineId = NewType("OrderLineId", str)


def new_id(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:12]}"

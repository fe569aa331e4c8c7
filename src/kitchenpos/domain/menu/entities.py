from __future__ import annotations

from dataclasses import dataclass, replace

from kitchenpos.domain.common.ids import MenuGroupId, MenuId
from kitchenpos.domain.common.money import Money


@dataclass(frozen=True)
class MenuGroup:
    menu_group_id: MenuGroupId
    name: str

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")


@dataclass(frozen=True)
class Menu:
    menu_id: MenuId
    name: str
    price: Money
    displayed: bool
    menu_group_id: MenuGroupId

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("name must be non-empty")
        if self.price.is_negative():
            raise ValueError("price must be >= 0")

    def display(self) -> Menu:
        return replace(self, displayed=True)

    def hide(self) -> Menu:
        return replace(self, displayed=False)

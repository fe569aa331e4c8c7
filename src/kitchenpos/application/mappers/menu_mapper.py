from __future__ import annotations

from kitchenpos.application.dto.responses import MenuGroupResponse, MenuResponse, MoneyResponse
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu, MenuGroup


def to_money_response(money: Money) -> MoneyResponse:
    return MoneyResponse(amountCents=money.amount_cents, currency=money.currency)


def to_menu_group_response(menu_group: MenuGroup) -> MenuGroupResponse:
    return MenuGroupResponse(
        menuGroupId=str(menu_group.menu_group_id),
        name=menu_group.name,
    )


def to_menu_response(menu: Menu) -> MenuResponse:
    return MenuResponse(
        menuId=str(menu.menu_id),
        name=menu.name,
        price=to_money_response(menu.price),
        displayed=menu.displayed,
        menuGroupId=str(menu.menu_group_id),
    )

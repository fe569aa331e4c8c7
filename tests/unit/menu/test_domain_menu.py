from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from kitchenpos.domain.common.ids import MenuGroupId, MenuId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu, MenuGroup


def _menu(amount_cents: int = 16000, name: str = "Fried Chicken") -> Menu:
    return Menu(
        menu_id=MenuId("mnu_001"),
        name=name,
        price=Money(amount_cents=amount_cents),
        displayed=True,
        menu_group_id=MenuGroupId("mgr_001"),
    )


def test_menu_price_must_not_be_negative() -> None:
    with pytest.raises(ValueError):
        _menu(amount_cents=-1)


def test_menu_price_may_be_zero() -> None:
    assert _menu(amount_cents=0).price.amount_cents == 0


def test_menu_and_group_names_must_not_be_blank() -> None:
    with pytest.raises(ValueError):
        _menu(name="")
    with pytest.raises(ValueError):
        MenuGroup(menu_group_id=MenuGroupId("mgr_001"), name="  ")


def test_hide_and_display() -> None:
    hidden = _menu().hide()

    assert hidden.displayed is False
    assert hidden.display().displayed is True

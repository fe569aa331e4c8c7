from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import Engine, select
from sqlalchemy.orm import Session

from kitchenpos.application.ports.repositories import MenuGroupRepository, MenuRepository
from kitchenpos.domain.common.ids import MenuGroupId, MenuId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu, MenuGroup
from kitchenpos.infrastructure.db.models.menu import MenuGroupModel, MenuModel
from kitchenpos.infrastructure.db.session import get_engine


class SqlAlchemyMenuGroupRepository(MenuGroupRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, menu_group: MenuGroup) -> None:
        with Session(self._engine) as session:
            session.add(MenuGroupModel(id=str(menu_group.menu_group_id), name=menu_group.name))
            session.commit()

    def get(self, menu_group_id: MenuGroupId) -> MenuGroup | None:
        with Session(self._engine) as session:
            model = session.get(MenuGroupModel, str(menu_group_id))
            if model is None:
                return None
            return _menu_group_to_domain(model)

    def list_all(self) -> list[MenuGroup]:
        statement = select(MenuGroupModel).order_by(MenuGroupModel.name, MenuGroupModel.id)
        with Session(self._engine) as session:
            models = session.execute(statement).scalars().all()
            return [_menu_group_to_domain(model) for model in models]


class SqlAlchemyMenuRepository(MenuRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, menu: Menu) -> None:
        with Session(self._engine) as session:
            session.add(_menu_to_model(menu))
            session.commit()

    def update(self, menu: Menu) -> None:
        with Session(self._engine) as session:
            session.merge(_menu_to_model(menu))
            session.commit()

    def get(self, menu_id: MenuId) -> Menu | None:
        with Session(self._engine) as session:
            model = session.get(MenuModel, str(menu_id))
            if model is None:
                return None
            return _menu_to_domain(model)

    def get_many(self, menu_ids: Iterable[MenuId]) -> list[Menu]:
        ids = list(dict.fromkeys(str(menu_id) for menu_id in menu_ids))
        if not ids:
            return []
        statement = select(MenuModel).where(MenuModel.id.in_(ids))
        with Session(self._engine) as session:
            models = session.execute(statement).scalars().all()
            return [_menu_to_domain(model) for model in models]

    def list_all(self) -> list[Menu]:
        statement = select(MenuModel).order_by(MenuModel.name, MenuModel.id)
        with Session(self._engine) as session:
            models = session.execute(statement).scalars().all()
            return [_menu_to_domain(model) for model in models]


def _menu_group_to_domain(model: MenuGroupModel) -> MenuGroup:
    return MenuGroup(menu_group_id=MenuGroupId(model.id), name=model.name)


def _menu_to_domain(model: MenuModel) -> Menu:
    return Menu(
        menu_id=MenuId(model.id),
        name=model.name,
        price=Money(amount_cents=model.price_cents, currency=model.currency),
        displayed=model.displayed,
        menu_group_id=MenuGroupId(model.menu_group_id),
    )


def _menu_to_model(menu: Menu) -> MenuModel:
    return MenuModel(
        id=str(menu.menu_id),
        menu_group_id=str(menu.menu_group_id),
        name=menu.name,
        price_cents=menu.price.amount_cents,
        currency=menu.price.currency,
        displayed=menu.displayed,
    )

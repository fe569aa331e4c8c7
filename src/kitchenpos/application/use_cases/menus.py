from __future__ import annotations

from kitchenpos.application.dto.requests import CreateMenuGroupRequest, CreateMenuRequest
from kitchenpos.application.dto.responses import MenuGroupResponse, MenuResponse
from kitchenpos.application.errors import InvalidArgumentError, NotFoundError
from kitchenpos.application.mappers.menu_mapper import to_menu_group_response, to_menu_response
from kitchenpos.application.ports.repositories import MenuGroupRepository, MenuRepository
from kitchenpos.domain.common.ids import MenuGroupId, MenuId, new_id
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.menu.entities import Menu, MenuGroup


class InvalidMenuError(InvalidArgumentError):
    pass


class MenuGroupNotFoundError(NotFoundError):
    pass


class MenuNotFoundError(NotFoundError):
    pass


class CreateMenuGroup:
    def __init__(self, menu_group_repository: MenuGroupRepository) -> None:
        self._menu_group_repository = menu_group_repository

    def execute(self, request_dto: CreateMenuGroupRequest) -> MenuGroupResponse:
        try:
            menu_group = MenuGroup(
                menu_group_id=MenuGroupId(new_id("mgr")),
                name=request_dto.name,
            )
        except ValueError as exc:
            raise InvalidMenuError(str(exc)) from exc
        self._menu_group_repository.add(menu_group)
        return to_menu_group_response(menu_group)


class ListMenuGroups:
    def __init__(self, menu_group_repository: MenuGroupRepository) -> None:
        self._menu_group_repository = menu_group_repository

    def execute(self) -> list[MenuGroupResponse]:
        return [
            to_menu_group_response(menu_group)
            for menu_group in self._menu_group_repository.list_all()
        ]


class CreateMenu:
    def __init__(
        self,
        menu_repository: MenuRepository,
        menu_group_repository: MenuGroupRepository,
    ) -> None:
        self._menu_repository = menu_repository
        self._menu_group_repository = menu_group_repository

    def execute(self, request_dto: CreateMenuRequest) -> MenuResponse:
        menu_group_id = MenuGroupId(request_dto.menu_group_id)
        try:
            menu = Menu(
                menu_id=MenuId(new_id("mnu")),
                name=request_dto.name,
                price=Money(
                    amount_cents=request_dto.price.amount_cents,
                    currency=request_dto.price.currency,
                ),
                displayed=request_dto.displayed,
                menu_group_id=menu_group_id,
            )
        except ValueError as exc:
            raise InvalidMenuError(str(exc)) from exc

        if self._menu_group_repository.get(menu_group_id) is None:
            raise MenuGroupNotFoundError(f"menu group {menu_group_id} not found")

        self._menu_repository.add(menu)
        return to_menu_response(menu)


class ListMenus:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self) -> list[MenuResponse]:
        return [to_menu_response(menu) for menu in self._menu_repository.list_all()]


class ChangeMenuDisplay:
    def __init__(self, menu_repository: MenuRepository) -> None:
        self._menu_repository = menu_repository

    def execute(self, menu_id: MenuId, displayed: bool) -> MenuResponse:
        menu = self._menu_repository.get(menu_id)
        if menu is None:
            raise MenuNotFoundError(f"menu {menu_id} not found")
        updated = menu.display() if displayed else menu.hide()
        self._menu_repository.update(updated)
        return to_menu_response(updated)

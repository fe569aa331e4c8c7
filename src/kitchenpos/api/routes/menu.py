from __future__ import annotations

from fastapi import APIRouter, Depends, status

from kitchenpos.api.dependencies import get_menu_group_repository, get_menu_repository
from kitchenpos.application.dto.requests import CreateMenuGroupRequest, CreateMenuRequest
from kitchenpos.application.dto.responses import MenuGroupResponse, MenuResponse
from kitchenpos.application.ports.repositories import MenuGroupRepository, MenuRepository
from kitchenpos.application.use_cases.menus import (
    ChangeMenuDisplay,
    CreateMenu,
    CreateMenuGroup,
    ListMenuGroups,
    ListMenus,
)
from kitchenpos.domain.common.ids import MenuId

router = APIRouter()


@router.post(
    "/v1/menu-groups",
    response_model=MenuGroupResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_menu_group(
    request_dto: CreateMenuGroupRequest,
    menu_group_repository: MenuGroupRepository = Depends(get_menu_group_repository),
) -> MenuGroupResponse:
    return CreateMenuGroup(menu_group_repository=menu_group_repository).execute(request_dto)


@router.get("/v1/menu-groups", response_model=list[MenuGroupResponse])
def list_menu_groups(
    menu_group_repository: MenuGroupRepository = Depends(get_menu_group_repository),
) -> list[MenuGroupResponse]:
    return ListMenuGroups(menu_group_repository=menu_group_repository).execute()


@router.post("/v1/menus", response_model=MenuResponse, status_code=status.HTTP_201_CREATED)
def create_menu(
    request_dto: CreateMenuRequest,
    menu_repository: MenuRepository = Depends(get_menu_repository),
    menu_group_repository: MenuGroupRepository = Depends(get_menu_group_repository),
) -> MenuResponse:
    return CreateMenu(
        menu_repository=menu_repository,
        menu_group_repository=menu_group_repository,
    ).execute(request_dto)


@router.get("/v1/menus", response_model=list[MenuResponse])
def list_menus(
    menu_repository: MenuRepository = Depends(get_menu_repository),
) -> list[MenuResponse]:
    return ListMenus(menu_repository=menu_repository).execute()


@router.post("/v1/menus/{menu_id}/display", response_model=MenuResponse)
def display_menu(
    menu_id: str,
    menu_repository: MenuRepository = Depends(get_menu_repository),
) -> MenuResponse:
    return ChangeMenuDisplay(menu_repository=menu_repository).execute(
        MenuId(menu_id),
        displayed=True,
    )


@router.post("/v1/menus/{menu_id}/hide", response_model=MenuResponse)
def hide_menu(
    menu_id: str,
    menu_repository: MenuRepository = Depends(get_menu_repository),
) -> MenuResponse:
    return ChangeMenuDisplay(menu_repository=menu_repository).execute(
        MenuId(menu_id),
        displayed=False,
    )

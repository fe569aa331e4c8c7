from __future__ import annotations

import os

from kitchenpos.application.ports.delivery import DeliveryDispatcher
from kitchenpos.application.ports.repositories import (
    MenuGroupRepository,
    MenuRepository,
    OrderRepository,
    TableGroupRepository,
    TableRepository,
)
from kitchenpos.infrastructure.db.repositories.menu_repo import (
    SqlAlchemyMenuGroupRepository,
    SqlAlchemyMenuRepository,
)
from kitchenpos.infrastructure.db.repositories.order_repo import SqlAlchemyOrderRepository
from kitchenpos.infrastructure.db.repositories.table_repo import (
    SqlAlchemyTableGroupRepository,
    SqlAlchemyTableRepository,
)
from kitchenpos.infrastructure.messaging.delivery_dispatcher import RedisDeliveryDispatcher

_TRUTHY = {"1", "true", "yes", "on"}


def get_menu_group_repository() -> MenuGroupRepository:
    return SqlAlchemyMenuGroupRepository()


def get_menu_repository() -> MenuRepository:
    return SqlAlchemyMenuRepository()


def get_table_repository() -> TableRepository:
    return SqlAlchemyTableRepository()


def get_table_group_repository() -> TableGroupRepository:
    return SqlAlchemyTableGroupRepository()


def get_order_repository() -> OrderRepository:
    return SqlAlchemyOrderRepository()


def get_delivery_dispatcher() -> DeliveryDispatcher:
    return RedisDeliveryDispatcher()


def ungroup_resets_empty() -> bool:
    return os.getenv("UNGROUP_RESETS_EMPTY", "false").strip().lower() in _TRUTHY

from __future__ import annotations

from collections.abc import Iterable
from datetime import timezone

from sqlalchemy import Engine, select
from sqlalchemy.orm import Session

from kitchenpos.application.ports.repositories import TableGroupRepository, TableRepository
from kitchenpos.domain.common.ids import OrderTableId, TableGroupId
from kitchenpos.domain.table.entities import OrderTable, TableGroup
from kitchenpos.infrastructure.db.models.table import OrderTableModel, TableGroupModel
from kitchenpos.infrastructure.db.session import get_engine


class SqlAlchemyTableRepository(TableRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, table: OrderTable) -> None:
        with Session(self._engine) as session:
            session.add(self._to_model(table))
            session.commit()

    def update(self, table: OrderTable) -> None:
        with Session(self._engine) as session:
            session.merge(self._to_model(table))
            session.commit()

    def get(self, table_id: OrderTableId) -> OrderTable | None:
        with Session(self._engine) as session:
            model = session.get(OrderTableModel, str(table_id))
            if model is None:
                return None
            return self._to_domain(model)

    def get_many(self, table_ids: Iterable[OrderTableId]) -> list[OrderTable]:
        ids = list(dict.fromkeys(str(table_id) for table_id in table_ids))
        if not ids:
            return []
        statement = select(OrderTableModel).where(OrderTableModel.id.in_(ids))
        return self._fetch(statement)

    def list_by_group(self, table_group_id: TableGroupId) -> list[OrderTable]:
        statement = (
            select(OrderTableModel)
            .where(OrderTableModel.table_group_id == str(table_group_id))
            .order_by(OrderTableModel.name, OrderTableModel.id)
        )
        return self._fetch(statement)

    def list_all(self) -> list[OrderTable]:
        statement = select(OrderTableModel).order_by(OrderTableModel.name, OrderTableModel.id)
        return self._fetch(statement)

    def _fetch(self, statement) -> list[OrderTable]:
        with Session(self._engine) as session:
            models = session.execute(statement).scalars().all()
            return [self._to_domain(model) for model in models]

    def _to_domain(self, model: OrderTableModel) -> OrderTable:
        return OrderTable(
            table_id=OrderTableId(model.id),
            name=model.name,
            empty=model.empty,
            number_of_guests=model.number_of_guests,
            table_group_id=(
                TableGroupId(model.table_group_id) if model.table_group_id is not None else None
            ),
        )

    def _to_model(self, table: OrderTable) -> OrderTableModel:
        return OrderTableModel(
            id=str(table.table_id),
            name=table.name,
            empty=table.empty,
            number_of_guests=table.number_of_guests,
            table_group_id=(
                str(table.table_group_id) if table.table_group_id is not None else None
            ),
        )


class SqlAlchemyTableGroupRepository(TableGroupRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, table_group: TableGroup) -> None:
        model = TableGroupModel(
            id=str(table_group.table_group_id),
            created_at=table_group.created_at,
            table_ids=[str(table_id) for table_id in table_group.table_ids],
        )
        with Session(self._engine) as session:
            session.add(model)
            session.commit()

    def get(self, table_group_id: TableGroupId) -> TableGroup | None:
        with Session(self._engine) as session:
            model = session.get(TableGroupModel, str(table_group_id))
            if model is None:
                return None
            created_at = model.created_at
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=timezone.utc)
            return TableGroup(
                table_group_id=TableGroupId(model.id),
                created_at=created_at,
                table_ids=[OrderTableId(table_id) for table_id in model.table_ids],
            )

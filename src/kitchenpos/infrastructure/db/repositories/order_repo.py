from __future__ import annotations

from collections.abc import Iterable
from datetime import timezone

from sqlalchemy import Engine, select, update
from sqlalchemy.orm import Session, selectinload

from kitchenpos.application.ports.repositories import OrderRepository
from kitchenpos.domain.common.ids import MenuId, OrderId, OrderLineId, OrderTableId
from kitchenpos.domain.common.money import Money
from kitchenpos.domain.order.entities import Order, OrderLineItem, OrderStatus, OrderType
from kitchenpos.infrastructure.db.models.order import OrderLineItemModel, OrderModel
from kitchenpos.infrastructure.db.session import get_engine


class SqlAlchemyOrderRepository(OrderRepository):
    def __init__(self, engine: Engine | None = None) -> None:
        self._engine = engine or get_engine()

    def add(self, order: Order) -> None:
        order_model = self._to_model(order)
        with Session(self._engine) as session:
            session.add(order_model)
            session.commit()

    def update(self, order: Order) -> None:
        # Line items are fixed at creation; only the status moves.
        statement = (
            update(OrderModel)
            .where(OrderModel.id == str(order.order_id))
            .values(status=order.status.value)
        )
        with Session(self._engine) as session:
            session.execute(statement)
            session.commit()

    def get(self, order_id: OrderId) -> Order | None:
        statement = (
            select(OrderModel)
            .options(selectinload(OrderModel.line_items))
            .where(OrderModel.id == str(order_id))
            .limit(1)
        )
        with Session(self._engine) as session:
            model = session.execute(statement).scalar_one_or_none()
            if model is None:
                return None
            return self._to_domain(model)

    def list_all(self) -> list[Order]:
        statement = (
            select(OrderModel)
            .options(selectinload(OrderModel.line_items))
            .order_by(OrderModel.created_at, OrderModel.id)
        )
        with Session(self._engine) as session:
            models = session.execute(statement).scalars().all()
            return [self._to_domain(model) for model in models]

    def exists_for_tables(
        self,
        table_ids: Iterable[OrderTableId],
        excluding_status: OrderStatus,
    ) -> bool:
        ids = list(dict.fromkeys(str(table_id) for table_id in table_ids))
        if not ids:
            return False
        statement = (
            select(OrderModel.id)
            .where(
                OrderModel.order_table_id.in_(ids),
                OrderModel.status != excluding_status.value,
            )
            .limit(1)
        )
        with Session(self._engine) as session:
            return session.execute(statement).first() is not None

    def _to_model(self, order: Order) -> OrderModel:
        return OrderModel(
            id=str(order.order_id),
            order_type=order.order_type.value,
            status=order.status.value,
            order_table_id=str(order.table_id) if order.table_id is not None else None,
            delivery_address=order.delivery_address,
            created_at=order.created_at,
            line_items=[
                OrderLineItemModel(
                    id=str(line.line_id),
                    seq=seq,
                    menu_id=str(line.menu_id),
                    quantity=line.quantity,
                    price_cents=line.price.amount_cents,
                    currency=line.price.currency,
                )
                for seq, line in enumerate(order.lines, start=1)
            ],
        )

    def _to_domain(self, model: OrderModel) -> Order:
        created_at = model.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            order_id=OrderId(model.id),
            order_type=OrderType(model.order_type),
            status=OrderStatus(model.status),
            lines=[
                OrderLineItem(
                    line_id=OrderLineId(line.id),
                    menu_id=MenuId(line.menu_id),
                    quantity=line.quantity,
                    price=Money(amount_cents=line.price_cents, currency=line.currency),
                )
                for line in model.line_items
            ],
            created_at=created_at,
            table_id=(
                OrderTableId(model.order_table_id) if model.order_table_id is not None else None
            ),
            delivery_address=model.delivery_address,
        )

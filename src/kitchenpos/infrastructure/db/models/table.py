from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, func, true
from sqlalchemy.orm import Mapped, mapped_column

from kitchenpos.infrastructure.db.models.menu import Base


class TableGroupModel(Base):
    __tablename__ = "table_groups"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    # Membership at creation time; live membership is order_tables.table_group_id.
    table_ids: Mapped[list[str]] = mapped_column(JSON, nullable=False)


class OrderTableModel(Base):
    __tablename__ = "order_tables"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    empty: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=true())
    number_of_guests: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    table_group_id: Mapped[str | None] = mapped_column(
        String(50),
        ForeignKey("table_groups.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

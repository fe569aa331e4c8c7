from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Integer, String, true
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class MenuGroupModel(Base):
    __tablename__ = "menu_groups"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    menus: Mapped[list["MenuModel"]] = relationship(back_populates="menu_group")


class MenuModel(Base):
    __tablename__ = "menus"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    menu_group_id: Mapped[str] = mapped_column(
        String(50),
        ForeignKey("menu_groups.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)
    displayed: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default=true())

    menu_group: Mapped[MenuGroupModel] = relationship(back_populates="menus")

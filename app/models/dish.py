"""Dish ORM model."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.models.restaurant import RestaurantDish


class Dish(Base):
    """A dish that restaurants can offer."""

    __tablename__ = "Dishes"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    restaurant_dishes: Mapped[list[RestaurantDish]] = relationship(
        back_populates="dish",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

"""Restaurant-related ORM models."""

from __future__ import annotations

from datetime import datetime, time
from typing import TYPE_CHECKING

from sqlalchemy import Float, ForeignKey, Integer, String, Text, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.utils.time import is_open_at

if TYPE_CHECKING:
    from app.models.dish import Dish


class Restaurant(Base):
    """A restaurant listed in the directory."""

    __tablename__ = "Restaurants"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cuisine_type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    opening_time: Mapped[time] = mapped_column(Time, nullable=False, default=time(0, 0))
    closing_time: Mapped[time] = mapped_column(Time, nullable=False, default=time(0, 0))
    price_range: Mapped[str | None] = mapped_column(String(16), nullable=True)
    version: Mapped[int] = mapped_column(Integer, nullable=False)

    restaurant_dishes: Mapped[list[RestaurantDish]] = relationship(
        back_populates="restaurant",
        cascade="all, delete-orphan",
    )

    __mapper_args__ = {"version_id_col": version}

    @property
    def is_open_now(self) -> bool:
        """Whether the local wall clock is inside today's opening window."""
        return is_open_at(self.opening_time, self.closing_time, datetime.now().time())

    @property
    def dishes(self) -> list[Dish]:
        return [link.dish for link in self.restaurant_dishes]


class RestaurantDish(Base):
    """Join row: this dish is offered at this restaurant."""

    __tablename__ = "RestaurantDishes"

    restaurant_id: Mapped[int] = mapped_column(
        ForeignKey("Restaurants.id", ondelete="CASCADE"),
        primary_key=True,
    )
    dish_id: Mapped[int] = mapped_column(
        ForeignKey("Dishes.id", ondelete="CASCADE"),
        primary_key=True,
    )

    restaurant: Mapped[Restaurant] = relationship(back_populates="restaurant_dishes")
    dish: Mapped[Dish] = relationship(back_populates="restaurant_dishes")

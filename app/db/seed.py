"""Database seeding helpers."""

import logging
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.config import settings
from app.models import Dish, Restaurant

logger = logging.getLogger(__name__)


def ensure_seed_data(session: Session) -> bool:
    """Populate a freshly created schema with the demo restaurant and dishes."""
    if not settings.seed_data:
        return False

    restaurant_count = session.scalar(select(func.count(Restaurant.id)))
    dish_count = session.scalar(select(func.count(Dish.id)))
    if restaurant_count or dish_count:
        return False

    session.add(
        Restaurant(
            name="Pasta Palace",
            image_url="https://example.com/images/pasta_palace.jpg",
            address="123 Noodle St, Flavor Town",
            rating=1.0,
        )
    )
    session.add_all(
        [
            Dish(name="Pizza", price=Decimal("10.00")),
            Dish(name="Pasta", price=Decimal("9.00")),
        ]
    )
    session.commit()
    logger.info("Seeded demo restaurant and dishes")
    return True

"""Dish catalog operations."""

import logging

from sqlalchemy.orm import Session

from app.db.repository import Repository, WriteResult
from app.models import Dish
from app.schemas.dish import DishForm

logger = logging.getLogger(__name__)


def list_dishes(db: Session) -> list[Dish]:
    return Repository(db, Dish).find()


def get_dish(db: Session, dish_id: int | None) -> Dish | None:
    if dish_id is None:
        return None
    return Repository(db, Dish).get(dish_id)


def create_dish(db: Session, form: DishForm) -> Dish | None:
    """Create and persist a dish."""
    dish = Dish(**form.to_values())
    if Repository(db, Dish).add(dish) is not WriteResult.SUCCESS:
        return None
    logger.info("Created dish id=%s name=%r", dish.id, dish.name)
    return dish


def update_dish(db: Session, dish_id: int, form: DishForm) -> WriteResult:
    result = Repository(db, Dish).update(dish_id, form.to_values(), expected_version=form.version)
    logger.info("Update of dish id=%s: %s", dish_id, result.value)
    return result


def delete_dish(db: Session, dish_id: int) -> WriteResult:
    """Delete dish and its restaurant assignments; not exposed over HTTP."""
    return Repository(db, Dish).delete(dish_id)

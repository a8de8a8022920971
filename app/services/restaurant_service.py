"""Restaurant directory operations shared by HTML and API routes."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session, joinedload, selectinload

from app.db.repository import Repository, WriteResult
from app.models import Dish, Restaurant, RestaurantDish
from app.schemas.restaurant import RestaurantForm

logger = logging.getLogger(__name__)


@dataclass
class RestaurantDetails:
    """Restaurant with its assigned dishes and the dishes still available to it."""

    restaurant: Restaurant
    dishes: list[Dish]
    available_dishes: list[Dish]


def list_restaurants(db: Session, search_string: str | None = None) -> list[Restaurant]:
    """Return all restaurants, or those whose name contains the search string.

    Matching uses SQL LIKE, so case sensitivity is the database's: SQLite
    compares ASCII letters case-insensitively.
    """
    repository = Repository(db, Restaurant)
    if not search_string:
        return repository.find()
    return repository.find(Restaurant.name.contains(search_string, autoescape=True))


def get_restaurant(db: Session, restaurant_id: int | None) -> Restaurant | None:
    if restaurant_id is None:
        return None
    return Repository(db, Restaurant).get(restaurant_id)


def get_restaurant_details(db: Session, restaurant_id: int | None) -> RestaurantDetails | None:
    """Load restaurant with dishes eagerly plus the complement set of dishes."""
    if restaurant_id is None:
        return None
    restaurant = Repository(db, Restaurant).get(
        restaurant_id,
        selectinload(Restaurant.restaurant_dishes).joinedload(RestaurantDish.dish),
    )
    if restaurant is None:
        return None

    assigned = restaurant.dishes
    assigned_ids = {dish.id for dish in assigned}
    dishes = Repository(db, Dish)
    available = dishes.find(Dish.id.not_in(assigned_ids)) if assigned_ids else dishes.find()
    return RestaurantDetails(restaurant=restaurant, dishes=assigned, available_dishes=available)


def create_restaurant(db: Session, form: RestaurantForm) -> Restaurant | None:
    restaurant = Restaurant(**form.to_values())
    if Repository(db, Restaurant).add(restaurant) is not WriteResult.SUCCESS:
        return None
    logger.info("Created restaurant id=%s name=%r", restaurant.id, restaurant.name)
    return restaurant


def update_restaurant(db: Session, restaurant_id: int, form: RestaurantForm) -> WriteResult:
    result = Repository(db, Restaurant).update(restaurant_id, form.to_values(), expected_version=form.version)
    logger.info("Update of restaurant id=%s: %s", restaurant_id, result.value)
    return result


def delete_restaurant(db: Session, restaurant_id: int) -> WriteResult:
    """Delete restaurant and, by cascade, its dish assignments."""
    result = Repository(db, Restaurant).delete(restaurant_id)
    logger.info("Delete of restaurant id=%s: %s", restaurant_id, result.value)
    return result


def assign_dish(db: Session, restaurant_id: int, dish_id: int) -> WriteResult:
    """Offer a dish at a restaurant.

    Both parents must exist; a pair that is already assigned is a conflict.
    """
    if Repository(db, Restaurant).get(restaurant_id) is None or Repository(db, Dish).get(dish_id) is None:
        return WriteResult.NOT_FOUND

    links = Repository(db, RestaurantDish)
    if links.get((restaurant_id, dish_id)) is not None:
        logger.warning("Dish id=%s is already assigned to restaurant id=%s", dish_id, restaurant_id)
        return WriteResult.CONFLICT

    result = links.add(RestaurantDish(restaurant_id=restaurant_id, dish_id=dish_id))
    if result is WriteResult.SUCCESS:
        logger.info("Assigned dish id=%s to restaurant id=%s", dish_id, restaurant_id)
    return result

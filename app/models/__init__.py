"""Application models package."""

from app.models.dish import Dish
from app.models.restaurant import Restaurant, RestaurantDish

__all__ = ["Restaurant", "Dish", "RestaurantDish"]

"""Schema exports."""

from app.schemas.dish import DishForm, DishResponse
from app.schemas.restaurant import RestaurantDetailResponse, RestaurantForm, RestaurantResponse

__all__ = [
    "DishForm",
    "DishResponse",
    "RestaurantForm",
    "RestaurantResponse",
    "RestaurantDetailResponse",
]

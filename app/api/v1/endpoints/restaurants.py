"""Restaurant directory endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models import Restaurant
from app.schemas.dish import DishResponse
from app.schemas.restaurant import RestaurantDetailResponse, RestaurantResponse
from app.services.restaurant_service import get_restaurant_details, list_restaurants

router: APIRouter = APIRouter()


@router.get("", response_model=list[RestaurantResponse])
def get_restaurants(
    search: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[Restaurant]:
    """List restaurants, optionally filtered by a name substring."""
    return list_restaurants(db, search)


@router.get("/{restaurant_id}", response_model=RestaurantDetailResponse)
def get_restaurant(restaurant_id: int, db: Session = Depends(get_db)) -> RestaurantDetailResponse:
    """Return one restaurant with assigned and still-available dishes."""
    view = get_restaurant_details(db, restaurant_id)
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found")
    summary = RestaurantResponse.model_validate(view.restaurant)
    return RestaurantDetailResponse(
        **summary.model_dump(),
        dishes=[DishResponse.model_validate(dish) for dish in view.dishes],
        available_dishes=[DishResponse.model_validate(dish) for dish in view.available_dishes],
    )

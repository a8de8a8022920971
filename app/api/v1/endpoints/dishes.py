"""Dish catalog endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models import Dish
from app.schemas.dish import DishResponse
from app.services.dish_service import list_dishes

router: APIRouter = APIRouter()


@router.get("", response_model=list[DishResponse])
def get_dishes(db: Session = Depends(get_db)) -> list[Dish]:
    """List every dish in the catalog."""
    return list_dishes(db)

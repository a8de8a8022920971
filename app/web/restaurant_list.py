"""HTML controller for the restaurant directory."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.db.repository import WriteResult
from app.db.session import get_db
from app.schemas.restaurant import RestaurantForm
from app.services.restaurant_service import (
    assign_dish,
    create_restaurant,
    delete_restaurant,
    get_restaurant,
    get_restaurant_details,
    list_restaurants,
    update_restaurant,
)
from app.web.rendering import field_errors, form_data, parse_int, render_template

router: APIRouter = APIRouter()
logger = logging.getLogger(__name__)

INDEX_URL = "/RestaurantList/Index"


def _restaurant_form_values(restaurant) -> dict[str, str]:
    return {
        "id": str(restaurant.id),
        "version": str(restaurant.version),
        "name": restaurant.name,
        "image_url": restaurant.image_url,
        "address": restaurant.address,
        "email": restaurant.email or "",
        "phone_number": restaurant.phone_number or "",
        "description": restaurant.description or "",
        "cuisine_type": restaurant.cuisine_type or "",
        "rating": f"{restaurant.rating:g}",
        "opening_time": restaurant.opening_time.strftime("%H:%M"),
        "closing_time": restaurant.closing_time.strftime("%H:%M"),
        "price_range": restaurant.price_range or "",
    }


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant not found")


@router.get("/", response_class=HTMLResponse)
@router.get("/RestaurantList", response_class=HTMLResponse)
@router.get("/RestaurantList/Index", response_class=HTMLResponse)
def index(request: Request, searchString: str | None = None, db: Session = Depends(get_db)):
    restaurants = list_restaurants(db, searchString)
    return render_template(
        request,
        "restaurant_list/index.html",
        {"restaurants": restaurants, "search_string": searchString or ""},
    )


@router.get("/RestaurantList/Details", response_class=HTMLResponse)
@router.get("/RestaurantList/Details/{restaurant_id}", response_class=HTMLResponse)
def details(request: Request, restaurant_id: str | None = None, db: Session = Depends(get_db)):
    view = get_restaurant_details(db, parse_int(restaurant_id))
    if view is None:
        raise _not_found()
    return render_template(request, "restaurant_list/details.html", {"view": view, "error": None})


@router.post("/RestaurantList/AddDish", response_class=RedirectResponse)
async def add_dish(request: Request, db: Session = Depends(get_db)):
    form = await form_data(request)
    restaurant_id = parse_int(form.get("restaurantId"))
    dish_id = parse_int(form.get("dishId"))
    if restaurant_id is None or dish_id is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="restaurantId and dishId are required")

    result = assign_dish(db, restaurant_id, dish_id)
    if result is WriteResult.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Restaurant or dish not found")
    if result is WriteResult.CONFLICT:
        view = get_restaurant_details(db, restaurant_id)
        return render_template(
            request,
            "restaurant_list/details.html",
            {"view": view, "error": "This dish is already offered at this restaurant."},
            status_code=status.HTTP_409_CONFLICT,
        )
    return RedirectResponse(url=f"/RestaurantList/Details/{restaurant_id}", status_code=303)


@router.get("/RestaurantList/Create", response_class=HTMLResponse)
def create_page(request: Request):
    return render_template(request, "restaurant_list/form.html", {"mode": "create", "form": {}, "errors": {}})


@router.post("/RestaurantList/Create", response_class=RedirectResponse)
async def create(request: Request, db: Session = Depends(get_db)):
    form = await form_data(request)
    try:
        payload = RestaurantForm.model_validate(form)
    except ValidationError as exc:
        return render_template(
            request,
            "restaurant_list/form.html",
            {"mode": "create", "form": form, "errors": field_errors(exc)},
        )
    if create_restaurant(db, payload) is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Restaurant could not be saved")
    return RedirectResponse(url=INDEX_URL, status_code=303)


@router.get("/RestaurantList/Edit", response_class=HTMLResponse)
@router.get("/RestaurantList/Edit/{restaurant_id}", response_class=HTMLResponse)
def edit_page(request: Request, restaurant_id: str | None = None, db: Session = Depends(get_db)):
    restaurant = get_restaurant(db, parse_int(restaurant_id))
    if restaurant is None:
        raise _not_found()
    return render_template(
        request,
        "restaurant_list/form.html",
        {"mode": "edit", "form": _restaurant_form_values(restaurant), "errors": {}},
    )


@router.post("/RestaurantList/Edit/{restaurant_id}", response_class=RedirectResponse)
async def edit(request: Request, restaurant_id: str, db: Session = Depends(get_db)):
    form = await form_data(request)
    key = parse_int(restaurant_id)
    if key is None or parse_int(form.get("id")) != key:
        raise _not_found()
    try:
        payload = RestaurantForm.model_validate(form)
    except ValidationError as exc:
        return render_template(
            request,
            "restaurant_list/form.html",
            {"mode": "edit", "form": form, "errors": field_errors(exc)},
        )

    result = update_restaurant(db, key, payload)
    if result is WriteResult.NOT_FOUND:
        raise _not_found()
    if result is WriteResult.CONFLICT:
        logger.warning("Rejected stale edit of restaurant id=%s", key)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="The restaurant was changed by someone else. Reload it and submit your changes again.",
        )
    return RedirectResponse(url=INDEX_URL, status_code=303)


@router.get("/RestaurantList/Delete", response_class=HTMLResponse)
@router.get("/RestaurantList/Delete/{restaurant_id}", response_class=HTMLResponse)
def delete_page(request: Request, restaurant_id: str | None = None, db: Session = Depends(get_db)):
    restaurant = get_restaurant(db, parse_int(restaurant_id))
    if restaurant is None:
        raise _not_found()
    return render_template(request, "restaurant_list/delete.html", {"restaurant": restaurant})


@router.post("/RestaurantList/Delete/{restaurant_id}", response_class=RedirectResponse)
def delete_confirmed(restaurant_id: str, db: Session = Depends(get_db)):
    key = parse_int(restaurant_id)
    if key is not None:
        delete_restaurant(db, key)
    return RedirectResponse(url=INDEX_URL, status_code=303)

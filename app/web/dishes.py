"""HTML controller for the dish catalog."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.db.repository import WriteResult
from app.db.session import get_db
from app.schemas.dish import DishForm
from app.services.dish_service import create_dish, get_dish, list_dishes, update_dish
from app.web.rendering import field_errors, form_data, parse_int, render_template

router: APIRouter = APIRouter(prefix="/Dishes")
logger = logging.getLogger(__name__)

INDEX_URL = "/Dishes"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Dish not found")


@router.get("", response_class=HTMLResponse)
@router.get("/Index", response_class=HTMLResponse)
def index(request: Request, db: Session = Depends(get_db)):
    return render_template(request, "dishes/index.html", {"dishes": list_dishes(db)})


@router.get("/Create", response_class=HTMLResponse)
def create_page(request: Request):
    return render_template(request, "dishes/form.html", {"mode": "create", "form": {}, "errors": {}})


@router.post("/Create", response_class=RedirectResponse)
async def create(request: Request, db: Session = Depends(get_db)):
    form = await form_data(request)
    try:
        payload = DishForm.model_validate(form)
    except ValidationError as exc:
        return render_template(request, "dishes/form.html", {"mode": "create", "form": form, "errors": field_errors(exc)})
    if create_dish(db, payload) is None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Dish could not be saved")
    return RedirectResponse(url=INDEX_URL, status_code=303)


@router.get("/Edit", response_class=HTMLResponse)
@router.get("/Edit/{dish_id}", response_class=HTMLResponse)
def edit_page(request: Request, dish_id: str | None = None, db: Session = Depends(get_db)):
    dish = get_dish(db, parse_int(dish_id))
    if dish is None:
        raise _not_found()
    form = {"id": str(dish.id), "version": str(dish.version), "name": dish.name, "price": f"{dish.price:.2f}"}
    return render_template(request, "dishes/form.html", {"mode": "edit", "form": form, "errors": {}})


@router.post("/Edit/{dish_id}", response_class=RedirectResponse)
async def edit(request: Request, dish_id: str, db: Session = Depends(get_db)):
    form = await form_data(request)
    key = parse_int(dish_id)
    if key is None or parse_int(form.get("id")) != key:
        raise _not_found()
    try:
        payload = DishForm.model_validate(form)
    except ValidationError as exc:
        return render_template(request, "dishes/form.html", {"mode": "edit", "form": form, "errors": field_errors(exc)})

    result = update_dish(db, key, payload)
    if result is WriteResult.NOT_FOUND:
        raise _not_found()
    if result is WriteResult.CONFLICT:
        logger.warning("Rejected stale edit of dish id=%s", key)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="The dish was changed by someone else. Reload it and submit your changes again.",
        )
    return RedirectResponse(url=INDEX_URL, status_code=303)

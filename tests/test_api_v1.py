"""JSON read API tests."""

from decimal import Decimal
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db import session as db_session
from app.db.base import Base
from app.main import app
import app.main as main_module
from app.models import Dish, Restaurant, RestaurantDish


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def test_restaurant_and_dish_endpoints(tmp_path: Path, monkeypatch) -> None:
    engine = _build_test_engine(tmp_path / "api.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    monkeypatch.setattr(settings, "seed_data", False)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(main_module, "engine", engine)
    monkeypatch.setattr(main_module, "SessionLocal", testing_session_local)

    with testing_session_local() as session:
        session.add_all(
            [
                Restaurant(id=1, name="Pasta Palace", image_url="u", address="a", rating=4.0),
                Restaurant(id=2, name="Burger Barn", image_url="u", address="b", rating=3.5),
                Dish(id=1, name="Pizza", price=Decimal("10")),
                Dish(id=2, name="Pasta", price=Decimal("9")),
            ]
        )
        session.flush()
        session.add(RestaurantDish(restaurant_id=1, dish_id=2))
        session.commit()

    with TestClient(app) as client:
        all_restaurants = client.get("/api/v1/restaurants")
        searched = client.get("/api/v1/restaurants", params={"search": "Burger"})
        detail = client.get("/api/v1/restaurants/1")
        missing = client.get("/api/v1/restaurants/999")
        dishes = client.get("/api/v1/dishes")
        api_root = client.get("/api")

    assert all_restaurants.status_code == 200
    assert [item["name"] for item in all_restaurants.json()] == ["Pasta Palace", "Burger Barn"]
    assert "is_open_now" in all_restaurants.json()[0]
    assert [item["id"] for item in searched.json()] == [2]

    assert detail.status_code == 200
    payload = detail.json()
    assert [dish["name"] for dish in payload["dishes"]] == ["Pasta"]
    assert [dish["id"] for dish in payload["available_dishes"]] == [1]

    assert missing.status_code == 404
    assert missing.json() == {"detail": "Restaurant not found"}
    assert [dish["name"] for dish in dishes.json()] == ["Pizza", "Pasta"]
    assert api_root.json()["docs"] == "/docs"

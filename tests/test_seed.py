"""Database seed behavior tests."""

from datetime import time
from pathlib import Path

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.db import session as db_session
from app.db.base import Base
from app.db.seed import ensure_seed_data
from app.main import app
import app.main as main_module
from app.models import Dish, Restaurant


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def test_seed_populates_empty_schema_once(tmp_path: Path, monkeypatch) -> None:
    """Seed should insert the demo restaurant and dishes only into an empty schema."""
    engine = _build_test_engine(tmp_path / "seed.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(settings, "seed_data", True)

    with testing_session_local() as session:
        assert ensure_seed_data(session) is True
    with testing_session_local() as session:
        assert ensure_seed_data(session) is False

    with testing_session_local() as session:
        restaurants = session.scalars(select(Restaurant)).all()
        dishes = session.scalars(select(Dish).order_by(Dish.id)).all()
        assert [restaurant.name for restaurant in restaurants] == ["Pasta Palace"]
        assert restaurants[0].address == "123 Noodle St, Flavor Town"
        assert restaurants[0].rating == 1.0
        assert restaurants[0].cuisine_type is None
        assert restaurants[0].price_range is None
        assert (restaurants[0].opening_time, restaurants[0].closing_time) == (time(0, 0), time(0, 0))
        assert [(dish.name, int(dish.price)) for dish in dishes] == [("Pizza", 10), ("Pasta", 9)]


def test_seed_skips_when_disabled(tmp_path: Path, monkeypatch) -> None:
    """Seed should do nothing when SEED_DATA is off."""
    engine = _build_test_engine(tmp_path / "seed_disabled.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    monkeypatch.setattr(settings, "seed_data", False)

    with testing_session_local() as session:
        assert ensure_seed_data(session) is False
        assert session.scalars(select(Restaurant)).all() == []


def test_startup_seeds_new_database(tmp_path: Path, monkeypatch) -> None:
    """Application startup should create the schema and show the seeded restaurant."""
    engine = _build_test_engine(tmp_path / "seed_startup.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    monkeypatch.setattr(settings, "seed_data", True)
    monkeypatch.setattr(db_session, "engine", engine)
    monkeypatch.setattr(db_session, "SessionLocal", testing_session_local)
    monkeypatch.setattr(main_module, "engine", engine)
    monkeypatch.setattr(main_module, "SessionLocal", testing_session_local)

    with TestClient(app) as client:
        response = client.get("/RestaurantList/Index")
        dishes = client.get("/Dishes")

    assert response.status_code == 200
    assert "Pasta Palace" in response.text
    assert "Pizza" in dishes.text
    assert "Pasta" in dishes.text

"""Dish service behavior tests."""

from decimal import Decimal
from pathlib import Path

from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.db.base import Base
from app.db.repository import WriteResult
from app.models import Dish, Restaurant, RestaurantDish
from app.schemas.dish import DishForm
from app.services.dish_service import create_dish, delete_dish, get_dish, list_dishes, update_dish


def _build_test_engine(db_file: Path) -> Engine:
    return create_engine(
        f"sqlite:///{db_file}",
        connect_args={"check_same_thread": False},
    )


def test_create_and_list_dishes(tmp_path: Path) -> None:
    engine = _build_test_engine(tmp_path / "dish_create.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    with testing_session_local() as session:
        create_dish(session, DishForm.model_validate({"name": "Pizza", "price": "10"}))
        create_dish(session, DishForm.model_validate({"name": "Pasta", "price": "9.50"}))

    with testing_session_local() as session:
        dishes = list_dishes(session)
        assert [(dish.name, dish.price) for dish in dishes] == [("Pizza", Decimal("10.00")), ("Pasta", Decimal("9.50"))]
        assert get_dish(session, None) is None


def test_update_dish_and_reject_stale_version(tmp_path: Path) -> None:
    engine = _build_test_engine(tmp_path / "dish_update.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    with testing_session_local() as session:
        session.add(Dish(id=1, name="Pizza", price=Decimal("10")))
        session.commit()

    with testing_session_local() as session:
        form = DishForm.model_validate({"id": "1", "version": "1", "name": "Pizza Margherita", "price": "11"})
        assert update_dish(session, 1, form) is WriteResult.SUCCESS

    with testing_session_local() as session:
        stale = DishForm.model_validate({"id": "1", "version": "1", "name": "Pizza Marinara", "price": "12"})
        assert update_dish(session, 1, stale) is WriteResult.CONFLICT
        assert update_dish(session, 2, stale) is WriteResult.NOT_FOUND

    with testing_session_local() as session:
        dish = session.get(Dish, 1)
        assert dish.name == "Pizza Margherita"
        assert dish.price == Decimal("11.00")


def test_deleting_dish_removes_its_assignments(tmp_path: Path) -> None:
    engine = _build_test_engine(tmp_path / "dish_delete.db")
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    with testing_session_local() as session:
        session.add(Restaurant(id=1, name="R", image_url="u", address="a"))
        session.add(Dish(id=1, name="Pizza", price=Decimal("10")))
        session.flush()
        session.add(RestaurantDish(restaurant_id=1, dish_id=1))
        session.commit()

    with testing_session_local() as session:
        assert delete_dish(session, 1) is WriteResult.SUCCESS

    with testing_session_local() as session:
        assert session.scalar(select(func.count()).select_from(RestaurantDish)) == 0
        assert session.get(Restaurant, 1) is not None

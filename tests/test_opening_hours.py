"""Opening window helper tests."""

from datetime import time

from app.models import Restaurant
from app.utils.time import is_open_at


def test_open_inside_daytime_window() -> None:
    assert is_open_at(time(9, 0), time(22, 0), time(12, 30)) is True


def test_window_bounds_are_inclusive() -> None:
    assert is_open_at(time(9, 0), time(22, 0), time(9, 0)) is True
    assert is_open_at(time(9, 0), time(22, 0), time(22, 0)) is True


def test_closed_outside_daytime_window() -> None:
    assert is_open_at(time(9, 0), time(22, 0), time(8, 59)) is False
    assert is_open_at(time(9, 0), time(22, 0), time(22, 1)) is False


def test_window_past_midnight() -> None:
    assert is_open_at(time(18, 0), time(2, 0), time(23, 30)) is True
    assert is_open_at(time(18, 0), time(2, 0), time(1, 15)) is True
    assert is_open_at(time(18, 0), time(2, 0), time(12, 0)) is False


def test_is_open_now_follows_clock_reading() -> None:
    always_open = Restaurant(name="Night Owl", image_url="u", address="a", opening_time=time(0, 0), closing_time=time(23, 59, 59, 999999))
    assert always_open.is_open_now is True

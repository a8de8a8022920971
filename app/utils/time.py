"""Opening-hours helpers."""

from __future__ import annotations

from datetime import time


def is_open_at(opening_time: time, closing_time: time, now_value: time) -> bool:
    """Return True when now is inside the opening window, both ends inclusive.

    A closing time earlier than the opening time means the window runs past
    midnight, e.g. 18:00-02:00.
    """
    if opening_time <= closing_time:
        return opening_time <= now_value <= closing_time
    return now_value >= opening_time or now_value <= closing_time

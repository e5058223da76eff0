# frontend/cluemart_web/countdown.py
import datetime
from typing import NamedTuple

TEASER_MESSAGES = [
    "Your market is about to come alive.",
    "The days of chaotic organising are almost over.",
    "One home for organisers, stallholders, and visitors.",
    "No more lost messages. No more crossed wires.",
    "What used to take six conversations will soon take one tap.",
    "Your stall deserves more attention. Very soon… it will get it.",
    "A market isn't just stalls, it's a community.",
    "Something new is coming to local events in Aotearoa.",
    "Sign up now – be the first to open the future of local markets.",
]


class TimeLeft(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int


def calculate_time_left(target: datetime.datetime, now: datetime.datetime = None) -> TimeLeft:
    """Splits the time until ``target`` into whole days/hours/minutes/seconds, clamped at zero."""
    now = now or datetime.datetime.now(datetime.timezone.utc)
    remaining = int((target - now).total_seconds())
    if remaining <= 0:
        return TimeLeft(0, 0, 0, 0)

    days, remaining = divmod(remaining, 24 * 60 * 60)
    hours, remaining = divmod(remaining, 60 * 60)
    minutes, seconds = divmod(remaining, 60)
    return TimeLeft(days, hours, minutes, seconds)


def render_countdown(time_left: TimeLeft) -> str:
    boxes = []
    for label, value in zip(("Days", "Hours", "Minutes", "Seconds"), time_left):
        boxes.append(
            f'<div class="time-box"><div class="time-value">{value:02d}</div>'
            f'<div class="time-label">{label}</div></div>'
        )
    return f'<div class="countdown">{"".join(boxes)}</div>'


def next_teaser_index(index: int) -> int:
    return (index + 1) % len(TEASER_MESSAGES)

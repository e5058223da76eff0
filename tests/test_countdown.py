import datetime

from cluemart_web.countdown import (
    TEASER_MESSAGES,
    TimeLeft,
    calculate_time_left,
    next_teaser_index,
    render_countdown,
)

NZDT = datetime.timezone(datetime.timedelta(hours=13))
LAUNCH = datetime.datetime(2025, 12, 25, 0, 1, tzinfo=NZDT)


def test_time_left_splits_into_units():
    now = LAUNCH - datetime.timedelta(days=3, hours=4, minutes=5, seconds=6, milliseconds=700)
    assert calculate_time_left(LAUNCH, now) == TimeLeft(3, 4, 5, 6)


def test_time_left_across_timezones():
    now = datetime.datetime(2025, 12, 24, 10, 1, tzinfo=datetime.timezone.utc)
    assert calculate_time_left(LAUNCH, now) == TimeLeft(0, 1, 0, 0)


def test_time_left_is_zero_after_launch():
    assert calculate_time_left(LAUNCH, LAUNCH) == TimeLeft(0, 0, 0, 0)
    assert calculate_time_left(LAUNCH, LAUNCH + datetime.timedelta(days=1)) == TimeLeft(0, 0, 0, 0)


def test_render_countdown_pads_values():
    html = render_countdown(TimeLeft(12, 3, 0, 9))
    assert '<div class="time-value">12</div><div class="time-label">Days</div>' in html
    assert '<div class="time-value">03</div><div class="time-label">Hours</div>' in html
    assert '<div class="time-value">00</div><div class="time-label">Minutes</div>' in html
    assert '<div class="time-value">09</div><div class="time-label">Seconds</div>' in html


def test_teaser_rotation_wraps_around():
    assert next_teaser_index(0) == 1
    assert next_teaser_index(len(TEASER_MESSAGES) - 1) == 0

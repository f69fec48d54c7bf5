from datetime import date, datetime, timezone

import pytest

from app.utils.timefmt import date_label, local_date, offset_tz, round_half_up, time_label

# 2024-10-07 (월) 15:05 UTC
TS = int(datetime(2024, 10, 7, 15, 5, tzinfo=timezone.utc).timestamp())


def test_time_label_two_digit_12h():
    assert time_label(TS, tz="UTC") == "03:05 PM"


def test_date_label_has_no_zero_padding():
    assert date_label(TS, tz="UTC") == "Mon, Oct 7"


def test_local_date_uses_timezone():
    assert local_date(TS, tz="UTC") == date(2024, 10, 7)
    assert local_date(TS, tz="Asia/Seoul") == date(2024, 10, 8)


@pytest.mark.parametrize("x, expected", [(0.0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (7.49, 7), (9.5, 10)])
def test_round_half_up(x: float, expected: int):
    assert round_half_up(x) == expected


def test_offset_timezone_labels():
    tz = offset_tz(-5 * 3600)
    assert time_label(TS, tz=tz) == "10:05 AM"
    assert date_label(TS, tz=tz) == "Mon, Oct 7"

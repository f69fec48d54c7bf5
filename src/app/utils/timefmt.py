# src/app/utils/timefmt.py
from __future__ import annotations
import math
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo

# "Asia/Seoul" 같은 IANA 이름 또는 tzinfo (도시 UTC 오프셋)
TzLike = Union[str, tzinfo]


def as_tzinfo(tz: TzLike) -> tzinfo:
    return ZoneInfo(tz) if isinstance(tz, str) else tz


def offset_tz(seconds: int) -> tzinfo:
    """OpenWeather 의 timezone 필드 (UTC 기준 초) -> 고정 오프셋 tzinfo"""
    return timezone(timedelta(seconds=int(seconds)))


def to_local(ts: int, *, tz: TzLike) -> datetime:
    """epoch 초 -> 지정 TZ의 aware datetime"""
    return datetime.fromtimestamp(int(ts), tz=as_tzinfo(tz))


def local_date(ts: int, *, tz: TzLike) -> date:
    return to_local(ts, tz=tz).date()


def time_label(ts: int, *, tz: TzLike) -> str:
    # ex) "03:00 PM"
    return to_local(ts, tz=tz).strftime("%I:%M %p")


def date_label(ts: int, *, tz: TzLike) -> str:
    # ex) "Mon, Oct 7" (일자는 0 패딩 없음)
    d = to_local(ts, tz=tz)
    return f"{d.strftime('%a, %b')} {d.day}"


def round_half_up(x: float) -> int:
    """0.5는 항상 올림 (파이썬 round()의 은행가 반올림 대신)"""
    return int(math.floor(x + 0.5))

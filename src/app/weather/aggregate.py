# src/app/weather/aggregate.py
from __future__ import annotations
from datetime import date
from typing import List, Sequence, Set, Tuple

from app.core.settings import DAILY_LIMIT, HOURLY_LIMIT
from app.utils.timefmt import TzLike, date_label, local_date, time_label
from app.weather.types import DailySummary, HourlySummary, RawForecastSample


def build_hourly(
    samples: Sequence[RawForecastSample], *, tz: TzLike, limit: int = HOURLY_LIMIT
) -> List[HourlySummary]:
    """
    "24시간 예보" = 앞에서부터 최대 24개 샘플.
    공급자가 3시간 단위라 실제 시간 범위는 24시간과 다를 수 있음 (보간 없음).
    """
    return [
        HourlySummary(
            time=time_label(s.dt, tz=tz),
            temperature=s.temp,
            icon=s.icon,
            description=s.description,
        )
        for s in samples[:limit]
    ]


def build_daily(
    samples: Sequence[RawForecastSample], *, tz: TzLike, max_days: int = DAILY_LIMIT
) -> List[DailySummary]:
    """
    날짜별 요약. 그날 처음 등장한 샘플이 대표값(기온/아이콘/설명),
    min/max 는 전체 목록에서 같은 날짜 샘플만 골라 계산.
    """
    daily: List[DailySummary] = []
    processed: Set[date] = set()

    for s in samples:
        if len(daily) >= max_days:
            break

        day = local_date(s.dt, tz=tz)
        if day in processed:
            continue

        # 같은 날짜 샘플 전부 (대표 샘플 자신 포함 -> 비어 있을 수 없음)
        temps = [x.temp for x in samples if local_date(x.dt, tz=tz) == day]

        daily.append(DailySummary(
            date=date_label(s.dt, tz=tz),
            temperature=s.temp,
            min_temp=min(temps),
            max_temp=max(temps),
            icon=s.icon,
            description=s.description,
        ))
        processed.add(day)

    return daily


def aggregate_forecast(
    samples: Sequence[RawForecastSample], *, tz: TzLike
) -> Tuple[List[HourlySummary], List[DailySummary]]:
    return build_hourly(samples, tz=tz), build_daily(samples, tz=tz)

# src/app/weather/assemble.py
from __future__ import annotations
from typing import Optional, Sequence

from app.utils.timefmt import TzLike, round_half_up, time_label
from app.weather.types import CurrentConditions, DailySummary, HourlySummary, NormalizedWeatherView


def assemble_view(
    current: CurrentConditions,
    *,
    uv_index: Optional[int],
    hourly: Sequence[HourlySummary],
    daily: Sequence[DailySummary],
    tz: TzLike,
) -> NormalizedWeatherView:
    # visibility: m -> km (반올림), 값이 없으면 None
    visibility_km = (
        round_half_up(current.visibility / 1000) if current.visibility is not None else None
    )

    return NormalizedWeatherView(
        name=current.name,
        country=current.country,
        temperature=current.temp,
        description=current.description,
        icon=current.icon,
        humidity=current.humidity,
        wind_speed=current.wind_speed,
        pressure=current.pressure,
        visibility=visibility_km,
        feels_like=current.feels_like,
        uv_index=uv_index or 0,
        sunrise=time_label(current.sunrise, tz=tz),
        sunset=time_label(current.sunset, tz=tz),
        forecast=tuple(daily),
        hourly_forecast=tuple(hourly),
    )

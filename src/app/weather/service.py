# src/app/weather/service.py
from __future__ import annotations
import asyncio
from typing import Optional

from app.core.settings import WEATHER_TZ
from app.utils.timefmt import TzLike, offset_tz
from app.weather.aggregate import aggregate_forecast
from app.weather.assemble import assemble_view
from app.weather.openweather import OpenWeatherClient
from app.weather.types import CurrentConditions, NormalizedWeatherView, RawForecastSample


async def fetch_weather_view(
    city: str, *, client: OpenWeatherClient, tz: Optional[TzLike] = WEATHER_TZ
) -> NormalizedWeatherView:
    """
    1) 현재 날씨 (실패 시 즉시 중단 -> 예보/UV 호출 안 함)
    2) 좌표 확보 후 예보 + UV 동시 조회 (UV 실패는 0, 예보 실패 시 UV 작업 취소)
    3) 예보 집계 -> 응답 조립
    tz 가 없으면 도시 자체의 UTC 오프셋으로 라벨을 만든다.
    """
    current = CurrentConditions.from_payload(await client.current(city))
    print(f"🌦️ [WEATHER] current ok: {current.name}, {current.country} ({current.lat}, {current.lon})")

    uv_task = asyncio.ensure_future(client.uv_index(current.lat, current.lon))
    try:
        forecast_data = await client.forecast(city)
    except BaseException:
        uv_task.cancel()
        # 취소가 끝날 때까지 기다림 (응답 후 남는 작업 없음)
        await asyncio.gather(uv_task, return_exceptions=True)
        raise
    uv_index = await uv_task

    zone = tz if tz is not None else offset_tz(current.utc_offset)
    samples = [RawForecastSample.from_payload(it) for it in forecast_data.get("list", [])]
    hourly, daily = aggregate_forecast(samples, tz=zone)
    print(f"🌦️ [WEATHER] samples={len(samples)} hourly={len(hourly)} daily={len(daily)} uv={uv_index}")

    return assemble_view(current, uv_index=uv_index, hourly=hourly, daily=daily, tz=zone)

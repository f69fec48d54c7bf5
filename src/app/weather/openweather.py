# src/app/weather/openweather.py
from __future__ import annotations
import math
import httpx
from typing import Any, Dict

from app.core.settings import OPENWEATHER_API_KEY, OPENWEATHER_TIMEOUT
from app.core.urls import ow_url
from app.utils.timefmt import round_half_up
from app.weather.errors import CityNotFound, MissingConfiguration, UpstreamUnavailable, require_city


class OpenWeatherClient:
    """
    OpenWeather 2.5 API (현재 날씨 / 5일·3시간 예보 / 자외선 지수).
    재시도 없음. URL은 core.urls 모듈에서 주입.
    """
    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float = OPENWEATHER_TIMEOUT,
    ) -> None:
        self.api_key = api_key or OPENWEATHER_API_KEY
        if not self.api_key:
            raise MissingConfiguration("OpenWeather API key is not configured")
        self.base_url = base_url
        self.timeout = timeout

    async def _get(self, path_key: str, params: Dict[str, Any]) -> httpx.Response:
        url = ow_url(path_key, base=self.base_url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params={**params, "appid": self.api_key})

    async def _get_json(self, path_key: str, params: Dict[str, Any]) -> Dict[str, Any]:
        try:
            r = await self._get(path_key, params)
        except httpx.HTTPError as e:
            raise UpstreamUnavailable(path_key, reason=f"{type(e).__name__}: {e}") from e

        if r.status_code == 404 and path_key == "current":
            raise CityNotFound(params.get("q", ""))
        if not r.is_success:
            raise UpstreamUnavailable(path_key, status_code=r.status_code)
        return r.json()

    async def current(self, city: str) -> Dict[str, Any]:
        require_city(city)
        return await self._get_json("current", {"q": city, "units": "metric"})

    async def forecast(self, city: str) -> Dict[str, Any]:
        require_city(city)
        return await self._get_json("forecast3h", {"q": city, "units": "metric"})

    async def uv_index(self, lat: float, lon: float) -> int:
        """실패해도 요청 전체를 깨지 않음 -> 0 으로 대체"""
        try:
            r = await self._get("uvi", {"lat": lat, "lon": lon})
            if not r.is_success:
                print(f"⚠️ [WEATHER] UV index 응답 실패 status={r.status_code} -> 0")
                return 0
            value = r.json().get("value")
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            print(f"⚠️ [WEATHER] UV index 조회 실패 ({type(e).__name__}: {e}) -> 0")
            return 0

        try:
            uv = float(value or 0)
        except (TypeError, ValueError):
            return 0
        # Infinity / NaN 도 json 으로 들어올 수 있음
        if not math.isfinite(uv):
            print(f"⚠️ [WEATHER] UV index 값 이상 ({value!r}) -> 0")
            return 0
        return round_half_up(uv)

# src/app/weather/errors.py
from __future__ import annotations


class WeatherError(Exception):
    """날씨 조회 과정의 기본 예외"""


class MissingParameter(WeatherError):
    """필수 쿼리 파라미터(city) 누락"""


class MissingConfiguration(WeatherError):
    """OPENWEATHER_API_KEY 미설정"""


class CityNotFound(WeatherError):
    """공급자가 도시를 찾지 못함 (404)"""

    def __init__(self, city: str) -> None:
        super().__init__(f"city not found: {city!r}")
        self.city = city


class UpstreamUnavailable(WeatherError):
    """네트워크 오류 또는 404 이외의 비정상 응답"""

    def __init__(self, endpoint: str, status_code: int | None = None, reason: str = "") -> None:
        detail = f"status={status_code}" if status_code is not None else reason
        super().__init__(f"{endpoint} unavailable ({detail})")
        self.endpoint = endpoint
        self.status_code = status_code


def require_city(city: str | None) -> str:
    """공백 제거 후 비어 있으면 MissingParameter"""
    if not city or not city.strip():
        raise MissingParameter("City parameter is required")
    return city.strip()

# src/app/weather/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


def _condition(payload: Dict[str, Any]) -> Dict[str, Any]:
    # weather 배열이 비어 있으면 빈 아이콘/설명으로 대체
    return (payload.get("weather") or [{}])[0]


@dataclass(frozen=True)
class RawForecastSample:
    """3시간 단위 예보 한 칸 (forecast 응답의 list 원소)"""
    dt: int
    temp: float
    icon: str
    description: str

    @classmethod
    def from_payload(cls, item: Dict[str, Any]) -> "RawForecastSample":
        cond = _condition(item)
        return cls(
            dt=int(item["dt"]),
            temp=float(item["main"]["temp"]),
            icon=cond.get("icon", ""),
            description=cond.get("description", ""),
        )


@dataclass(frozen=True)
class CurrentConditions:
    name: str
    country: str
    lat: float
    lon: float
    temp: float
    feels_like: float
    humidity: int
    wind_speed: float
    pressure: int
    visibility: Optional[int]   # meters
    sunrise: int
    sunset: int
    icon: str
    description: str
    utc_offset: int = 0         # seconds (payload "timezone")

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "CurrentConditions":
        main, sys_, cond = data["main"], data["sys"], _condition(data)
        return cls(
            name=data["name"],
            country=sys_.get("country", ""),
            lat=float(data["coord"]["lat"]),
            lon=float(data["coord"]["lon"]),
            temp=float(main["temp"]),
            feels_like=float(main["feels_like"]),
            humidity=int(main["humidity"]),
            wind_speed=float(data["wind"]["speed"]),
            pressure=int(main["pressure"]),
            visibility=data.get("visibility"),
            sunrise=int(sys_["sunrise"]),
            sunset=int(sys_["sunset"]),
            icon=cond.get("icon", ""),
            description=cond.get("description", ""),
            utc_offset=int(data.get("timezone") or 0),
        )


@dataclass(frozen=True)
class HourlySummary:
    time: str
    temperature: float
    icon: str
    description: str


@dataclass(frozen=True)
class DailySummary:
    date: str
    temperature: float   # 그날 첫 샘플 기온
    min_temp: float
    max_temp: float
    icon: str
    description: str


@dataclass(frozen=True)
class NormalizedWeatherView:
    name: str
    country: str
    temperature: float
    description: str
    icon: str
    humidity: int
    wind_speed: float
    pressure: int
    visibility: Optional[int]   # km
    feels_like: float
    uv_index: int
    sunrise: str
    sunset: str
    forecast: Tuple[DailySummary, ...]
    hourly_forecast: Tuple[HourlySummary, ...]

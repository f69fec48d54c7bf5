# src/app/core/urls.py
from __future__ import annotations
import os
from typing import Final

# 베이스 도메인은 .env로 덮어쓸 수 있게
OPENWEATHER_BASE: Final[str] = os.getenv("OPENWEATHER_BASE", "https://api.openweathermap.org")

# 경로 상수 (도메인과 분리)
OPENWEATHER_PATHS = {
    # 현재 날씨 (도시명 검색)
    "current": "/data/2.5/weather",
    # 무료 5일/3시간 예보
    "forecast3h": "/data/2.5/forecast",
    # 자외선 지수 (위경도)
    "uvi": "/data/2.5/uvi",
}

def ow_url(path_key: str, *, base: str | None = None) -> str:
    """
    OpenWeather endpoint 빌더.
    ex) ow_url("forecast3h") -> "https://api.openweathermap.org/data/2.5/forecast"
        ow_url("uvi", base="http://localhost:8080") -> "http://localhost:8080/data/2.5/uvi"
    """
    root = (base or OPENWEATHER_BASE).rstrip("/")
    path = OPENWEATHER_PATHS[path_key]
    return f"{root}{path}"

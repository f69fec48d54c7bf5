# src/app/core/settings.py
from __future__ import annotations
import os

import config  # noqa: F401  (.env 로드)

# 라벨(시각/날짜) 포맷에 사용할 타임존 (IANA 이름).
# 비워 두면 조회한 도시의 UTC 오프셋(현재 날씨 응답의 timezone)을 사용
WEATHER_TZ = os.getenv("WEATHER_TZ", "").strip() or None

OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")
OPENWEATHER_TIMEOUT = float(os.getenv("OPENWEATHER_TIMEOUT", "7.0"))

# 예보 요약 개수
HOURLY_LIMIT = 24
DAILY_LIMIT = 7

# src/app/api/weather.py
from typing import Optional
from fastapi import APIRouter
from fastapi.responses import JSONResponse
import traceback

from app.models.schemas import ErrorResponse, WeatherResponse
from app.weather.errors import (
    CityNotFound, MissingConfiguration, MissingParameter, UpstreamUnavailable, require_city,
)
from app.weather.openweather import OpenWeatherClient
from app.weather.service import fetch_weather_view

router = APIRouter()

CITY_NOT_FOUND = "City not found in our cosmic database"
GENERIC_FAILURE = "Failed to fetch weather data from the cosmos"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.get(
    "/weather",
    response_model=WeatherResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_weather(city: Optional[str] = None):
    """
    도시 날씨 조회 API
    - Query: city (필수)
    - 현재 날씨 + 24시간(샘플 24개) + 최대 7일 요약
    """
    # 1️⃣ 파라미터 검증 (업스트림 호출 전)
    try:
        city = require_city(city)
    except MissingParameter as e:
        print("❌ [WEATHER] city 파라미터 누락")
        return _error(400, str(e))

    # 2️⃣ API 키 확인
    try:
        client = OpenWeatherClient()
    except MissingConfiguration as e:
        print(f"❌ [WEATHER] 설정 오류: {e}")
        return _error(500, str(e))

    # 3️⃣ 조회 + 집계
    try:
        view = await fetch_weather_view(city, client=client)

    except CityNotFound:
        print(f"⚠️ [WEATHER] 도시 없음: {city!r}")
        return _error(404, CITY_NOT_FOUND)

    except UpstreamUnavailable as e:
        print(f"❌ [WEATHER] 업스트림 오류: {e}")
        return _error(500, GENERIC_FAILURE)

    except Exception as e:
        print(f"❌ [Unexpected Error] {type(e)}: {str(e)}")
        traceback.print_exc()
        return _error(500, GENERIC_FAILURE)

    return WeatherResponse.from_view(view)

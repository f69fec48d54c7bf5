import argparse
import asyncio
import json
import sys
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.settings import WEATHER_TZ
from app.models.schemas import WeatherResponse
from app.weather.errors import MissingParameter, WeatherError, require_city
from app.weather.openweather import OpenWeatherClient
from app.weather.service import fetch_weather_view


def zone_name(value: str) -> str:
    """argparse type: 존재하는 IANA 타임존인지 확인"""
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        raise argparse.ArgumentTypeError(f"알 수 없는 타임존: {value!r}")
    return value


def run(city: str, tz: Optional[str]) -> dict:
    client = OpenWeatherClient()
    view = asyncio.run(fetch_weather_view(city, client=client, tz=tz))
    return WeatherResponse.from_view(view).model_dump(by_alias=True)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="도시 날씨 조회 (OpenWeather) → 정규화 JSON 출력")
    parser.add_argument("--city", type=str, required=True)
    parser.add_argument(
        "--tz", type=zone_name, default=WEATHER_TZ,
        help="시각/날짜 라벨 타임존 (기본: WEATHER_TZ, 없으면 도시 현지 시각)",
    )
    args = parser.parse_args(argv)

    try:
        city = require_city(args.city)
    except MissingParameter as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    try:
        data = run(city, args.tz)
    except WeatherError as e:
        print(f"❌ 조회 실패: {e}", file=sys.stderr)
        return 1
    except (KeyError, TypeError, ValueError) as e:
        # 응답 형식이 예상과 다름
        print(f"❌ 응답 파싱 실패: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(json.dumps(data, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

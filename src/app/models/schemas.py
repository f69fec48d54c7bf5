# src/app/models/schemas.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.weather.types import DailySummary, HourlySummary, NormalizedWeatherView

# ===== Response =====
# 프론트가 쓰는 camelCase 필드명은 alias 로 맞춤

class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ForecastItem(_CamelModel):
    date: str = Field(..., description='"Mon, Oct 7"')
    temperature: float = Field(..., description="그날 첫 샘플 기온")
    min_temp: float = Field(..., alias="minTemp")
    max_temp: float = Field(..., alias="maxTemp")
    description: str
    icon: str

    @classmethod
    def from_summary(cls, d: DailySummary) -> "ForecastItem":
        return cls(
            date=d.date, temperature=d.temperature,
            min_temp=d.min_temp, max_temp=d.max_temp,
            description=d.description, icon=d.icon,
        )


class HourlyForecastItem(_CamelModel):
    time: str = Field(..., description='"03:00 PM"')
    temperature: float
    icon: str
    description: str

    @classmethod
    def from_summary(cls, h: HourlySummary) -> "HourlyForecastItem":
        return cls(time=h.time, temperature=h.temperature, icon=h.icon, description=h.description)


class WeatherResponse(_CamelModel):
    name: str
    country: str
    temperature: float
    description: str
    icon: str
    humidity: int
    wind_speed: float = Field(..., alias="windSpeed")
    pressure: int
    visibility: Optional[int] = Field(None, description="km")
    feels_like: float = Field(..., alias="feelsLike")
    uv_index: int = Field(0, alias="uvIndex")
    sunrise: str
    sunset: str
    forecast: List[ForecastItem]
    hourly_forecast: List[HourlyForecastItem] = Field(..., alias="hourlyForecast")

    @classmethod
    def from_view(cls, v: NormalizedWeatherView) -> "WeatherResponse":
        return cls(
            name=v.name,
            country=v.country,
            temperature=v.temperature,
            description=v.description,
            icon=v.icon,
            humidity=v.humidity,
            wind_speed=v.wind_speed,
            pressure=v.pressure,
            visibility=v.visibility,
            feels_like=v.feels_like,
            uv_index=v.uv_index,
            sunrise=v.sunrise,
            sunset=v.sunset,
            forecast=[ForecastItem.from_summary(d) for d in v.forecast],
            hourly_forecast=[HourlyForecastItem.from_summary(h) for h in v.hourly_forecast],
        )


class ErrorResponse(BaseModel):
    error: str

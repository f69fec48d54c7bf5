"""Shared test fixtures."""

from typing import Any, Dict, List, Optional, Tuple

import pytest
import respx
from fastapi.testclient import TestClient

from app.server import create_app
from app.tests.test_data import BASE_URL, TWO_DAY_ITEMS, current_payload, forecast_payload


class FakeWeatherClient:
    """OpenWeatherClient 대역 (네트워크 없음, 호출 기록)"""

    def __init__(
        self,
        current: Optional[Dict[str, Any]] = None,
        forecast: Optional[Dict[str, Any]] = None,
        uv: int = 5,
        current_exc: Optional[Exception] = None,
        forecast_exc: Optional[Exception] = None,
    ) -> None:
        self._current = current if current is not None else current_payload()
        self._forecast = forecast if forecast is not None else forecast_payload(TWO_DAY_ITEMS)
        self._uv = uv
        self._current_exc = current_exc
        self._forecast_exc = forecast_exc
        self.calls: List[Tuple[str, Any]] = []

    async def current(self, city: str) -> Dict[str, Any]:
        self.calls.append(("current", city))
        if self._current_exc:
            raise self._current_exc
        return self._current

    async def forecast(self, city: str) -> Dict[str, Any]:
        self.calls.append(("forecast", city))
        if self._forecast_exc:
            raise self._forecast_exc
        return self._forecast

    async def uv_index(self, lat: float, lon: float) -> int:
        self.calls.append(("uv_index", (lat, lon)))
        return self._uv

    @property
    def endpoints(self) -> List[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def install_fake_client(monkeypatch):
    """app.api.weather 가 생성하는 클라이언트를 FakeWeatherClient 로 교체"""
    created: List[FakeWeatherClient] = []

    def _install(**kwargs) -> List[FakeWeatherClient]:
        def _factory(*args, **kw):
            c = FakeWeatherClient(**kwargs)
            created.append(c)
            return c

        monkeypatch.setattr("app.api.weather.OpenWeatherClient", _factory)
        return created

    return _install


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def ow_mock():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        yield router

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from core.config import AppSettings

IP_URL = "https://ip.example.test/?format=json"
GEO_URL = "https://geo.example.test/json/{ip}"
PASS_URL = "http://passes.example.test/iss-pass.json"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        ip_lookup_url=IP_URL,
        geolocation_url=GEO_URL,
        flyover_url=PASS_URL,
        http_timeout_seconds=5,
    )


@pytest.fixture
def make_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory

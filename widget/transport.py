from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from widget.contracts import WeatherReport
from widget.errors import HttpStatusError, NoDataError, PayloadError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_WEATHER_SERVICE_URL = "http://goweather.xyz"


class WeatherServiceClient:
    """Client for the ``/weather/<city>`` endpoint of the weather service.

    Failures come back as typed exceptions so callers never have to look at
    message text: a response with a non-2xx status raises ``HttpStatusError``,
    a request that never got a response raises ``TransportError`` and a body
    that is not JSON raises ``PayloadError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_WEATHER_SERVICE_URL,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def url_for(self, city: str) -> str:
        return f"{self.base_url}/weather/{quote(city, safe='')}"

    async def fetch(self, city: str) -> Any:
        url = self.url_for(city)
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, follow_redirects=True
            ) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Request to {url} failed: {exc!r}"
            ) from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code)

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise PayloadError(f"Invalid JSON from {url}") from exc


def parse_report(payload: Any, city: str) -> WeatherReport:
    if not isinstance(payload, dict):
        raise NoDataError(city)
    report = WeatherReport.model_validate(payload)
    if not report.temperature:
        raise NoDataError(city)
    return report

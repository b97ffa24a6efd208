from __future__ import annotations

import logging

from widget.catalog import CityCatalog
from widget.contracts import Severity, UIState
from widget.errors import (
    NoDataError,
    PayloadError,
    TransportError,
    ValidationError,
    WeatherServiceError,
)
from widget.surface import LOADING_TEXT, PLACEHOLDER_TEXT, RenderSurface
from widget.transport import WeatherServiceClient, parse_report

logger = logging.getLogger(__name__)

SELECT_CITY_MESSAGE = "Please select a city."
CLEARED_MESSAGE = "Weather display cleared."


class WeatherRequestController:
    """Drives one weather lookup at a time through a render surface.

    States: idle, loading, success, no data and error. Both action controls
    are disabled only while loading; every request ends in a settled state
    with the controls enabled again, whatever the outcome.
    """

    def __init__(
        self,
        surface: RenderSurface,
        client: WeatherServiceClient,
        catalog: CityCatalog | None = None,
    ) -> None:
        self.surface = surface
        self.client = client
        self.catalog = catalog or CityCatalog()
        self._selected_city: str | None = None
        self._state = UIState.idle()

    @property
    def state(self) -> UIState:
        return self._state

    @property
    def selected_city(self) -> str | None:
        return self._selected_city

    def initialize(self) -> None:
        self.surface.show_placeholder(PLACEHOLDER_TEXT)
        self.surface.set_controls_enabled(True)
        self.select_city(self.catalog.default)

    def select_city(self, city: str | None) -> None:
        if city and city not in self.catalog:
            raise ValidationError(f"Unknown city: {city}")
        self._selected_city = city or None

    async def request_weather(self) -> UIState:
        city = self._selected_city
        if not city:
            error = ValidationError(SELECT_CITY_MESSAGE)
            self.surface.show_banner(error.message, Severity.ERROR)
            self._state = UIState.failure(error.message, error)
            return self._state

        self._enter_loading(city)
        try:
            payload = await self.client.fetch(city)
            report = parse_report(payload, city)
        except NoDataError:
            logger.info("No weather data for %s", city)
            self.surface.show_no_data(city)
            self._state = UIState.no_data(city)
        except WeatherServiceError as exc:
            logger.error("Error fetching weather data for %s", city, exc_info=exc)
            message = self._failure_message(city, exc)
            self.surface.show_error(message)
            self.surface.show_banner(message, Severity.ERROR)
            self._state = UIState.failure(message, exc, city)
        else:
            logger.info("Weather data for %s loaded", city)
            self.surface.show_weather(city, report)
            self.surface.show_banner(
                f"Weather data for {city} loaded successfully!", Severity.SUCCESS
            )
            self._state = UIState.success(report, city)
        finally:
            self.surface.set_loading(False)
            self.surface.set_controls_enabled(True)
        return self._state

    def clear_display(self) -> None:
        logger.debug("Clearing weather display")
        self.surface.show_placeholder(PLACEHOLDER_TEXT)
        self.surface.hide_banner()
        self.surface.show_banner(CLEARED_MESSAGE, Severity.INFO)
        self._state = UIState.idle()

    def _enter_loading(self, city: str) -> None:
        logger.info("Requesting weather for %s", city)
        self._state = UIState.loading(city)
        self.surface.show_placeholder(LOADING_TEXT)
        self.surface.hide_banner()
        self.surface.set_loading(True)
        self.surface.set_controls_enabled(False)

    @staticmethod
    def _failure_message(city: str, exc: WeatherServiceError) -> str:
        message = f"Failed to retrieve weather for {city}."
        if isinstance(exc, (TransportError, PayloadError)):
            return f"{message} {exc.hint}"
        return f"{message} {exc.message}"

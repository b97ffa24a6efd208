from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    VALIDATION = 'validation'
    HTTP_STATUS = 'http_status'
    TRANSPORT = 'transport'
    PAYLOAD = 'payload'
    NO_DATA = 'no_data'
    CATALOG = 'catalog'


class WidgetError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(WidgetError):
    """User input rejected before any network activity."""

    kind = ErrorKind.VALIDATION


class CatalogError(WidgetError):
    kind = ErrorKind.CATALOG


class WeatherServiceError(WidgetError):
    """Base for failures raised by the weather service client."""


class HttpStatusError(WeatherServiceError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int) -> None:
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class TransportError(WeatherServiceError):
    """The request never produced a response.

    Network outages, DNS failures and browser CORS rejections all look the
    same from here, so the message only names them as likely causes.
    """

    kind = ErrorKind.TRANSPORT
    hint = (
        "This often happens due to network issues or "
        "Cross-Origin Resource Sharing (CORS) policies."
    )


class PayloadError(WeatherServiceError):
    kind = ErrorKind.PAYLOAD
    hint = "The weather service returned an unreadable response."


class NoDataError(WidgetError):
    kind = ErrorKind.NO_DATA

    def __init__(self, city: str) -> None:
        super().__init__(f"No weather data available for {city}.")
        self.city = city

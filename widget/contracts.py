from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

from widget.errors import ErrorKind, WidgetError

MAX_FORECAST_DAYS = 3


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


class ForecastDay(BaseModel):
    day: str | None = None
    temperature: str | None = None
    wind: str | None = None

    @field_validator('day', 'temperature', 'wind', mode='before')
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)


class WeatherReport(BaseModel):
    temperature: str | None = None
    wind: str | None = None
    description: str | None = None
    forecast: list[ForecastDay] = []

    @field_validator('temperature', 'wind', 'description', mode='before')
    @classmethod
    def coerce_text(cls, value: Any) -> str | None:
        return _as_text(value)

    @field_validator('forecast', mode='before')
    @classmethod
    def trim_forecast(cls, value: Any) -> list:
        if not isinstance(value, list):
            return []
        days = [day for day in value if isinstance(day, (dict, ForecastDay))]
        return days[:MAX_FORECAST_DAYS]


class Severity(str, Enum):
    INFO = 'info'
    SUCCESS = 'success'
    WARNING = 'warning'
    ERROR = 'error'


class StyleDescriptor(BaseModel):
    class_name: str

    @property
    def classes(self) -> list[str]:
        return self.class_name.split()


class Banner(BaseModel):
    message: str
    severity: Severity
    style: StyleDescriptor


class UIStatus(str, Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    NO_DATA = 'no_data'
    ERROR = 'error'


class UIState(BaseModel):
    status: UIStatus
    city: str | None = None
    report: WeatherReport | None = None
    message: str | None = None
    error: ErrorKind | None = None

    @classmethod
    def idle(cls) -> UIState:
        return cls(status=UIStatus.IDLE)

    @classmethod
    def loading(cls, city: str) -> UIState:
        return cls(status=UIStatus.LOADING, city=city)

    @classmethod
    def success(cls, report: WeatherReport, city: str) -> UIState:
        return cls(status=UIStatus.SUCCESS, city=city, report=report)

    @classmethod
    def no_data(cls, city: str) -> UIState:
        return cls(
            status=UIStatus.NO_DATA,
            city=city,
            message=f"No weather data available for {city}.",
            error=ErrorKind.NO_DATA,
        )

    @classmethod
    def failure(
        cls, message: str, error: WidgetError, city: str | None = None
    ) -> UIState:
        return cls(
            status=UIStatus.ERROR, city=city, message=message, error=error.kind
        )

    @property
    def is_settled(self) -> bool:
        return self.status != UIStatus.LOADING


class CitySelection(BaseModel):
    city: str | None = None


class CityList(BaseModel):
    cities: list[str]
    default: str


class WidgetView(BaseModel):
    state: UIState
    display_html: str
    banner: Banner | None
    loading: bool
    controls_enabled: bool

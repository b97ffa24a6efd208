from __future__ import annotations

from abc import ABC, abstractmethod
from html import escape

from widget.contracts import Banner, Severity, WeatherReport
from widget.styling import ClassNameStyle, StyleStrategy

PLACEHOLDER_TEXT = 'Select a city and click "Get Weather" to see the forecast.'
LOADING_TEXT = "Fetching weather data..."
NO_FORECAST_TEXT = "No detailed forecast available."
MISSING = "N/A"


class RenderSurface(ABC):
    """Sink for display instructions, owned by the host UI."""

    @abstractmethod
    def show_placeholder(self, text: str) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def set_loading(self, on: bool) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def show_weather(self, city: str, report: WeatherReport) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def show_no_data(self, city: str) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def show_error(self, message: str) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def show_banner(self, message: str, severity: Severity) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def hide_banner(self) -> None:
        pass  # pragma: no cover

    @abstractmethod
    def set_controls_enabled(self, enabled: bool) -> None:
        pass  # pragma: no cover


def _text(value: str | None) -> str:
    return escape(value) if value else MISSING


class HtmlRenderSurface(RenderSurface):
    """Keeps the widget region as an HTML fragment plus banner/control flags."""

    def __init__(self, style: StyleStrategy | None = None) -> None:
        self.style = style or ClassNameStyle()
        self.display_html = ''
        self.banner: Banner | None = None
        self.loading = False
        self.controls_enabled = True
        self.show_placeholder(PLACEHOLDER_TEXT)

    def show_placeholder(self, text: str) -> None:
        self.display_html = f'<p class="text-gray-500">{escape(text)}</p>'

    def set_loading(self, on: bool) -> None:
        self.loading = on

    def show_weather(self, city: str, report: WeatherReport) -> None:
        self.display_html = (
            '<div class="w-full text-left">'
            '<h2 class="text-2xl font-bold text-blue-700 mb-4 text-center">'
            f'{escape(city)} Weather</h2>'
            '<div class="bg-blue-100 p-4 rounded-lg mb-4 shadow-sm border border-blue-300">'
            '<p class="text-lg mb-2"><strong class="text-blue-800">Temperature:</strong> '
            f'{_text(report.temperature)}</p>'
            '<p class="text-lg mb-2"><strong class="text-blue-800">Wind:</strong> '
            f'{_text(report.wind)}</p>'
            '<p class="text-lg"><strong class="text-blue-800">Description:</strong> '
            f'{_text(report.description)}</p>'
            '</div>'
            f'{self.forecast_html(report)}'
            '</div>'
        )

    @staticmethod
    def forecast_cards(report: WeatherReport) -> list[str]:
        return [
            '<div class="forecast-card bg-blue-100 p-3 rounded-lg border border-blue-300 shadow-sm">'
            f'<p class="font-medium text-blue-700">Day {_text(day.day)}:</p>'
            f'<p class="text-blue-600">Temperature: {_text(day.temperature)}</p>'
            f'<p class="text-blue-600">Wind: {_text(day.wind)}</p>'
            '</div>'
            for day in report.forecast
        ]

    def forecast_html(self, report: WeatherReport) -> str:
        cards = self.forecast_cards(report)
        if not cards:
            return f'<p class="text-gray-600">{NO_FORECAST_TEXT}</p>'
        return (
            '<h3 class="text-xl font-semibold mb-3 text-blue-800">'
            'Next 3 Days Forecast:</h3>'
            '<div class="grid grid-cols-1 md:grid-cols-3 gap-4 text-left">'
            f'{"".join(cards)}</div>'
        )

    def _notice(self, severity: Severity, heading: str, detail: str) -> str:
        heading_cls, detail_cls = self.style.panel_text(severity)
        return (
            '<div class="text-center">'
            f'<p class="{heading_cls} font-semibold mb-2">{escape(heading)}</p>'
            f'<p class="{detail_cls} text-sm">{escape(detail)}</p>'
            '</div>'
        )

    def show_no_data(self, city: str) -> None:
        self.display_html = self._notice(
            Severity.WARNING,
            f"No weather data available for {city}.",
            "The API might not have information for this city.",
        )

    def show_error(self, message: str) -> None:
        self.display_html = self._notice(
            Severity.ERROR,
            message,
            "Please check your internet connection or try again later.",
        )

    def show_banner(self, message: str, severity: Severity) -> None:
        self.banner = Banner(
            message=message,
            severity=severity,
            style=self.style.banner_style(severity),
        )

    def hide_banner(self) -> None:
        self.banner = None

    def set_controls_enabled(self, enabled: bool) -> None:
        self.controls_enabled = enabled

from unittest.mock import patch

import httpx
import pytest

from widget.catalog import EUROPEAN_CAPITALS, CityCatalog
from widget.contracts import Severity, UIStatus
from widget.controller import WeatherRequestController
from widget.errors import ErrorKind, ValidationError
from widget.surface import (
    LOADING_TEXT,
    NO_FORECAST_TEXT,
    PLACEHOLDER_TEXT,
    HtmlRenderSurface,
)
from widget.transport import WeatherServiceClient


@pytest.fixture
def surface():
    return HtmlRenderSurface()


@pytest.fixture
def controller(surface):
    controller = WeatherRequestController(
        surface=surface,
        client=WeatherServiceClient("http://weather.test"),
        catalog=CityCatalog(),
    )
    controller.initialize()
    return controller


@pytest.fixture
def weather_body():
    return {"temperature": "14 °C", "wind": "5 km/h", "description": "Cloudy"}


def json_response(status_code=200, body=None):
    return httpx.Response(status_code=status_code, json=body or {})


def test_initialize_selects_default_city(controller, surface):
    assert controller.selected_city == "London"
    assert controller.state.status == UIStatus.IDLE
    assert PLACEHOLDER_TEXT.replace('"', '&quot;') in surface.display_html
    assert surface.controls_enabled


def test_select_city_rejects_unknown_city(controller):
    with pytest.raises(ValidationError):
        controller.select_city("Atlantis")
    assert controller.selected_city == "London"


def test_select_city_empty_clears_selection(controller):
    controller.select_city("")
    assert controller.selected_city is None


@pytest.mark.asyncio
@pytest.mark.parametrize("city", EUROPEAN_CAPITALS)
async def test_request_uses_selected_city(controller, weather_body, city):
    controller.select_city(city)
    with patch(
        'httpx.AsyncClient.get', return_value=json_response(body=weather_body)
    ) as mock_get:
        state = await controller.request_weather()

    mock_get.assert_called_once()
    assert mock_get.call_args.args[0] == f"http://weather.test/weather/{city}"
    assert state.status == UIStatus.SUCCESS
    assert state.city == city


@pytest.mark.asyncio
async def test_request_without_city_never_hits_network(controller, surface):
    controller.select_city(None)
    with patch('httpx.AsyncClient.get') as mock_get:
        state = await controller.request_weather()

    mock_get.assert_not_called()
    assert state.status == UIStatus.ERROR
    assert state.error == ErrorKind.VALIDATION
    assert state.message == "Please select a city."
    assert surface.banner.severity == Severity.ERROR
    assert surface.controls_enabled
    assert not surface.loading


@pytest.mark.asyncio
async def test_request_success(controller, surface, weather_body):
    controller.select_city("Paris")
    with patch(
        'httpx.AsyncClient.get', return_value=json_response(body=weather_body)
    ):
        state = await controller.request_weather()

    assert state.status == UIStatus.SUCCESS
    assert state.report.temperature == "14 °C"
    assert state.report.wind == "5 km/h"
    assert state.report.description == "Cloudy"
    assert state.report.forecast == []
    assert "forecast-card" not in surface.display_html
    assert NO_FORECAST_TEXT in surface.display_html
    assert surface.banner.severity == Severity.SUCCESS
    assert surface.banner.message == "Weather data for Paris loaded successfully!"


@pytest.mark.asyncio
async def test_request_without_temperature_is_no_data(controller, surface):
    controller.select_city("Oslo")
    with patch(
        'httpx.AsyncClient.get',
        return_value=json_response(body={"wind": "5 km/h"}),
    ):
        state = await controller.request_weather()

    assert state.status == UIStatus.NO_DATA
    assert state.error == ErrorKind.NO_DATA
    assert state.city == "Oslo"
    assert "No weather data available for Oslo." in surface.display_html
    assert "text-red" not in surface.display_html
    assert surface.banner is None


@pytest.mark.asyncio
async def test_request_http_error(controller, surface):
    controller.select_city("Rome")
    with patch('httpx.AsyncClient.get', return_value=json_response(500)):
        state = await controller.request_weather()

    assert state.status == UIStatus.ERROR
    assert state.error == ErrorKind.HTTP_STATUS
    assert "500" in state.message
    assert state.message == (
        "Failed to retrieve weather for Rome. HTTP error! status: 500"
    )
    assert surface.banner.severity == Severity.ERROR
    assert "text-red-600" in surface.display_html


@pytest.mark.asyncio
async def test_request_transport_error(controller, surface):
    controller.select_city("Riga")
    with patch(
        'httpx.AsyncClient.get',
        side_effect=httpx.ConnectError("Connection refused"),
    ):
        state = await controller.request_weather()

    assert state.status == UIStatus.ERROR
    assert state.error == ErrorKind.TRANSPORT
    assert "network" in state.message
    assert "CORS" in state.message
    assert "Please check your internet connection" in surface.display_html


@pytest.mark.asyncio
async def test_request_unreadable_body(controller):
    controller.select_city("Sofia")
    with patch(
        'httpx.AsyncClient.get',
        return_value=httpx.Response(status_code=200, content=b"<html>"),
    ):
        state = await controller.request_weather()

    assert state.status == UIStatus.ERROR
    assert state.error == ErrorKind.PAYLOAD
    assert "CORS" not in state.message


@pytest.mark.asyncio
@pytest.mark.parametrize(
    'patch_kwargs',
    [
        {'return_value': httpx.Response(200, json={"temperature": "3 °C"})},
        {'return_value': httpx.Response(200, json={"wind": "1 km/h"})},
        {'return_value': httpx.Response(404)},
        {'side_effect': httpx.ConnectTimeout("timed out")},
    ],
)
async def test_controls_enabled_after_request(controller, surface, patch_kwargs):
    with patch('httpx.AsyncClient.get', **patch_kwargs):
        state = await controller.request_weather()

    assert state.is_settled
    assert surface.controls_enabled
    assert not surface.loading


@pytest.mark.asyncio
async def test_controls_disabled_while_loading(controller, surface, weather_body):
    seen = {}

    async def fake_get(url):
        seen['state'] = controller.state.status
        seen['controls_enabled'] = surface.controls_enabled
        seen['loading'] = surface.loading
        seen['display'] = surface.display_html
        seen['banner'] = surface.banner
        return json_response(body=weather_body)

    controller.clear_display()
    with patch('httpx.AsyncClient.get', side_effect=fake_get):
        await controller.request_weather()

    assert seen['state'] == UIStatus.LOADING
    assert seen['controls_enabled'] is False
    assert seen['loading'] is True
    assert LOADING_TEXT in seen['display']
    assert seen['banner'] is None


@pytest.mark.asyncio
async def test_forecast_cards_in_order(controller, surface):
    body = {
        "temperature": "20 °C",
        "wind": "10 km/h",
        "description": "Sunny",
        "forecast": [
            {"day": "1", "temperature": "21 °C", "wind": "11 km/h"},
            {"day": "2", "temperature": "22 °C", "wind": "12 km/h"},
            {"day": "3", "temperature": "23 °C", "wind": "13 km/h"},
        ],
    }
    controller.select_city("Madrid")
    with patch('httpx.AsyncClient.get', return_value=json_response(body=body)):
        state = await controller.request_weather()

    assert [day.day for day in state.report.forecast] == ["1", "2", "3"]
    html = surface.display_html
    assert html.count("forecast-card") == 3
    assert NO_FORECAST_TEXT not in html
    positions = [html.index(f"Temperature: 2{n} °C") for n in (1, 2, 3)]
    assert positions == sorted(positions)
    assert "Day 3:" in html
    assert "Wind: 13 km/h" in html


def test_clear_display_from_fresh_controller(controller, surface):
    controller.clear_display()

    assert controller.state.status == UIStatus.IDLE
    assert "Get Weather" in surface.display_html
    assert surface.banner.message == "Weather display cleared."
    assert surface.banner.severity == Severity.INFO


@pytest.mark.asyncio
async def test_clear_display_after_error(controller, surface):
    with patch('httpx.AsyncClient.get', return_value=json_response(503)):
        await controller.request_weather()

    controller.clear_display()

    assert controller.state.status == UIStatus.IDLE
    assert "text-red" not in surface.display_html
    assert surface.banner.severity == Severity.INFO
    assert controller.selected_city == "London"

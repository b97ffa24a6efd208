from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request

from widget import contracts
from widget.controller import WeatherRequestController
from widget.errors import ValidationError
from widget.surface import HtmlRenderSurface

router = APIRouter()


def get_controller(request: Request) -> WeatherRequestController:
    return request.app.state.controller


def build_view(controller: WeatherRequestController) -> contracts.WidgetView:
    surface = controller.surface
    if not isinstance(surface, HtmlRenderSurface):
        raise HTTPException(
            status_code=500,
            detail="Render surface does not support HTML views",
        )
    return contracts.WidgetView(
        state=controller.state,
        display_html=surface.display_html,
        banner=surface.banner,
        loading=surface.loading,
        controls_enabled=surface.controls_enabled,
    )


def validate_controls(controller: WeatherRequestController) -> None:
    if controller.state.status == contracts.UIStatus.LOADING:
        raise HTTPException(
            status_code=409,
            detail="A weather request is already in progress",
        )


@router.get("/widget/cities")
async def list_cities(
    controller: WeatherRequestController = Depends(get_controller),
) -> contracts.CityList:
    catalog = controller.catalog
    return contracts.CityList(cities=list(catalog), default=catalog.default)


@router.post("/widget/select")
async def select_city(
    selection: contracts.CitySelection,
    controller: WeatherRequestController = Depends(get_controller),
) -> contracts.UIState:
    try:
        controller.select_city(selection.city)
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc
    return controller.state


@router.post("/widget/weather")
async def get_weather(
    controller: WeatherRequestController = Depends(get_controller),
) -> contracts.WidgetView:
    validate_controls(controller)
    await controller.request_weather()
    return build_view(controller)


@router.post("/widget/clear")
async def clear_weather(
    controller: WeatherRequestController = Depends(get_controller),
) -> contracts.WidgetView:
    validate_controls(controller)
    controller.clear_display()
    return build_view(controller)


@router.get("/widget/view")
async def current_view(
    controller: WeatherRequestController = Depends(get_controller),
) -> contracts.WidgetView:
    return build_view(controller)

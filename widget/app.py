from __future__ import annotations

import copy
import logging.config

from fastapi import FastAPI

from config.settings import app_settings
from widget.api.weather import router as weather_router
from widget.catalog import CityCatalog, load_catalog
from widget.controller import WeatherRequestController
from widget.styling import get_style
from widget.surface import HtmlRenderSurface
from widget.transport import WeatherServiceClient

logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": app_settings.log_level,
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": app_settings.log_level,
    },
}


class AppBuilder:
    def __init__(self):
        self._app = FastAPI()
        self._api_prefix = "/api"
        self._log_to_file = False
        self._log_file_path = None
        self._file_log_level = None
        self._controller = None

    def set_api_prefix(self, prefix: str) -> AppBuilder:
        self._api_prefix = prefix
        return self

    def enable_file_logging(self, filename: str, log_level: str) -> AppBuilder:
        self._log_to_file = True
        self._log_file_path = filename
        self._file_log_level = log_level
        return self

    def set_controller(self, controller: WeatherRequestController) -> AppBuilder:
        self._controller = controller
        return self

    def _configure_file_logging(self):
        config = copy.deepcopy(logging_config)
        config['handlers']['file'] = {
            "class": "logging.FileHandler",
            "level": self._file_log_level,
            "filename": self._log_file_path,
            "formatter": "default",
        }
        config['root']['handlers'].append('file')
        logging.config.dictConfig(config)

    def build(self) -> FastAPI:
        if self._log_to_file:
            self._configure_file_logging()
        if self._controller is None:
            self._controller = build_controller()
        self._app.state.controller = self._controller
        self._app.include_router(
            weather_router, prefix=self._api_prefix, tags=['WeatherWidget']
        )
        return self._app


def build_controller() -> WeatherRequestController:
    catalog = (
        load_catalog(app_settings.catalog_path)
        if app_settings.catalog_path
        else CityCatalog()
    )
    controller = WeatherRequestController(
        surface=HtmlRenderSurface(get_style(app_settings.style)),
        client=WeatherServiceClient(
            app_settings.weather_service_url, app_settings.request_timeout
        ),
        catalog=catalog,
    )
    controller.initialize()
    return controller


def create_app() -> FastAPI:
    logging.config.dictConfig(logging_config)
    builder = AppBuilder().set_api_prefix(app_settings.api_prefix)
    if app_settings.enable_file_logging:
        builder.enable_file_logging(
            filename=app_settings.log_file_path,
            log_level=app_settings.log_level,
        )
    app = builder.build()
    return app

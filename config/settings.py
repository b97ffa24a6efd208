from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSetting(BaseSettings):
    log_level: str = 'DEBUG'
    api_prefix: str = '/api/v1'
    enable_file_logging: bool = False
    log_file_path: str = 'app.log'
    weather_service_url: str = 'http://goweather.xyz'
    request_timeout: float | None = None
    style: str = 'class_list'
    catalog_path: str | None = None

    model_config = SettingsConfigDict(env_prefix='WIDGET_')


app_settings = AppSetting()

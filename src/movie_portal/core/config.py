from logging import config as logging_config

from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger import LOGGING

logging_config.dictConfig(LOGGING)


# Валидирует настройки из .env
class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")
    project_name: str = "Movie Portal"
    es_url: str = "http://localhost:9200"
    es_index: str = "movies"
    # index.max_result_window по умолчанию
    es_list_size: int = 10000
    es_connect_max_time: int = 60
    api_host: str = "0.0.0.0"
    api_port: int = 8000


settings = Settings()

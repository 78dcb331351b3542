from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Folders API"
    api_v1_str: str = "/api/v1"
    environment: str = "dev"
    log_level: LogLevel = "INFO"

    # "sample" serves the built-in data set, "sql" reads folders from database_url
    folder_source: str = "sample"
    database_url: str = "sqlite:///./folders.db"

    page_size_default: int = 20
    page_size_max: int = 200

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()

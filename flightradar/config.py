# flightradar/config.py
from typing import Optional

import pytz
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # AviationStack
    AVIATIONSTACK_API_KEY: Optional[str] = None  # missing key degrades every tool call, never a startup fault
    AVIATIONSTACK_BASE_URL: str = "https://api.aviationstack.com/v1"
    AVIATIONSTACK_TIMEOUT_SECONDS: float = 12.0

    # Presentation
    DISPLAY_TZ: str = "UTC"

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING or ERROR

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("AVIATIONSTACK_API_KEY", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("DISPLAY_TZ")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown time zone: {value}")
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()

from functools import lru_cache
from zoneinfo import ZoneInfo

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_timezone: str = Field(default="UTC", alias="THROTTLE_TIMEZONE")
    log_level: str = Field(default="INFO", alias="THROTTLE_LOG_LEVEL")
    log_throttled: bool = Field(default=True, alias="THROTTLE_LOG_THROTTLED")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @computed_field
    @property
    def tzinfo(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.app_timezone)
        except Exception:
            return ZoneInfo("UTC")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

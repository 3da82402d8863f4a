from typing import List

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logger import get_logger

APP_VERSION = "0.1.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field("dev", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    content_site_hosts_raw: str = Field("dev.to", alias="CONTENT_SITE_HOSTS")
    content_api_base: str = Field("https://dev.to/api", alias="CONTENT_API_BASE")
    content_api_timeout_seconds: float = Field(default=10.0, alias="CONTENT_API_TIMEOUT_SECONDS")

    asset_timeout_seconds: float = Field(default=10.0, alias="ASSET_TIMEOUT_SECONDS")
    asset_max_bytes: int = Field(default=2 * 1024 * 1024, alias="ASSET_MAX_BYTES")

    cache_max_age_seconds: int = Field(default=3600, alias="CACHE_MAX_AGE_SECONDS")
    user_agent: str = Field(f"devcard/{APP_VERSION}", alias="USER_AGENT")

    @model_validator(mode="after")
    def validate_hosts(self):
        if not self.content_site_hosts:
            logger = get_logger("settings")
            logger.warning("CONTENT_SITE_HOSTS is empty; every url= parameter will be rejected")
        return self

    @property
    def content_site_hosts(self) -> List[str]:
        return [x.strip().lower() for x in self.content_site_hosts_raw.split(",") if x.strip()]

    @property
    def cache_control(self) -> str:
        return f"public, s-maxage={int(self.cache_max_age_seconds)}, stale-while-revalidate"


default_settings = Settings()
settings = default_settings

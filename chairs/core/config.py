from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration, loaded from the environment (and `.env`)."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Musical Chairs API"
    logging_level: str = Field(default="INFO", description="Root level for the chairs loggers")

    database_url: str = Field(default="sqlite:///./chairs.db", description="SQLAlchemy URL of the relational store")

    auth_url: Optional[str] = Field(default=None, description="Identity provider base URL")
    auth_service_key: Optional[str] = Field(default=None, description="API key sent to the identity provider")
    auth_timeout_seconds: float = 10.0

    cors_allowlist: str = Field(default="", description="Comma-separated list of allowed origins")

    # Cycle search bounds
    chains_default_max_len: int = 8
    chains_min_len: int = 2
    chains_max_len_cap: int = 15
    default_priority: int = 999

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_allowlist.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()

"""Runtime settings loaded from ``ASSESSQT_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from assessment_app.constants.assessment_constants import AUTO_ADVANCE_DELAY_MS
from assessment_app.constants.network_constants import (
    DEFAULT_FETCH_TIMEOUT_SECONDS,
    DEFAULT_HOST,
    DEFAULT_PORT,
)

_PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="ASSESSQT_",
        env_file=".env",
        extra="ignore",
    )

    data_dir: Path = Field(
        default=_PACKAGE_DATA_DIR,
        description="Directory holding Heading.csv and one question CSV per category",
    )
    state_path: Path = Field(
        default=Path.home() / ".assessqt" / "state.json",
        description="JSON file used as durable local storage",
    )
    resource_url: str | None = Field(
        default=None,
        description="Fetch CSV resources from this base URL instead of data_dir",
    )
    serve_resources: bool = Field(
        default=True,
        description="Serve data_dir over HTTP and fetch resources through it",
    )
    host: str = Field(default=DEFAULT_HOST, description="Resource server bind address")
    port: int = Field(default=DEFAULT_PORT, description="Resource server port")
    fetch_timeout_seconds: float = Field(default=DEFAULT_FETCH_TIMEOUT_SECONDS)
    auto_advance_delay_ms: int = Field(
        default=AUTO_ADVANCE_DELAY_MS,
        ge=0,
        description="Pause before moving on after a subcategory is completed",
    )
    log_level: str = Field(default="INFO")

    def local_resource_url(self) -> str:
        host = "127.0.0.1" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}"


@lru_cache
def get_settings() -> Settings:
    return Settings()

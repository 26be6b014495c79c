from typing import Literal

from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from readme_elements.core.palette import LEGACY_PI


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    environment: str = "development"
    release: str | None = None
    log_level: str = "INFO"
    sentry_dsn: str | None = None
    sentry_traces_sample_rate: float = 0.1

    palette: Literal["standard", "classic"] = "standard"
    ring_pi: float = LEGACY_PI
    calendar_navigation: bool = False

    github_repository: str | None = None
    github_api_base_url: str = "https://api.github.com"
    github_token: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

"""Runtime settings for the API server and dashboard.

Loaded from ``BITFROST_*`` environment variables (or a ``.env`` file).
The revenue engine itself takes no settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bitfrost_engine.config.presets import ScenarioName


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BITFROST_",
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Root log level (DEBUG, INFO, WARNING, ...)")

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    api_reload: bool = False

    # Tab / scenario selected when the dashboard opens
    default_scenario: ScenarioName = "base"


def load_settings() -> Settings:
    """Load and validate settings from the environment."""
    return Settings()

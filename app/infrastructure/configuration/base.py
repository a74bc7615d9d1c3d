"""Base classes shared by every settings section."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Variables come from the process environment first, then from ".env".
# Names are matched exactly; unrelated variables are ignored.
ENV_SETTINGS_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class IntegrationSettings(BaseSettings):
    """Settings for an external system the engine talks to (AWS)."""

    model_config = ENV_SETTINGS_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for the engine's own components (cache budget, store backend)."""

    model_config = ENV_SETTINGS_CONFIG

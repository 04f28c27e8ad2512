"""
Recipe Organizer - Configuration and settings.

Settings are read once from the environment (or .env) and passed explicitly
to the components that need them. Missing Azure OpenAI credentials abort
startup via ConfigurationError.
"""

from functools import lru_cache
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recipe_organizer.errors import ConfigurationError

REQUIRED_ENV_VARS = ("AZURE_OPENAI_ENDPOINT", "AZURE_OPENAI_API_KEY")


class Settings(BaseSettings):
    """
    Application settings.

    The Azure OpenAI endpoint and key are required. Everything else has a
    default that matches the production deployment.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Azure OpenAI
    azure_openai_endpoint: str
    azure_openai_api_key: str
    azure_openai_deployment: str = "gpt-4o-mini"
    azure_openai_api_version: str = "2024-08-01-preview"

    # gpt-4o-mini deployments only accept the default temperature and reject
    # anything else, so the parameter is left out of requests unless set here.
    extraction_temperature: float | None = None

    llm_timeout_seconds: float = 60.0
    llm_max_retries: int = 2

    # Web fetch
    scrape_timeout_seconds: float = 10.0

    # Application
    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    cors_origins: list[str] = ["*"]

    # LOG_PROMPTS=1 - write every LLM call to prompt_logs/ (dev only)
    log_prompts: bool = False

    @field_validator("azure_openai_endpoint", "azure_openai_api_key")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("azure_openai_endpoint")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_settings(**overrides) -> Settings:
    """
    Build Settings, turning a missing/blank credential into ConfigurationError.

    Keyword overrides take precedence over the environment (used by the CLI
    and tests).
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = sorted(
            {
                str(err["loc"][0]).upper()
                for err in e.errors()
                if err.get("loc") and str(err["loc"][0]).upper() in REQUIRED_ENV_VARS
            }
        )
        if missing:
            raise ConfigurationError(
                "Missing Azure OpenAI configuration. "
                f"Please set {' and '.join(missing)} in the environment or .env"
            ) from e
        raise ConfigurationError(f"Invalid configuration: {e}") from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()

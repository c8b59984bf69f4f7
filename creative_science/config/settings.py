"""Process-wide settings for the creative-science engine.

Covers the runtime environment and observability only; scoring behavior is
tuned separately through KnowledgeConfig (KNOWLEDGE_* variables).
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    """
    Runtime settings read from the environment (and an optional .env file).

    Variables are unprefixed so the usual names apply: ENVIRONMENT,
    LOG_LEVEL, METRICS_PORT, TRACING_ENABLED, OTEL_EXPORTER_OTLP_ENDPOINT,
    OTEL_SERVICE_NAME.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"
    log_level: LogLevel = "INFO"

    # Prometheus exporter, started on demand by the CLI
    metrics_port: int = Field(default=8000, ge=1, le=65535)

    # OpenTelemetry
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str | None = None
    otel_service_name: str = "creative-science"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case (LOG_LEVEL=debug)."""
        return v.strip().upper() if isinstance(v, str) else v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Settings loaded once per process.

    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()

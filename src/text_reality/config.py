"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (TEXT_REALITY_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class ParserSettings(BaseSettings):
    """Settings for the command parser."""

    profanity_filter: bool = Field(
        default=True,
        description="Scan player input for profanity and tag the command",
    )
    extra_profanity: list[str] = Field(
        default_factory=list,
        description="Additional words to add to the profanity blocklist",
    )
    default_vocabulary: bool = Field(
        default=True,
        description="Seed the synonym tables with the standard vocabulary",
    )
    vocabulary_file: Path | None = Field(
        default=None,
        description="JSON vocabulary file with game-specific synonyms",
    )

    model_config = {"env_prefix": "TEXT_REALITY_PARSER_"}


class OpenTelemetrySettings(BaseSettings):
    """Settings for opt-in OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable tracing",
    )
    service_name: str = Field(
        default="text-reality",
        description="Service name reported with spans",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (empty = console exporter only)",
    )

    model_config = {"env_prefix": "TEXT_REALITY_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    parser: ParserSettings = Field(
        default_factory=ParserSettings,
        description="Parser settings",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "TEXT_REALITY_"}


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()

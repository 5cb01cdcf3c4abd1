"""Application configuration using pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LOCATION_CHECK_",
        extra="ignore",
    )

    # Logging
    json_logs: bool = Field(
        default=False,
        description="Emit JSON log lines instead of pretty console output",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug-level logging",
    )

    # Lookup behaviour
    output_format: Literal["text", "json"] = Field(
        default="text",
        description="How lookup results are printed: tab-separated text or JSON lines",
    )
    strict_input: bool = Field(
        default=True,
        description="Drop characters not allowed in a location code before lookup",
    )

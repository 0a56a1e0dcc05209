"""Centralized configuration management with environment-aware defaults.

This module implements the configuration system using Pydantic Settings,
providing type-safe configuration with validation and environment variable
support.

Configuration sources (in order of precedence):
1. Environment variables
2. .env file in project root
3. Default values in model definitions

Nested sections use the ``__`` delimiter, for example
``RESPONSE_CONFIG__INDENT=true`` or ``LOG_CONFIG__LOG_LEVEL=DEBUG``.
"""

import os
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonresponse.core.constants import (
    DEFAULT_CODE_FIELD,
    DEFAULT_CONTENT_TYPE,
    DEFAULT_DATA_FIELD,
)

TransformerName = Literal[
    "default", "passthrough", "message_code", "message_code_excuse"
]


class LogConfig(BaseModel):
    """Simplified logging configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_formatter_type: Literal["console", "json"] | None = Field(
        default=None,
        description="Log output formatter. Auto-detected if not specified.",
    )


class ResponseConfig(BaseModel):
    """Initial values for the process-wide response options."""

    default_content_type: str = Field(
        default=DEFAULT_CONTENT_TYPE,
        description=(
            "Content-Type added when a response does not set one. "
            "An empty string disables it on the generic emit path."
        ),
    )
    indent: bool = Field(
        default=False,
        description="Emit tab-indented JSON instead of the compact form",
    )
    transformer: TransformerName = Field(
        default="default",
        description="Transformer installed at startup",
    )
    data_field: str = Field(
        default=DEFAULT_DATA_FIELD,
        min_length=1,
        description="Payload field name for the message_code transformers",
    )
    code_field: str = Field(
        default=DEFAULT_CODE_FIELD,
        min_length=1,
        description="Status code field name for the message_code transformers",
    )


class Settings(BaseSettings):
    """Main settings class for the library and its demo service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        env_nested_delimiter="__",
    )

    # Application settings
    app_name: str = Field(default="jsonresponse", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment the application is running in",
    )
    debug: bool = Field(default=True, description="Debug mode flag")

    # API settings
    api_host: str = Field(default="127.0.0.1", description="API host")
    api_port: int = Field(default=8000, description="API port")

    # Logging configuration
    log_config: LogConfig = Field(
        default_factory=LogConfig, description="Logging configuration"
    )

    # Response configuration
    response_config: ResponseConfig = Field(
        default_factory=ResponseConfig, description="Response configuration"
    )

    def model_post_init(self, __context: object) -> None:
        """Post initialization to set environment-based defaults."""
        super().model_post_init(__context)

        if self.log_config.log_formatter_type is None:
            self.log_config.log_formatter_type = self._detect_formatter()

    def _detect_formatter(self) -> Literal["console", "json"]:
        """Auto-detect log formatter based on environment."""
        # Containers on managed platforms want structured output
        if os.getenv("K_SERVICE") or os.getenv("AWS_EXECUTION_ENV"):
            return "json"
        if self.environment == "development":
            return "console"
        return "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
API Service Configuration Module

Centralized configuration management with Pydantic validation.
All environment variables are validated at startup to catch misconfigurations early.
"""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ServiceSettings(BaseSettings):
    """
    API service configuration with validation.

    All settings can be overridden via environment variables
    (PING_MESSAGE, CORS_ORIGINS, ENVIRONMENT, ...).
    """

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False, extra="ignore")

    # === Health ===
    ping_message: str = Field(
        default="ping",
        description="Message returned by GET /api/ping"
    )
    environment: str = Field(
        default="development",
        description="Environment: development, staging, production"
    )

    # === CORS ===
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins"
    )

    # === Generation ===
    generation_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        le=60,
        description="Simulated narrative generation latency in seconds (0-60)"
    )

    # === Logging ===
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    log_format: str = Field(default="simple", description="'simple' or 'json'")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is a known value."""
        allowed = {"development", "staging", "production"}
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"environment must be one of: {', '.join(sorted(allowed))}")
        return v_lower

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(f"Invalid log level: {v}")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in {"simple", "json"}:
            raise ValueError(f"log_format must be 'simple' or 'json', got {v!r}")
        return v

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    def validate_production_config(self) -> List[str]:
        """
        Validate configuration is suitable for production.

        Returns list of warning messages.
        """
        issues = []
        if self.is_production:
            if "*" in self.cors_origins_list:
                issues.append("WARNING: CORS_ORIGINS allows any origin in production")
            if self.generation_delay_seconds > 0:
                issues.append(
                    f"WARNING: simulated generation delay of {self.generation_delay_seconds}s in production"
                )
        return issues


@lru_cache()
def get_settings() -> ServiceSettings:
    """
    Get cached settings instance.

    Settings are loaded once and cached; tests call get_settings.cache_clear()
    after changing the environment.
    """
    return ServiceSettings()


def validate_config_on_startup() -> None:
    """
    Validate configuration at application startup.

    Raises ValueError with details if config is invalid.
    Logs warnings for non-critical issues.
    """
    try:
        settings = get_settings()
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")

    for issue in settings.validate_production_config():
        logger.warning(issue)

    logger.info(f"Configuration loaded: environment={settings.environment}")
    logger.info(f"  cors_origins={settings.cors_origins_list}")
    logger.info(f"  generation_delay={settings.generation_delay_seconds}s")
    logger.info(f"  log_level={settings.log_level} ({settings.log_format})")

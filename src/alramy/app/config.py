"""Application configuration using pydantic-settings.

All settings can be configured via environment variables with ALRAMY_ prefix.
Nested settings use double underscore as separator.

Examples:
    ALRAMY_SESSION__TIMEZONE=Asia/Riyadh
    ALRAMY_LOGGING__LEVEL=DEBUG
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SessionConfig(BaseSettings):
    """Session configuration.

    The session lifetime itself is fixed (7 calendar days); the time zone
    decides which calendar the days are counted in.
    """

    model_config = SettingsConfigDict(env_prefix="SESSION_")

    timezone: str = Field(default="UTC")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate IANA time zone name."""
        if not v:
            raise ValueError("session timezone cannot be empty")
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone '{v}'") from e
        return v


class SiteConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SITE_")

    name: str = Field(default="Al-Ramy Blog")


class LoggingConfig(BaseSettings):
    """Logging configuration.

    Standard fields added to all logs:
    - schema_version: Log schema version for backwards compatibility
    - service: Service name (alramy)
    """

    model_config = SettingsConfigDict(env_prefix="LOGGING_")

    level: str = Field(default="INFO")
    schema_version: str = Field(default="1.0")
    slow_threshold_ms: float = Field(default=1000.0)
    service_name: str = Field(default="alramy")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ALRAMY_",
        env_nested_delimiter="__",
    )

    session: SessionConfig = Field(default_factory=SessionConfig)
    site: SiteConfig = Field(default_factory=SiteConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache
def get_settings() -> Settings:
    return Settings()

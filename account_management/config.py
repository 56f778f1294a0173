"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .storage import DEFAULT_INITIAL_BALANCE


class AccountConfig(BaseSettings):
    """Account management system configuration"""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Business rules configuration
    initial_balance: int = DEFAULT_INITIAL_BALANCE  # minor units

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    @field_validator("initial_balance")
    @classmethod
    def _non_negative_balance(cls, value: int) -> int:
        if value < 0:
            raise ValueError("initial_balance must not be negative")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        fmt = value.lower()
        if fmt not in ("json", "text"):
            raise ValueError(f"Unknown log format: {value}")
        return fmt


# Global configuration instance
config = AccountConfig()


def get_config() -> AccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> AccountConfig:
    """Reload configuration from environment"""
    global config
    config = AccountConfig()
    return config

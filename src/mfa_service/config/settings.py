"""Configuration Settings for the MFA Service

Manages environment variables and multifactor provider configuration.
All variables use the MFA_ prefix, e.g. MFA_GLOBAL_FAILURE_MODE=OPEN.

Providers are configured as a JSON list:

    MFA_PROVIDERS='[{"kind": "rest", "id": "mfa-duo", "order": 1,
                     "health_url": "https://duo.example.com/health"}]'
"""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings

from mfa_service.core.mfa.failure_mode import parse_failure_mode
from mfa_service.domain.models import FailureMode


class ProviderSettings(BaseModel):
    """Configuration for one multifactor provider.

    Attributes:
        kind: Registered provider kind (e.g. "rest")
        id: Provider identifier pattern
        order: Provider priority
        global_failure_mode: Provider-wide fallback failure mode (optional)
        health_url: Health endpoint probed by network-backed providers (optional)
    """
    kind: str = "rest"
    id: str
    order: int = 0
    global_failure_mode: Optional[FailureMode] = None
    health_url: Optional[str] = None

    @field_validator("global_failure_mode", mode="before")
    @classmethod
    def _parse_failure_mode(cls, value):
        return parse_failure_mode(value)


class Settings(BaseSettings):
    """Application settings"""

    # Service info
    service_name: str = "mfa-service"
    service_version: str = "1.0.0"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Failure mode applied to providers that do not configure their own
    global_failure_mode: Optional[FailureMode] = None

    # Network probes
    health_check_timeout_seconds: float = 5.0

    # Configured providers
    providers: list[ProviderSettings] = []

    @field_validator("global_failure_mode", mode="before")
    @classmethod
    def _parse_failure_mode(cls, value):
        return parse_failure_mode(value)

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        if value not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {value!r}")
        return value

    class Config:
        env_prefix = "MFA_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance

    Returns:
        Settings instance
    """
    return Settings()

"""Registered service and multifactor policy models.

Purpose: Describe the relying party a login is attempted against, as far as
multifactor decisions are concerned.

These models are supplied, already resolved, by the hosting configuration layer.
They are frozen: a decision never mutates the service it is evaluating.

Key Components:
- FailureMode: What to do when a provider's availability cannot be confirmed
- MultifactorPolicy: Per-service multifactor settings
- RegisteredService: The relying party being authenticated to
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FailureMode(str, Enum):
    """Multifactor failure modes.

    NOT_SET is a sentinel meaning "no explicit choice here, ask the next layer".
    NONE skips availability checks entirely. CLOSED denies the login when the
    provider is unreachable. Every other member lets the login proceed without
    the provider (fail open).
    """
    NOT_SET = "NOT_SET"
    NONE = "NONE"
    CLOSED = "CLOSED"
    OPEN = "OPEN"
    PHANTOM = "PHANTOM"

    def __str__(self) -> str:
        return self.value


class MultifactorPolicy(BaseModel):
    """Per-service multifactor policy.

    Attributes:
        failure_mode: Explicit failure mode for this service, NOT_SET to defer
            to the provider's global setting
    """
    model_config = ConfigDict(frozen=True)

    failure_mode: FailureMode = FailureMode.NOT_SET


class RegisteredService(BaseModel):
    """Relying party being authenticated to.

    Attributes:
        service_id: Service identifier (usually a URL pattern), used for diagnostics
        name: Human-readable service name (optional)
        multifactor_policy: Multifactor settings for this service
    """
    model_config = ConfigDict(frozen=True)

    service_id: str
    name: Optional[str] = None
    multifactor_policy: MultifactorPolicy = Field(default_factory=MultifactorPolicy)

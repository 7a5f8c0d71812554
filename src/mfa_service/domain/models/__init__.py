"""Domain models for the MFA service"""

from mfa_service.domain.models.event import TriggerEvent
from mfa_service.domain.models.service import (
    FailureMode,
    MultifactorPolicy,
    RegisteredService,
)

__all__ = [
    "FailureMode",
    "MultifactorPolicy",
    "RegisteredService",
    "TriggerEvent",
]

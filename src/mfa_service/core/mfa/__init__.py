"""Multifactor provider selection and availability policy.

- supports(): should this provider handle a triggering event?
- is_available(): may the login rely on this provider right now?

Provider construction from settings lives in mfa_service.core.mfa.factory.
"""

from .availability import AvailabilityDecision, AvailabilityOutcome, evaluate_availability
from .base import AbstractMultifactorProvider
from .bypass import MultifactorBypassEvaluator, bypass_allows_execution
from .errors import AvailabilityDenied, ConfigurationError, MultifactorError
from .failure_mode import parse_failure_mode, resolve_failure_mode
from .matcher import identifier_matches
from .provider import MultifactorProvider
from .rest import RestHealthCheckProvider

__all__ = [
    "AbstractMultifactorProvider",
    "AvailabilityDecision",
    "AvailabilityDenied",
    "AvailabilityOutcome",
    "ConfigurationError",
    "MultifactorBypassEvaluator",
    "MultifactorError",
    "MultifactorProvider",
    "RestHealthCheckProvider",
    "bypass_allows_execution",
    "evaluate_availability",
    "identifier_matches",
    "parse_failure_mode",
    "resolve_failure_mode",
]

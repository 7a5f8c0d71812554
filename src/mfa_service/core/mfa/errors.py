"""Multifactor provider errors.

Two kinds of failure leave this package:

- ConfigurationError: a deployment misconfiguration (bad failure mode string,
  invalid identifier pattern, unknown provider kind). Must be fixed by an operator.
- AvailabilityDenied: the expected, policy-driven outcome of a fail-closed
  provider that could not be reached. The login must be denied for the service.
"""

from typing import Optional


class MultifactorError(Exception):
    """Base error for multifactor provider decisions."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "MFA_ERROR"


class ConfigurationError(MultifactorError, ValueError):
    """Provider or policy configuration is invalid.

    Subclasses ValueError so pydantic validators report it as a ValidationError.
    """

    def __init__(self, message: str):
        super().__init__(message, "MFA_CONFIGURATION_ERROR")


class AvailabilityDenied(MultifactorError):
    """A fail-closed provider is unreachable; authentication shall fail.

    Attributes:
        provider: Display name of the provider that could not be reached
        service_id: Service the login was attempted against
        failure_mode: Effective failure mode that produced the denial
    """

    def __init__(self, provider: str, service_id: str, failure_mode):
        super().__init__(
            f"{provider} could not be reached. Authentication shall fail for {service_id}",
            "MFA_PROVIDER_UNAVAILABLE",
        )
        self.provider = provider
        self.service_id = service_id
        self.failure_mode = failure_mode

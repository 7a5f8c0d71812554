"""Availability gate for multifactor providers.

Applies the effective failure mode around a provider's raw availability probe.
The outcome is returned as a typed decision; callers that prefer the exception
convention call raise_for_denial() on it.

    NOT_EVALUATED --(mode NONE)---------------------> AVAILABLE
    NOT_EVALUATED --(probe ok)----------------------> AVAILABLE
    NOT_EVALUATED --(probe failed, mode CLOSED)-----> DENIED
    NOT_EVALUATED --(probe failed, any other mode)--> DEGRADED
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mfa_service.domain.models import FailureMode, RegisteredService

from .errors import AvailabilityDenied
from .failure_mode import resolve_failure_mode

if TYPE_CHECKING:
    from .base import AbstractMultifactorProvider

logger = logging.getLogger(__name__)


class AvailabilityOutcome(Enum):
    """Result of an availability check"""
    AVAILABLE = "available"
    DEGRADED = "degraded"
    DENIED = "denied"


@dataclass(frozen=True)
class AvailabilityDecision:
    """Availability decision for one provider and one service.

    Attributes:
        outcome: AVAILABLE, DEGRADED or DENIED
        failure_mode: Effective failure mode the decision was made under
        provider: Provider display name
        service_id: Service the decision applies to
        probed: Whether the raw availability probe was invoked
    """
    outcome: AvailabilityOutcome
    failure_mode: FailureMode
    provider: str
    service_id: str
    probed: bool = True

    @property
    def is_available(self) -> bool:
        """True if the login may proceed with this provider"""
        return self.outcome is AvailabilityOutcome.AVAILABLE

    @property
    def is_denied(self) -> bool:
        return self.outcome is AvailabilityOutcome.DENIED

    def raise_for_denial(self) -> "AvailabilityDecision":
        """Raise AvailabilityDenied if the login must be denied.

        Returns:
            This decision, for chaining

        Raises:
            AvailabilityDenied: If the outcome is DENIED
        """
        if self.is_denied:
            raise AvailabilityDenied(self.provider, self.service_id, self.failure_mode)
        return self


def evaluate_availability(
    provider: "AbstractMultifactorProvider",
    service: RegisteredService,
) -> AvailabilityDecision:
    """Apply the effective failure mode around the provider's probe.

    Args:
        provider: Provider to check
        service: Service being authenticated to

    Returns:
        AvailabilityDecision; DENIED is returned, not raised

    Raises:
        ConfigurationError: If the provider's global failure mode is invalid
    """
    name = str(provider)
    failure_mode = resolve_failure_mode(
        service.multifactor_policy,
        provider.global_failure_mode,
        service.service_id,
    )

    if failure_mode is FailureMode.NONE:
        logger.debug(f"Failure mode is set to [{failure_mode}]. Assuming the provider is available.")
        return AvailabilityDecision(
            AvailabilityOutcome.AVAILABLE, failure_mode, name, service.service_id, probed=False
        )

    if provider.probe():
        return AvailabilityDecision(AvailabilityOutcome.AVAILABLE, failure_mode, name, service.service_id)

    if failure_mode is FailureMode.CLOSED:
        logger.warning(f"[{name}] could not be reached. Authentication shall fail for [{service.service_id}]")
        return AvailabilityDecision(AvailabilityOutcome.DENIED, failure_mode, name, service.service_id)

    logger.warning(
        f"[{name}] could not be reached. Since the authentication provider is configured for the "
        f"failure mode of [{failure_mode}] authentication will proceed without [{name}] "
        f"for service [{service.service_id}]"
    )
    return AvailabilityDecision(AvailabilityOutcome.DEGRADED, failure_mode, name, service.service_id)

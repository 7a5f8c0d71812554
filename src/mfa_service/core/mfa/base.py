"""Base class for multifactor authentication providers.

Implements provider selection (supports) and the availability gate
(is_available) on top of two hooks concrete providers may override:

- supports_internal(): provider-specific eligibility, default True
- probe(): raw availability check, default True
"""

import logging
from typing import Any, Optional, Union

from mfa_service.domain.models import FailureMode, RegisteredService, TriggerEvent

from .availability import AvailabilityDecision, evaluate_availability
from .bypass import MultifactorBypassEvaluator, bypass_allows_execution
from .errors import ConfigurationError
from .failure_mode import parse_failure_mode
from .matcher import identifier_matches
from .provider import MultifactorProvider

logger = logging.getLogger(__name__)


class AbstractMultifactorProvider(MultifactorProvider):
    """Parent of all multifactor providers.

    Configuration is passed to the constructor and never changes afterwards, so
    instances can be read from any number of request threads without locking.

    Equality and hashing use (order, id) only: two providers of different kinds
    configured with the same order and id are equal.
    """

    def __init__(
        self,
        id: str,
        order: int = 0,
        global_failure_mode: Union[FailureMode, str, None] = None,
        bypass_evaluator: Optional[MultifactorBypassEvaluator] = None,
    ):
        """Initialize provider configuration.

        Args:
            id: Provider identifier, a regular expression matched against event ids
            order: Provider priority for the orchestration layer
            global_failure_mode: Fallback failure mode when a service sets none
            bypass_evaluator: Bypass rules consulted by supports() (optional)

        Raises:
            ConfigurationError: If id is blank or global_failure_mode is unparsable
        """
        if not id:
            raise ConfigurationError(f"{type(self).__name__} requires a non-blank id")
        self._id = id
        self._order = int(order)
        self._global_failure_mode = parse_failure_mode(global_failure_mode)
        self._bypass_evaluator = bypass_evaluator

    @property
    def id(self) -> str:
        return self._id

    @property
    def order(self) -> int:
        return self._order

    @property
    def global_failure_mode(self) -> Optional[FailureMode]:
        return self._global_failure_mode

    @property
    def bypass_evaluator(self) -> Optional[MultifactorBypassEvaluator]:
        return self._bypass_evaluator

    def supports(
        self,
        event: Optional[TriggerEvent],
        authentication: Any,
        service: Optional[RegisteredService],
    ) -> bool:
        """Decide whether this provider should handle a triggering event.

        Checks run cheapest first and stop at the first veto:
        1. the event id must match this provider's id pattern
        2. configured bypass rules must allow execution
        3. supports_internal() has the final say

        Subclasses customize step 3, not this method.
        """
        if event is None or not self.matches(event.id):
            logger.debug(
                f"Provided event id [{event.id if event else None}] is not applicable "
                f"to this provider identified by [{self.id}]"
            )
            return False

        if not bypass_allows_execution(self._bypass_evaluator, authentication, service, self):
            return False

        if self.supports_internal(event, authentication, service):
            logger.debug(f"[{self}] voted to support this authentication request")
            return True

        logger.debug(f"[{self}] voted does not support this authentication request")
        return False

    def supports_internal(
        self,
        event: TriggerEvent,
        authentication: Any,
        service: Optional[RegisteredService],
    ) -> bool:
        """Provider-specific eligibility check, run after bypass rules.

        Args:
            event: Event raised by the login flow
            authentication: Current authentication state
            service: Service being authenticated to

        Returns:
            True if this provider can handle the request (default)
        """
        return True

    def check_availability(self, service: RegisteredService) -> AvailabilityDecision:
        """Evaluate availability without raising on denial."""
        return evaluate_availability(self, service)

    def is_available(self, service: RegisteredService) -> bool:
        """Decide whether the login may rely on this provider.

        Returns:
            True to proceed with this provider, False to proceed without it

        Raises:
            AvailabilityDenied: If the provider is unreachable and the effective
                failure mode is CLOSED
            ConfigurationError: If failure mode configuration is invalid
        """
        return self.check_availability(service).raise_for_denial().is_available

    def probe(self) -> bool:
        """Is the provider reachable?

        Override to perform a real health check. Exceptions propagate to the
        caller; return False for an expected "unreachable" result.
        """
        return True

    def matches(self, identifier: Optional[str]) -> bool:
        return identifier_matches(self._id, identifier)

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, MultifactorProvider):
            return NotImplemented
        return (self.order, self.id) == (other.order, other.id)

    def __hash__(self):
        return hash((self.order, self.id))

    def __str__(self):
        return type(self).__name__

    def __repr__(self):
        return f"{type(self).__name__}(id={self._id!r}, order={self._order})"

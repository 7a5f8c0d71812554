"""Abstract multifactor authentication provider interface.

This module defines the contract the login orchestration layer relies on when
routing a login through a second factor. Concrete providers usually extend
AbstractMultifactorProvider (see base.py) rather than implementing this
interface directly.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from mfa_service.domain.models import RegisteredService, TriggerEvent


class MultifactorProvider(ABC):
    """Abstract interface for multifactor authentication providers.

    Providers are configured once at startup and are read-only afterwards, so a
    single instance is shared by every concurrent login request.

    Example:
        provider = RestHealthCheckProvider(
            id="mfa-duo",
            order=1,
            global_failure_mode="OPEN",
            health_url="https://duo.example.com/health",
        )

        if provider.supports(event, authentication, service):
            if provider.is_available(service):
                ...  # route the login through this provider
            else:
                ...  # continue without this provider
    """

    @property
    @abstractmethod
    def id(self) -> str:
        """Provider identifier, interpreted as a regular expression."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Provider priority, consumed by the orchestration layer."""
        pass

    @abstractmethod
    def supports(
        self,
        event: Optional[TriggerEvent],
        authentication: Any,
        service: Optional[RegisteredService],
    ) -> bool:
        """Decide whether this provider should handle a triggering event.

        Args:
            event: Event raised by the login flow (may be None)
            authentication: Current authentication state, opaque to the provider
            service: Service being authenticated to

        Returns:
            True if this provider should engage for the login
        """
        pass

    @abstractmethod
    def is_available(self, service: RegisteredService) -> bool:
        """Decide whether the login may rely on this provider.

        Args:
            service: Service being authenticated to

        Returns:
            True to proceed with this provider, False to proceed without it

        Raises:
            AvailabilityDenied: If the provider is unreachable and the effective
                failure mode is CLOSED
        """
        pass

    @abstractmethod
    def matches(self, identifier: Optional[str]) -> bool:
        """Check whether an identifier is governed by this provider's id pattern."""
        pass

"""Bypass evaluation boundary.

Bypass rules are evaluated elsewhere; providers only consult them. Any object
with a matching should_execute method can be configured on a provider.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from mfa_service.domain.models import RegisteredService

if TYPE_CHECKING:
    from .provider import MultifactorProvider

logger = logging.getLogger(__name__)


@runtime_checkable
class MultifactorBypassEvaluator(Protocol):
    """Decides whether bypass rules suppress a provider."""

    def should_execute(
        self,
        authentication: Any,
        service: Optional[RegisteredService],
        provider: "MultifactorProvider",
    ) -> bool:
        """Return False when the provider must not execute for this principal and service."""
        ...


def bypass_allows_execution(
    evaluator: Optional[MultifactorBypassEvaluator],
    authentication: Any,
    service: Optional[RegisteredService],
    provider: "MultifactorProvider",
) -> bool:
    """Consult a bypass evaluator on behalf of a provider.

    A provider without an evaluator is never bypassed. Evaluator errors are
    not caught.
    """
    if evaluator is None:
        return True
    if evaluator.should_execute(authentication, service, provider):
        return True
    logger.debug(f"Request cannot be supported by provider [{provider.id}] as it's configured for bypass")
    return False

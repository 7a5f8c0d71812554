"""Multifactor provider backed by an HTTP health endpoint.

Availability is probed with a GET request against the provider's health URL.
Any 2xx response means available. A non-2xx response, a connection failure or
a timeout means unreachable, and the failure mode decides what happens next.
"""

import logging
from typing import Optional, Union

import httpx

from mfa_service.domain.models import FailureMode

from .base import AbstractMultifactorProvider
from .bypass import MultifactorBypassEvaluator
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class RestHealthCheckProvider(AbstractMultifactorProvider):
    """Provider whose availability is an HTTP health check.

    Configuration:
        MFA_PROVIDERS='[{"kind": "rest", "id": "mfa-duo",
                         "health_url": "https://duo.example.com/health"}]'
        MFA_HEALTH_CHECK_TIMEOUT_SECONDS=5.0 (default)
    """

    def __init__(
        self,
        id: str,
        health_url: str,
        order: int = 0,
        global_failure_mode: Union[FailureMode, str, None] = None,
        bypass_evaluator: Optional[MultifactorBypassEvaluator] = None,
        timeout: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize REST health check provider.

        Args:
            id: Provider identifier pattern
            health_url: Health endpoint to GET
            order: Provider priority
            global_failure_mode: Fallback failure mode when a service sets none
            bypass_evaluator: Bypass rules (optional)
            timeout: Probe timeout in seconds
            client: Shared httpx.Client (optional); a short-lived client is
                used per probe otherwise
        """
        super().__init__(
            id=id,
            order=order,
            global_failure_mode=global_failure_mode,
            bypass_evaluator=bypass_evaluator,
        )
        if not health_url:
            raise ConfigurationError(f"Provider [{id}] requires a health_url")
        self._health_url = health_url
        self._timeout = timeout
        self._client = client

    @property
    def health_url(self) -> str:
        return self._health_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def probe(self) -> bool:
        """GET the health endpoint.

        Returns:
            True on a 2xx response, False on any other status or transport error
        """
        try:
            if self._client is not None:
                response = self._client.get(self._health_url, timeout=self._timeout)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(self._health_url)
        except httpx.TransportError as e:
            logger.warning(f"Health check for [{self.id}] failed at {self._health_url}: {e}")
            return False

        if response.is_success:
            return True

        logger.warning(
            f"Health check for [{self.id}] returned HTTP {response.status_code} from {self._health_url}"
        )
        return False

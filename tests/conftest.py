"""
Pytest configuration and fixtures for multifactor provider tests.

Provides fixtures for:
- Stub providers with controllable probe and eligibility results
- Registered services with a given failure mode
- Bypass evaluators
- Settings and factory cleanup
"""

from typing import Any, Optional

import pytest

from mfa_service.config.settings import get_settings
from mfa_service.core.mfa import AbstractMultifactorProvider
from mfa_service.core.mfa.factory import reset_providers
from mfa_service.domain.models import (
    FailureMode,
    MultifactorPolicy,
    RegisteredService,
    TriggerEvent,
)


class StubProvider(AbstractMultifactorProvider):
    """Provider with a fixed probe result and eligibility vote."""

    def __init__(self, *args, available: bool = True, eligible: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.available = available
        self.eligible = eligible
        self.probe_calls = 0
        self.supports_internal_calls = 0

    def supports_internal(self, event, authentication, service) -> bool:
        self.supports_internal_calls += 1
        return self.eligible

    def probe(self) -> bool:
        self.probe_calls += 1
        return self.available


class OtherStubProvider(StubProvider):
    """Second concrete kind, for equality across kinds."""


class ExplodingProbeProvider(AbstractMultifactorProvider):
    """Provider whose probe must never be called."""

    def probe(self) -> bool:
        raise AssertionError("probe() must not be invoked")


class RecordingBypass:
    """Bypass evaluator that records its calls and returns a fixed verdict."""

    def __init__(self, execute: bool):
        self.execute = execute
        self.calls: list[tuple[Any, Optional[RegisteredService], Any]] = []

    def should_execute(self, authentication, service, provider) -> bool:
        self.calls.append((authentication, service, provider))
        return self.execute


@pytest.fixture
def make_service():
    """Factory for registered services with a given failure mode."""

    def _make(failure_mode: FailureMode = FailureMode.NOT_SET, service_id: str = "https://app.example.org/.*"):
        return RegisteredService(
            service_id=service_id,
            name="Example App",
            multifactor_policy=MultifactorPolicy(failure_mode=failure_mode),
        )

    return _make


@pytest.fixture
def service(make_service) -> RegisteredService:
    """Service with no explicit failure mode."""
    return make_service()


@pytest.fixture
def duo_event() -> TriggerEvent:
    return TriggerEvent(id="mfa-duo")


@pytest.fixture
def authentication() -> dict:
    """Opaque authentication state; providers never inspect it."""
    return {"principal": "casuser", "attributes": {"memberOf": ["staff"]}}


@pytest.fixture(autouse=True)
def clean_factory_state(monkeypatch):
    """Isolate tests from the host environment and cached singletons."""
    for name in ("MFA_GLOBAL_FAILURE_MODE", "MFA_PROVIDERS", "MFA_LOG_FORMAT", "MFA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    reset_providers()
    yield
    get_settings.cache_clear()
    reset_providers()

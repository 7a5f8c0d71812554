"""Multifactor provider factory.

Builds provider instances from settings. Providers are created once and shared
by every request; nothing here runs on the login path.
"""

import logging
from typing import Optional

from mfa_service.config.settings import ProviderSettings, Settings, get_settings
from mfa_service.domain.models import FailureMode

from .base import AbstractMultifactorProvider
from .bypass import MultifactorBypassEvaluator
from .errors import ConfigurationError
from .rest import RestHealthCheckProvider

logger = logging.getLogger(__name__)

PROVIDER_KINDS: dict[str, type[AbstractMultifactorProvider]] = {
    "rest": RestHealthCheckProvider,
}

# Global provider list (initialized on first call)
_providers: Optional[list[AbstractMultifactorProvider]] = None


def register_provider_kind(kind: str, provider_class: type[AbstractMultifactorProvider]) -> None:
    """Register a provider class under a configuration kind.

    Raises:
        ConfigurationError: If the class is not an AbstractMultifactorProvider
    """
    if not (isinstance(provider_class, type) and issubclass(provider_class, AbstractMultifactorProvider)):
        raise ConfigurationError(f"{provider_class!r} is not a multifactor provider class")
    PROVIDER_KINDS[kind.lower()] = provider_class


def create_provider(
    provider_settings: ProviderSettings,
    settings: Optional[Settings] = None,
    bypass_evaluator: Optional[MultifactorBypassEvaluator] = None,
) -> AbstractMultifactorProvider:
    """Create one provider from its settings.

    The provider inherits Settings.global_failure_mode unless it configures its own.

    Args:
        provider_settings: Provider configuration
        settings: Application settings (defaults to get_settings())
        bypass_evaluator: Bypass rules to attach (optional)

    Returns:
        Configured provider instance

    Raises:
        ConfigurationError: If the kind is unknown or required fields are missing
    """
    settings = settings or get_settings()
    kind = provider_settings.kind.lower()
    provider_class = PROVIDER_KINDS.get(kind)
    if provider_class is None:
        raise ConfigurationError(
            f"Unknown provider kind: {provider_settings.kind}. "
            f"Valid options: {', '.join(sorted(PROVIDER_KINDS))}"
        )

    global_failure_mode = provider_settings.global_failure_mode
    if global_failure_mode in (None, FailureMode.NOT_SET):
        global_failure_mode = settings.global_failure_mode

    options = dict(
        id=provider_settings.id,
        order=provider_settings.order,
        global_failure_mode=global_failure_mode,
        bypass_evaluator=bypass_evaluator,
    )
    if issubclass(provider_class, RestHealthCheckProvider):
        options.update(
            health_url=provider_settings.health_url,
            timeout=settings.health_check_timeout_seconds,
        )

    provider = provider_class(**options)
    logger.info(f"Multifactor provider initialized: {provider!r} ({provider})")
    return provider


def get_providers(
    settings: Optional[Settings] = None,
    bypass_evaluator: Optional[MultifactorBypassEvaluator] = None,
) -> list[AbstractMultifactorProvider]:
    """Get the configured providers, sorted by order.

    The list is built on first call and cached; later arguments are ignored
    until reset_providers() is called.
    """
    global _providers

    if _providers is not None:
        return _providers

    settings = settings or get_settings()
    providers = [
        create_provider(provider_settings, settings, bypass_evaluator)
        for provider_settings in settings.providers
    ]
    _providers = sorted(providers, key=lambda p: p.order)
    logger.info(f"{len(_providers)} multifactor provider(s) configured")
    return _providers


def reset_providers() -> None:
    """Reset the cached provider list (for testing)."""
    global _providers
    _providers = None

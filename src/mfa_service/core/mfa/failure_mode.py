"""Failure mode resolution.

The effective failure mode for one availability check comes from three layers,
first match wins:

1. the service's multifactor policy, unless it is NOT_SET
2. the provider's global failure mode, unless blank or NOT_SET
3. CLOSED

Operators who configure nothing get the strictest behavior, and per-service
configuration always wins over per-provider configuration.
"""

import logging
from typing import Optional, Union

from mfa_service.domain.models import FailureMode, MultifactorPolicy

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MODE = FailureMode.CLOSED


def parse_failure_mode(value: Union[FailureMode, str, None]) -> Optional[FailureMode]:
    """Parse a configured failure mode string.

    Values are member names and are case-sensitive ("CLOSED", not "closed").
    Surrounding whitespace is ignored.

    Args:
        value: FailureMode, string or None

    Returns:
        Parsed FailureMode, or None when the value is None or blank

    Raises:
        ConfigurationError: If the value does not name a failure mode
    """
    if value is None or isinstance(value, FailureMode):
        return value
    name = value.strip()
    if not name:
        return None
    try:
        return FailureMode[name]
    except KeyError:
        valid = ", ".join(mode.name for mode in FailureMode)
        raise ConfigurationError(
            f"Unknown multifactor failure mode [{value}]. Valid options: {valid}"
        ) from None


def resolve_failure_mode(
    policy: Optional[MultifactorPolicy],
    global_failure_mode: Union[FailureMode, str, None] = None,
    service_id: Optional[str] = None,
) -> FailureMode:
    """Resolve the effective failure mode for a service.

    Args:
        policy: Service multifactor policy; None behaves like NOT_SET
        global_failure_mode: Provider-wide fallback, as a FailureMode or string
        service_id: Service identifier, for diagnostics

    Returns:
        The effective FailureMode, never NOT_SET

    Raises:
        ConfigurationError: If global_failure_mode is an unparsable string
    """
    if policy is not None and policy.failure_mode is not FailureMode.NOT_SET:
        logger.debug(f"Multi-factor failure mode for [{service_id}] is defined as [{policy.failure_mode}]")
        return policy.failure_mode

    global_mode = parse_failure_mode(global_failure_mode)
    if global_mode is not None and global_mode is not FailureMode.NOT_SET:
        logger.debug(f"Using global multi-factor failure mode for [{service_id}] defined as [{global_mode}]")
        return global_mode

    logger.debug(f"No multi-factor failure mode configured for [{service_id}], defaulting to [{DEFAULT_FAILURE_MODE}]")
    return DEFAULT_FAILURE_MODE

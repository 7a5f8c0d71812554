"""Identifier matching for multifactor providers.

A provider's id is a regular expression, not a plain key: "mfa-.*" governs
every flow whose identifier starts with "mfa-". The candidate identifier must
satisfy the pattern in its entirety.
"""

import re
from functools import lru_cache
from typing import Optional

from .errors import ConfigurationError


@lru_cache(maxsize=256)
def compile_identifier_pattern(pattern: str) -> "re.Pattern[str]":
    """Compile a provider identifier pattern.

    Results are cached; the cache is safe to share between request threads.

    Raises:
        ConfigurationError: If the pattern is missing or not a valid regular expression
    """
    if pattern is None:
        raise ConfigurationError("Provider identifier pattern is not configured")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"Invalid provider identifier pattern [{pattern}]: {e}") from e


def identifier_matches(pattern: str, identifier: Optional[str]) -> bool:
    """Check whether an identifier is governed by a provider pattern.

    Args:
        pattern: Provider id, interpreted as a regular expression
        identifier: Candidate identifier; None and "" never match

    Returns:
        True if the whole identifier matches the pattern
    """
    compiled = compile_identifier_pattern(pattern)
    if not identifier:
        return False
    return compiled.fullmatch(identifier) is not None

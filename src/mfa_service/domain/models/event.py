"""Triggering events raised by the login flow."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class TriggerEvent:
    """Request to engage a multifactor flow.

    One event is raised per login attempt by the orchestration layer.

    Attributes:
        id: Identifier of the requested multifactor flow (e.g. "mfa-duo")
        attributes: Extra event data, kept for diagnostics only
    """
    id: str
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        """Freeze attributes so events can be shared across threads"""
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

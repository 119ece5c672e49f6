from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Capability


@dataclass(frozen=True)
class NavigationEntry:
    """A destination shown to an identity. Derived from its role, never stored."""

    label: str
    destination: str
    capability: Capability

    def to_dict(self) -> dict[str, str]:
        return {
            "label": self.label,
            "destination": self.destination,
            "capability": self.capability.value,
        }

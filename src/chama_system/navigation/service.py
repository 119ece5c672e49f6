from __future__ import annotations

from typing import Optional

from ..auth.context import AuthContext
from ..core.enums import Capability
from ..core.exceptions import AuthenticationError, AuthorizationError
from ..members.model import Identity
from ..roles.capabilities import capabilities_for, role_has_capability
from ..roles.model import NavigationEntry


def navigation_for(identity: Optional[Identity]) -> tuple[NavigationEntry, ...]:
    """Navigation entries for ``identity``; anonymous callers get none."""
    if identity is None:
        return ()
    return capabilities_for(identity.role)


def can(identity: Optional[Identity], capability: Capability) -> bool:
    if identity is None:
        return False
    return role_has_capability(identity.role, capability)


def require_capability(identity: Optional[Identity], capability: Capability) -> Identity:
    if identity is None:
        raise AuthenticationError("Login required")
    if not role_has_capability(identity.role, capability):
        raise AuthorizationError(f"Role {identity.role.value} cannot {capability.value}")
    return identity


class NavigationService:
    """Use case: navigation/authorization for whoever is currently logged in.

    Re-derived from the auth context on every call; results are never cached.
    """

    def __init__(self, auth: AuthContext):
        self._auth = auth

    def current_navigation(self) -> tuple[NavigationEntry, ...]:
        return navigation_for(self._auth.current_identity())

    def can(self, capability: Capability) -> bool:
        return can(self._auth.current_identity(), capability)

    def require(self, capability: Capability) -> Identity:
        return require_capability(self._auth.current_identity(), capability)

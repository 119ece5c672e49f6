"""Role -> capability mapping.

Every role gets the member (base) entries; other roles only add to them, so a
new role can never lose a base destination.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..core.enums import Capability, Role
from ..core.exceptions import InvalidRoleError
from .model import NavigationEntry

BASE_ENTRIES: tuple[NavigationEntry, ...] = (
    NavigationEntry("Dashboard", "/dashboard", Capability.DASHBOARD),
    NavigationEntry("Contributions", "/member_dash_comp/contribution-list", Capability.VIEW_OWN_CONTRIBUTIONS),
    NavigationEntry("Contribution Form", "/member_dash_comp/contribution-form", Capability.SUBMIT_CONTRIBUTION),
    NavigationEntry("Member List", "/member_dash_comp/member-list", Capability.VIEW_MEMBER_LIST),
    NavigationEntry("Member Profile", "/member_dash_comp/member-profile", Capability.VIEW_OWN_PROFILE),
    NavigationEntry("Dividend Distribution", "/dividends/distribution", Capability.VIEW_DIVIDEND_DISTRIBUTION),
)

MEMBER_DIRECTORY = NavigationEntry("Members", "/members", Capability.MANAGE_MEMBER_DIRECTORY)

ROLE_ADDITIONS: Mapping[Role, tuple[NavigationEntry, ...]] = {
    Role.MEMBER: (),
    Role.SECRETARY: (MEMBER_DIRECTORY,),
    Role.CHAIRMAN: (MEMBER_DIRECTORY,),
    Role.TREASURER: (MEMBER_DIRECTORY,),
}


def _as_role(role: Any) -> Role:
    if isinstance(role, Role):
        return role
    try:
        return Role(role)
    except ValueError:
        raise InvalidRoleError(role) from None


def capabilities_for(role: Any) -> tuple[NavigationEntry, ...]:
    """Ordered navigation entries granted to ``role``.

    Raises InvalidRoleError for anything outside the Role enumeration.
    """
    resolved = _as_role(role)
    try:
        additions = ROLE_ADDITIONS[resolved]
    except KeyError:
        raise InvalidRoleError(role) from None
    return BASE_ENTRIES + additions


def role_has_capability(role: Any, capability: Capability) -> bool:
    return any(entry.capability == capability for entry in capabilities_for(role))

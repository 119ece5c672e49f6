from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Officer and member roles inside a group."""

    MEMBER = "member"
    SECRETARY = "secretary"
    CHAIRMAN = "chairman"
    TREASURER = "treasurer"


class Capability(str, Enum):
    """Destinations/actions a role may reach."""

    DASHBOARD = "dashboard"
    VIEW_OWN_CONTRIBUTIONS = "view-own-contributions"
    SUBMIT_CONTRIBUTION = "submit-contribution"
    VIEW_MEMBER_LIST = "view-member-list"
    VIEW_OWN_PROFILE = "view-own-profile"
    VIEW_DIVIDEND_DISTRIBUTION = "view-dividend-distribution"
    MANAGE_MEMBER_DIRECTORY = "manage-member-directory"


class SlotStatus(str, Enum):
    """Lifecycle of an officer slot captured at registration."""

    PENDING_ACTIVATION = "pending_activation"
    ACTIVATED = "activated"

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import to_iso
from ..core.enums import Role, SlotStatus
from ..members.model import Identity


@dataclass(frozen=True)
class OfficerSlot:
    """An officer position captured at registration (name + email only).

    Becomes an Identity once the invited person activates their account; that
    happens outside this package.
    """

    role: Role
    name: str
    email: str
    status: SlotStatus = SlotStatus.PENDING_ACTIVATION

    def to_dict(self) -> dict[str, Any]:
        return {
            "role": self.role.value,
            "name": self.name,
            "email": self.email,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Group:
    """Aggregate root: a registered savings group."""

    group_id: str
    name: str
    email: str
    account_no: str
    chairman: Identity
    secretary: OfficerSlot
    treasurer: OfficerSlot
    created_at: datetime

    @property
    def officer_slots(self) -> tuple[OfficerSlot, ...]:
        return (self.secretary, self.treasurer)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.group_id,
            "name": self.name,
            "email": self.email,
            "account_no": self.account_no,
            "chairman": self.chairman.to_dict(),
            "secretary": self.secretary.to_dict(),
            "treasurer": self.treasurer.to_dict(),
            "created_at": to_iso(self.created_at),
        }


@dataclass(frozen=True)
class GroupRegistrationInput:
    """Raw registration form, field names as submitted by the client."""

    group_name: Optional[str] = None
    email: Optional[str] = None
    account_no: Optional[str] = None
    chairman_name: Optional[str] = None
    chairman_email: Optional[str] = None
    chairman_password: Optional[str] = None
    secretary_name: Optional[str] = None
    secretary_email: Optional[str] = None
    treasurer_name: Optional[str] = None
    treasurer_email: Optional[str] = None
    document: Any = None

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"GroupRegistrationInput(group_name={self.group_name!r}, chairman_email={self.chairman_email!r})"


@dataclass(frozen=True)
class RegisteredGroup:
    group: Group
    chairman: Identity

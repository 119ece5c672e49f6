from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.datetime_utils import from_iso, to_iso
from ..core.enums import Role


@dataclass(frozen=True)
class Identity:
    """Domain entity: an authenticated person inside a group.

    Note: ``identity_id`` is always allocated by the system, never by the caller.
    """

    identity_id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    total_contributions: Optional[Decimal] = None
    last_contribution_at: Optional[datetime] = None
    avatar: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.identity_id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value,
            "created_at": to_iso(self.created_at),
            "total_contributions": (
                str(self.total_contributions) if self.total_contributions is not None else None
            ),
            "last_contribution_at": to_iso(self.last_contribution_at),
            "avatar": self.avatar,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Identity":
        total = data.get("total_contributions")
        return cls(
            identity_id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            role=Role(data["role"]),
            created_at=from_iso(data["created_at"]),
            total_contributions=Decimal(total) if total is not None else None,
            last_contribution_at=from_iso(data.get("last_contribution_at")),
            avatar=data.get("avatar"),
        )

from __future__ import annotations

import threading
from typing import Optional

from ..core.exceptions import PersistenceError
from ..members.model import Identity
from .model import Group
from .repository import GroupRepository


class InMemoryGroupRepository(GroupRepository):
    """Process-local store, used in development and tests."""

    def __init__(self):
        self._lock = threading.Lock()
        self._groups: dict[str, Group] = {}
        self._identities: dict[str, Identity] = {}
        self._group_by_identity: dict[str, str] = {}

    def save_registration(self, group: Group, chairman: Identity) -> None:
        with self._lock:
            if group.group_id in self._groups or chairman.identity_id in self._identities:
                raise PersistenceError("Group or identity already stored")
            self._groups[group.group_id] = group
            self._identities[chairman.identity_id] = chairman
            self._group_by_identity[chairman.identity_id] = group.group_id

    def get_by_id(self, group_id: str) -> Optional[Group]:
        with self._lock:
            return self._groups.get(group_id)

    def get_for_identity(self, identity_id: str) -> Optional[Group]:
        with self._lock:
            group_id = self._group_by_identity.get(identity_id)
            return self._groups.get(group_id) if group_id else None

    def count(self) -> int:
        with self._lock:
            return len(self._groups)

from __future__ import annotations

from typing import Optional, Protocol

from ..members.model import Identity
from .model import Group


class GroupRepository(Protocol):
    """Persistence collaborator for registered groups.

    Note (DIP): services depend on this interface, never on a concrete store.
    """

    def save_registration(self, group: Group, chairman: Identity) -> None:
        """Store group, chairman and officer slots in a single transaction.

        Raises PersistenceError when nothing could be written.
        """
        raise NotImplementedError

    def get_by_id(self, group_id: str) -> Optional[Group]:
        raise NotImplementedError

    def get_for_identity(self, identity_id: str) -> Optional[Group]:
        raise NotImplementedError

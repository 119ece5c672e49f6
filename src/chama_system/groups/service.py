from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..auth.context import AuthContext
from ..core.enums import Capability, Role
from ..core.exceptions import (
    AuthenticationError,
    DocumentStorageError,
    InvitationError,
    PersistenceError,
)
from ..documents.store import DocumentStore
from ..invitations.inviter import Inviter
from ..members.model import Identity
from ..navigation.service import require_capability
from .model import Group, GroupRegistrationInput, OfficerSlot
from .registration import GroupRegistrationWorkflow
from .repository import GroupRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvitationFailure:
    role: Role
    email: str
    reason: str


@dataclass(frozen=True)
class RegistrationOutcome:
    """Result handed back to the presentation layer.

    ``persisted`` False means the registration is logically valid but was not
    stored; the caller should surface ``persistence_error``.
    """

    group: Group
    chairman: Identity
    persisted: bool
    persistence_error: Optional[PersistenceError] = None
    document_id: Optional[str] = None
    document_error: Optional[DocumentStorageError] = None
    invited: tuple[OfficerSlot, ...] = ()
    invitation_failures: tuple[InvitationFailure, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "group": self.group.to_dict(),
            "chairman": self.chairman.to_dict(),
            "persisted": self.persisted,
            "persistence_error": str(self.persistence_error) if self.persistence_error else None,
            "document_id": self.document_id,
            "document_error": str(self.document_error) if self.document_error else None,
            "invited": [slot.email for slot in self.invited],
            "invitation_failures": [
                {"role": f.role.value, "email": f.email, "error": f.reason} for f in self.invitation_failures
            ],
        }


class GroupService:
    """Use case: onboard a group end to end (register, persist, upload, invite)."""

    def __init__(
        self,
        workflow: GroupRegistrationWorkflow,
        groups: GroupRepository,
        inviter: Inviter,
        documents: DocumentStore,
    ):
        self._workflow = workflow
        self._groups = groups
        self._inviter = inviter
        self._documents = documents

    def register(self, data: GroupRegistrationInput, *, auth: AuthContext) -> RegistrationOutcome:
        registered = self._workflow.register_group(data, auth=auth)
        group, chairman = registered.group, registered.chairman

        persistence_error: Optional[PersistenceError] = None
        try:
            self._groups.save_registration(group, chairman)
        except PersistenceError as e:
            logger.error("Group %s registered but not persisted: %s", group.group_id, e)
            persistence_error = e

        document_id: Optional[str] = None
        document_error: Optional[DocumentStorageError] = None
        try:
            document_id = self._documents.store_document(data.document)
        except DocumentStorageError as e:
            logger.warning("Supporting document for group %s not stored: %s", group.group_id, e)
            document_error = e
        except Exception as e:
            logger.exception("Document store failed for group %s", group.group_id)
            document_error = DocumentStorageError(str(e) or type(e).__name__)

        invited: list[OfficerSlot] = []
        failures: list[InvitationFailure] = []
        if persistence_error is None:
            for slot in group.officer_slots:
                try:
                    self._inviter.invite(slot, group.group_id)
                    invited.append(slot)
                except InvitationError as e:
                    logger.warning("Invitation to %s for group %s failed: %s", slot.role.value, group.group_id, e)
                    failures.append(InvitationFailure(role=slot.role, email=slot.email, reason=str(e)))
                except Exception as e:
                    logger.exception("Inviter failed for %s of group %s", slot.role.value, group.group_id)
                    failures.append(
                        InvitationFailure(role=slot.role, email=slot.email, reason=str(e) or type(e).__name__)
                    )

        return RegistrationOutcome(
            group=group,
            chairman=chairman,
            persisted=persistence_error is None,
            persistence_error=persistence_error,
            document_id=document_id,
            document_error=document_error,
            invited=tuple(invited),
            invitation_failures=tuple(failures),
        )

    def current_group(self, *, auth: AuthContext) -> Optional[Group]:
        identity = auth.current_identity()
        if identity is None:
            raise AuthenticationError("Login required")
        return self._groups.get_for_identity(identity.identity_id)

    def member_directory(self, *, auth: AuthContext) -> list[dict[str, Any]]:
        """Chairman and officer slots of the caller's group (directory managers only)."""
        identity = require_capability(auth.current_identity(), Capability.MANAGE_MEMBER_DIRECTORY)
        group = self._groups.get_for_identity(identity.identity_id)
        if not group:
            return []

        chairman = group.chairman
        rows: list[dict[str, Any]] = [
            {
                "role": chairman.role.value,
                "name": chairman.name,
                "email": chairman.email,
                "status": "active",
            }
        ]
        rows.extend(slot.to_dict() for slot in group.officer_slots)
        return rows

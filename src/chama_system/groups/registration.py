"""Group registration workflow.

Validates the registration form, assembles the Group aggregate with its
chairman Identity and adopts the chairman into the caller's auth context.
Nothing is mutated unless every check passes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from ..auth.context import AuthContext
from ..auth.policy import CredentialPolicy
from ..common.datetime_utils import now_utc
from ..common.ids import new_id
from ..common.validators import require_email, require_non_empty
from ..core.enums import Role, SlotStatus
from ..core.exceptions import DuplicateEmailError, ValidationError
from ..members.model import Identity
from .model import Group, GroupRegistrationInput, OfficerSlot, RegisteredGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _CleanInput:
    group_name: str
    email: str
    account_no: str
    chairman_name: str
    chairman_email: str
    secretary_name: str
    secretary_email: str
    treasurer_name: str
    treasurer_email: str


def has_document(document: Any) -> bool:
    """True when a file reference was supplied. Contents are not inspected."""
    if not document:
        return False
    if isinstance(document, str):
        return bool(document.strip())
    filename = getattr(document, "filename", None)
    if filename is not None:
        return bool(filename)
    return True


class GroupRegistrationWorkflow:
    """Use case: register a new group and its chairman."""

    def __init__(
        self,
        *,
        policy: Optional[CredentialPolicy] = None,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._policy = policy or CredentialPolicy()
        self._new_id = id_factory
        self._clock = clock

    def validate(self, data: GroupRegistrationInput) -> _CleanInput:
        """Check fields in form order; raise on the first failure."""
        group_name = require_non_empty(data.group_name, "group_name")
        email = require_email(data.email, "email")
        account_no = require_non_empty(data.account_no, "account_no")
        chairman_name = require_non_empty(data.chairman_name, "chairman_name")
        chairman_email = require_email(data.chairman_email, "chairman_email")
        self._policy.check(data.chairman_password, "chairman_password")
        secretary_name = require_non_empty(data.secretary_name, "secretary_name")
        secretary_email = require_email(data.secretary_email, "secretary_email")
        treasurer_name = require_non_empty(data.treasurer_name, "treasurer_name")
        treasurer_email = require_email(data.treasurer_email, "treasurer_email")
        if not has_document(data.document):
            raise ValidationError("document", "a supporting document is required")

        seen: dict[str, str] = {}
        for field_name, value in (
            ("chairman_email", chairman_email),
            ("secretary_email", secretary_email),
            ("treasurer_email", treasurer_email),
        ):
            key = value.lower()
            if key in seen:
                raise DuplicateEmailError(field_name, f"is already used by {seen[key]}")
            seen[key] = field_name

        return _CleanInput(
            group_name=group_name,
            email=email,
            account_no=account_no,
            chairman_name=chairman_name,
            chairman_email=chairman_email,
            secretary_name=secretary_name,
            secretary_email=secretary_email,
            treasurer_name=treasurer_name,
            treasurer_email=treasurer_email,
        )

    def build(self, clean: _CleanInput) -> RegisteredGroup:
        now = self._clock()
        group_id = self._new_id()
        chairman_id = self._new_id()

        chairman = Identity(
            identity_id=chairman_id,
            name=clean.chairman_name,
            email=clean.chairman_email,
            role=Role.CHAIRMAN,
            created_at=now,
            total_contributions=Decimal("0"),
        )
        group = Group(
            group_id=group_id,
            name=clean.group_name,
            email=clean.email,
            account_no=clean.account_no,
            chairman=chairman,
            secretary=OfficerSlot(
                role=Role.SECRETARY,
                name=clean.secretary_name,
                email=clean.secretary_email,
                status=SlotStatus.PENDING_ACTIVATION,
            ),
            treasurer=OfficerSlot(
                role=Role.TREASURER,
                name=clean.treasurer_name,
                email=clean.treasurer_email,
                status=SlotStatus.PENDING_ACTIVATION,
            ),
            created_at=now,
        )
        return RegisteredGroup(group=group, chairman=chairman)

    def register_group(self, data: GroupRegistrationInput, *, auth: AuthContext) -> RegisteredGroup:
        clean = self.validate(data)
        registered = self.build(clean)
        auth.login(registered.chairman)
        logger.info("Registered group %s with chairman %s", registered.group.group_id, registered.chairman.identity_id)
        return registered

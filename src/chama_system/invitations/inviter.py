from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Protocol

from ..groups.model import OfficerSlot

logger = logging.getLogger(__name__)


class Inviter(Protocol):
    """Invitation collaborator: asks a pending officer to activate an account.

    Raises InvitationError when delivery fails.
    """

    def invite(self, slot: OfficerSlot, group_id: str) -> None:
        raise NotImplementedError


class LoggingInviter(Inviter):
    """Writes invitations to the log; stands in until a mail gateway is wired."""

    def invite(self, slot: OfficerSlot, group_id: str) -> None:
        logger.info("Invitation for %s (%s) to join group %s", slot.role.value, slot.email, group_id)


@dataclass(frozen=True)
class SentInvitation:
    group_id: str
    slot: OfficerSlot


class OutboxInviter(Inviter):
    """Keeps sent invitations in memory."""

    def __init__(self):
        self._lock = threading.Lock()
        self._sent: list[SentInvitation] = []

    def invite(self, slot: OfficerSlot, group_id: str) -> None:
        with self._lock:
            self._sent.append(SentInvitation(group_id=group_id, slot=slot))

    @property
    def sent(self) -> list[SentInvitation]:
        with self._lock:
            return list(self._sent)

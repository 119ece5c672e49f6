from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .auth.policy import CredentialPolicy
from .database.connection import DatabaseConnection, DBConfig
from .documents.store import DocumentStore, InMemoryDocumentStore, LocalDocumentStore
from .groups.memory_group_repository import InMemoryGroupRepository
from .groups.mysql_group_repository import MySQLGroupRepository
from .groups.registration import GroupRegistrationWorkflow
from .groups.repository import GroupRepository
from .groups.service import GroupService
from .invitations.inviter import Inviter, LoggingInviter


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    groups_repo: GroupRepository
    inviter: Inviter
    documents: DocumentStore

    registration_workflow: GroupRegistrationWorkflow
    group_service: GroupService


def build_container(settings: Any, *, inviter: Optional[Inviter] = None) -> Container:
    backend = str(getattr(settings, "PERSISTENCE_BACKEND", "memory")).lower()

    conn: Optional[DatabaseConnection] = None
    groups_repo: GroupRepository
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        groups_repo = MySQLGroupRepository(conn)
    elif backend == "memory":
        groups_repo = InMemoryGroupRepository()
    else:
        raise ValueError(f"Unknown PERSISTENCE_BACKEND: {backend!r}")

    documents: DocumentStore
    if str(getattr(settings, "DOCUMENT_BACKEND", "local")).lower() == "memory":
        documents = InMemoryDocumentStore()
    else:
        documents = LocalDocumentStore(getattr(settings, "UPLOAD_DIR", "uploads"))

    inviter = inviter or LoggingInviter()

    registration_workflow = GroupRegistrationWorkflow(
        policy=CredentialPolicy(min_length=int(getattr(settings, "MIN_SECRET_LENGTH", 8))),
    )
    group_service = GroupService(registration_workflow, groups_repo, inviter, documents)

    return Container(
        conn=conn,
        groups_repo=groups_repo,
        inviter=inviter,
        documents=documents,
        registration_workflow=registration_workflow,
        group_service=group_service,
    )

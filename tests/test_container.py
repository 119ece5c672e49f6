from __future__ import annotations

from types import SimpleNamespace

import pytest

from chama_system.container import build_container
from chama_system.documents.store import InMemoryDocumentStore, LocalDocumentStore
from chama_system.groups.memory_group_repository import InMemoryGroupRepository
from chama_system.groups.mysql_group_repository import MySQLGroupRepository
from chama_system.invitations.inviter import LoggingInviter

DB_CONFIG = {"host": "db", "port": 3306, "user": "chama", "password": "pw", "database": "chama_db"}


def test_memory_backend(tmp_path):
    container = build_container(SimpleNamespace(PERSISTENCE_BACKEND="memory", UPLOAD_DIR=str(tmp_path)))

    assert isinstance(container.groups_repo, InMemoryGroupRepository)
    assert isinstance(container.documents, LocalDocumentStore)
    assert isinstance(container.inviter, LoggingInviter)
    assert container.conn is None


def test_mysql_backend_does_not_connect_eagerly():
    container = build_container(
        SimpleNamespace(PERSISTENCE_BACKEND="mysql", DB_CONFIG=DB_CONFIG, DOCUMENT_BACKEND="memory")
    )

    assert isinstance(container.groups_repo, MySQLGroupRepository)
    assert isinstance(container.documents, InMemoryDocumentStore)
    assert container.conn.config.database == "chama_db"


def test_unknown_backend():
    with pytest.raises(ValueError):
        build_container(SimpleNamespace(PERSISTENCE_BACKEND="sqlite"))

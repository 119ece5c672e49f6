from __future__ import annotations

from datetime import timezone
from decimal import Decimal
from typing import Any, Optional

import mysql.connector

from ..core.enums import Role, SlotStatus
from ..core.exceptions import PersistenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..members.model import Identity
from .model import Group, OfficerSlot
from .repository import GroupRepository


def _naive(value):
    # MySQL DATETIME has no timezone; values are stored as UTC
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _aware(value):
    return value.replace(tzinfo=timezone.utc) if value is not None and value.tzinfo is None else value


class MySQLGroupRepository(GroupRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_registration(self, group: Group, chairman: Identity) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO chama_groups(group_id, name, email, account_no, chairman_id, created_at)
                    VALUES(%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        group.group_id,
                        group.name,
                        group.email,
                        group.account_no,
                        chairman.identity_id,
                        _naive(group.created_at),
                    ),
                )
                cur.execute(
                    """
                    INSERT INTO identities(identity_id, group_id, name, email, role,
                                           total_contributions, last_contribution_at, avatar, created_at)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        chairman.identity_id,
                        group.group_id,
                        chairman.name,
                        chairman.email,
                        chairman.role.value,
                        chairman.total_contributions,
                        _naive(chairman.last_contribution_at),
                        chairman.avatar,
                        _naive(chairman.created_at),
                    ),
                )
                cur.executemany(
                    """
                    INSERT INTO officer_slots(group_id, role, name, email, status)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    [
                        (group.group_id, slot.role.value, slot.name, slot.email, slot.status.value)
                        for slot in group.officer_slots
                    ],
                )
        except mysql.connector.Error as e:
            raise PersistenceError(f"Could not store group {group.group_id}: {e.msg}") from e

    def get_by_id(self, group_id: str) -> Optional[Group]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    SELECT g.group_id, g.name, g.email, g.account_no, g.created_at,
                           i.identity_id, i.name AS chairman_name, i.email AS chairman_email, i.role,
                           i.total_contributions, i.last_contribution_at, i.avatar,
                           i.created_at AS chairman_created_at
                    FROM chama_groups g
                    JOIN identities i ON i.identity_id = g.chairman_id
                    WHERE g.group_id=%s
                    """,
                    (group_id,),
                )
                row = fetchone(cur)
                if not row:
                    return None
                cur.execute(
                    "SELECT role, name, email, status FROM officer_slots WHERE group_id=%s",
                    (group_id,),
                )
                slots = {r["role"]: r for r in fetchall(cur)}
        except mysql.connector.Error as e:
            raise PersistenceError(f"Could not load group {group_id}: {e.msg}") from e
        return self._to_group(row, slots)

    def get_for_identity(self, identity_id: str) -> Optional[Group]:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("SELECT group_id FROM identities WHERE identity_id=%s", (identity_id,))
                row = fetchone(cur)
        except mysql.connector.Error as e:
            raise PersistenceError(f"Could not look up identity {identity_id}: {e.msg}") from e
        if not row:
            return None
        return self.get_by_id(row["group_id"])

    @staticmethod
    def _to_group(row: dict[str, Any], slots: dict[str, dict[str, Any]]) -> Group:
        total = row.get("total_contributions")
        chairman = Identity(
            identity_id=row["identity_id"],
            name=row["chairman_name"],
            email=row["chairman_email"],
            role=Role(row["role"]),
            created_at=_aware(row["chairman_created_at"]),
            total_contributions=Decimal(total) if total is not None else None,
            last_contribution_at=_aware(row.get("last_contribution_at")),
            avatar=row.get("avatar"),
        )

        def slot(role: Role) -> OfficerSlot:
            r = slots[role.value]
            return OfficerSlot(role=role, name=r["name"], email=r["email"], status=SlotStatus(r["status"]))

        return Group(
            group_id=row["group_id"],
            name=row["name"],
            email=row["email"],
            account_no=row["account_no"],
            chairman=chairman,
            secretary=slot(Role.SECRETARY),
            treasurer=slot(Role.TREASURER),
            created_at=_aware(row["created_at"]),
        )

"""Storage backends for roles, keyed by application id.

The registry only talks to these methods, so swapping the in-memory store for
the SQL one changes persistence without touching the permission engine.

    list_roles(app_id)          ordered role sequence
    get(app_id, role_id)        Role or None
    insert(app_id, role)        append to the sequence
    save(app_id, role)          replace an existing role in place
    remove(app_id, role_id)     drop from the sequence
    next_sequence(app_id)       next value of the monotonic id counter
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional
from sqlalchemy import select, func
from rolecatalog.models.catalog import Role
from rolecatalog.models.roles import RoleRecord, RoleSequence


class InMemoryRoleStore:
    def __init__(self):
        self._roles: Dict[str, Dict[str, Role]] = {}
        self._sequences: Dict[str, int] = {}

    def list_roles(self, app_id: str) -> List[Role]:
        return list(self._roles.get(app_id, {}).values())

    def get(self, app_id: str, role_id: str) -> Optional[Role]:
        return self._roles.get(app_id, {}).get(role_id)

    def insert(self, app_id: str, role: Role):
        roles = self._roles.setdefault(app_id, {})
        if role.id in roles:
            raise ValueError(f"role id '{role.id}' already used in '{app_id}'")
        roles[role.id] = role

    def save(self, app_id: str, role: Role):
        # dict assignment keeps the insertion position
        self._roles[app_id][role.id] = role

    def remove(self, app_id: str, role_id: str):
        del self._roles[app_id][role_id]

    def next_sequence(self, app_id: str) -> int:
        value = self._sequences.get(app_id, 0) + 1
        self._sequences[app_id] = value
        return value


class SqlRoleStore:
    """Roles persisted in `app_roles`; each write commits or rolls back as a unit."""

    def __init__(self, session_factory: Callable):
        self._session_factory = session_factory

    def list_roles(self, app_id: str) -> List[Role]:
        session = self._session_factory()
        rows = session.execute(
            select(RoleRecord).where(RoleRecord.app_id == app_id).order_by(RoleRecord.position.asc(), RoleRecord.id.asc())
        ).scalars().all()
        return [_to_role(r) for r in rows]

    def get(self, app_id: str, role_id: str) -> Optional[Role]:
        row = self._find(self._session_factory(), app_id, role_id)
        return _to_role(row) if row else None

    def insert(self, app_id: str, role: Role):
        session = self._session_factory()
        try:
            last = session.execute(
                select(func.max(RoleRecord.position)).where(RoleRecord.app_id == app_id)
            ).scalar_one_or_none()
            row = RoleRecord(app_id=app_id, role_id=role.id, position=(last or 0) + 1)
            _apply(row, role)
            session.add(row)
            session.commit()
        except Exception:
            session.rollback()
            raise

    def save(self, app_id: str, role: Role):
        session = self._session_factory()
        try:
            row = self._find(session, app_id, role.id)
            if row is None:
                raise LookupError(role.id)
            _apply(row, role)
            session.commit()
        except Exception:
            session.rollback()
            raise

    def remove(self, app_id: str, role_id: str):
        session = self._session_factory()
        try:
            row = self._find(session, app_id, role_id)
            if row is None:
                raise LookupError(role_id)
            session.delete(row)
            session.commit()
        except Exception:
            session.rollback()
            raise

    def next_sequence(self, app_id: str) -> int:
        session = self._session_factory()
        try:
            seq = session.get(RoleSequence, app_id)
            if seq is None:
                seq = RoleSequence(app_id=app_id, last_value=0)
                session.add(seq)
            seq.last_value = (seq.last_value or 0) + 1
            value = seq.last_value
            session.commit()
            return value
        except Exception:
            session.rollback()
            raise

    @staticmethod
    def _find(session, app_id: str, role_id: str) -> Optional[RoleRecord]:
        return session.execute(
            select(RoleRecord).where(RoleRecord.app_id == app_id, RoleRecord.role_id == role_id)
        ).scalar_one_or_none()


def _apply(row: RoleRecord, role: Role):
    row.name = role.name
    row.description = role.description
    row.is_system = role.is_system
    row.permissions = sorted(role.permissions)


def _to_role(row: RoleRecord) -> Role:
    return Role(
        id=row.role_id,
        name=row.name,
        description=row.description,
        is_system=bool(row.is_system),
        permissions=frozenset(row.permissions or ()),
    )


__all__ = ['InMemoryRoleStore', 'SqlRoleStore']

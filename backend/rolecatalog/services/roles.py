from __future__ import annotations
import dataclasses
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping
from rolecatalog.errors import NotFound, SystemRoleProtected
from rolecatalog.models.catalog import Role, ROLE_FIELDS
from rolecatalog.services.catalog import Catalog
from rolecatalog.services.policy import PermissionEngine

logger = logging.getLogger(__name__)

ROLE_ID_PREFIX = 'role-'


class RoleRegistry:
    """CRUD over the roles of each application.

    Writes raise NotFound for unknown application/role ids and are serialized
    per application. Permission strings are stored as given; the engine decides
    what they grant at query time.
    """

    def __init__(self, catalog: Catalog, store, engine: PermissionEngine = None):
        self.catalog = catalog
        self.store = store
        self.engine = engine or PermissionEngine(catalog)
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, app_id: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(app_id)
            if lock is None:
                lock = self._locks[app_id] = threading.Lock()
            return lock

    def _require_app(self, app_id: str):
        if self.catalog.get_application(app_id) is None:
            raise NotFound('application', app_id)

    # --- reads ---
    def list_roles(self, app_id: str) -> List[Role]:
        if self.catalog.get_application(app_id) is None:
            return []
        return self.store.list_roles(app_id)

    def get_role(self, app_id: str, role_id: str) -> Role:
        self._require_app(app_id)
        role = self.store.get(app_id, role_id)
        if role is None:
            raise NotFound('role', role_id)
        return role

    def role_has_permission(self, app_id: str, role_id: str, permission: str) -> bool:
        if self.catalog.get_application(app_id) is None:
            return False
        role = self.store.get(app_id, role_id)
        if role is None:
            return False
        return self.engine.has_permission(app_id, role.grants, permission)

    def role_permission_count(self, app_id: str, role_id: str) -> int:
        if self.catalog.get_application(app_id) is None:
            return 0
        role = self.store.get(app_id, role_id)
        if role is None:
            return 0
        return self.engine.count_effective(app_id, role.grants)

    # --- writes ---
    def add_role(self, app_id: str, role_data: Mapping[str, Any]) -> Role:
        self._require_app(app_id)
        with self._lock_for(app_id):
            taken = {r.id for r in self.store.list_roles(app_id)}
            role_id = self._next_role_id(app_id, taken)
            role = Role.from_dict(role_id, dict(role_data))
            self.store.insert(app_id, role)
        logger.info('role created app=%s role=%s permissions=%d', app_id, role.id, len(role.permissions))
        return role

    def update_role(self, app_id: str, role_id: str, updates: Mapping[str, Any]) -> Role:
        self._require_app(app_id)
        with self._lock_for(app_id):
            current = self.store.get(app_id, role_id)
            if current is None:
                raise NotFound('role', role_id)
            changes = {k: v for k, v in (updates or {}).items() if k in ROLE_FIELDS}
            if 'permissions' in changes:
                changes['permissions'] = frozenset(changes['permissions'] or ())
            if 'is_system' in changes:
                changes['is_system'] = bool(changes['is_system'])
            role = dataclasses.replace(current, **changes)
            self.store.save(app_id, role)
        logger.info('role updated app=%s role=%s fields=%s', app_id, role_id, sorted(changes))
        return role

    def delete_role(self, app_id: str, role_id: str, allow_system: bool = True) -> None:
        """Remove a role; with allow_system=False system roles raise SystemRoleProtected."""
        self._require_app(app_id)
        with self._lock_for(app_id):
            role = self.store.get(app_id, role_id)
            if role is None:
                raise NotFound('role', role_id)
            if role.is_system and not allow_system:
                raise SystemRoleProtected(role_id)
            self.store.remove(app_id, role_id)
        logger.info('role deleted app=%s role=%s', app_id, role_id)

    def seed(self, presets: Mapping[str, Iterable[Mapping[str, Any]]]) -> int:
        """Install preset roles (keeping their ids) for applications with no roles yet."""
        created = 0
        for app_id, roles in presets.items():
            if self.catalog.get_application(app_id) is None:
                logger.warning('skipping presets for unknown application %s', app_id)
                continue
            with self._lock_for(app_id):
                if self.store.list_roles(app_id):
                    continue
                for data in roles:
                    self.store.insert(app_id, Role.from_dict(data['id'], data))
                    created += 1
        return created

    def _next_role_id(self, app_id: str, taken: set) -> str:
        # The counter never goes backwards, so deleted ids are never issued again.
        while True:
            candidate = f"{ROLE_ID_PREFIX}{self.store.next_sequence(app_id)}"
            if candidate not in taken:
                return candidate


__all__ = ['RoleRegistry', 'ROLE_ID_PREFIX']

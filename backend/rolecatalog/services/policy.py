from __future__ import annotations
from typing import Iterable, Set, Union
from rolecatalog.models.grants import ExactGrant, Grant, WildcardGrant, parse_grant, parse_grants
from rolecatalog.services.catalog import Catalog

PermissionInput = Iterable[Union[str, Grant]]

COVERAGE_ALL = 'all'
COVERAGE_PARTIAL = 'partial'
COVERAGE_NONE = 'none'


class PermissionEngine:
    """Expansion and containment of permission grants against a catalog.

    Every operation is pure and total: unknown applications, dangling module
    references and malformed strings contribute nothing instead of raising.
    Wildcards are resolved against the catalog on every call.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def expand(self, app_id: str, permissions: PermissionInput) -> Set[str]:
        expanded: Set[str] = set()
        for grant in parse_grants(permissions):
            if isinstance(grant, WildcardGrant):
                for action in self.catalog.list_actions(app_id, grant.module):
                    expanded.add(f"{grant.module}.{action.id}")
            else:
                # exact grants pass through even when the action no longer exists
                expanded.add(str(grant))
        return expanded

    def has_permission(self, app_id: str, permissions: PermissionInput, candidate: str) -> bool:
        """Exact match or module wildcard; does not consult the catalog."""
        wanted = parse_grant(candidate)
        if not isinstance(wanted, ExactGrant):
            return False
        grants = parse_grants(permissions)
        return wanted in grants or WildcardGrant(wanted.module) in grants

    def count_effective(self, app_id: str, permissions: PermissionInput) -> int:
        return len(self.expand(app_id, permissions))

    def module_coverage(self, app_id: str, permissions: PermissionInput, module_id: str) -> str:
        """'all', 'partial' or 'none' of the module's actions granted."""
        actions = self.catalog.list_actions(app_id, module_id)
        if not actions:
            return COVERAGE_NONE
        expanded = self.expand(app_id, permissions)
        granted = sum(1 for a in actions if f"{module_id}.{a.id}" in expanded)
        if granted == len(actions):
            return COVERAGE_ALL
        return COVERAGE_PARTIAL if granted else COVERAGE_NONE


__all__ = ['PermissionEngine', 'COVERAGE_ALL', 'COVERAGE_PARTIAL', 'COVERAGE_NONE']

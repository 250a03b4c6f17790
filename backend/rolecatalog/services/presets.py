from __future__ import annotations
from typing import Any, Iterable, List, Mapping
from rolecatalog.models.grants import ExactGrant, parse_grant
from rolecatalog.services.catalog import Catalog


def validate_presets(catalog: Catalog, presets: Mapping[str, Iterable[Mapping[str, Any]]]) -> List[str]:
    """Return problems found in preset roles: unknown applications, modules or actions.

    The engine tolerates all of these at query time; this check exists for
    authoring-time tooling (seed script, tests).
    """
    problems: List[str] = []
    for app_id, roles in presets.items():
        if catalog.get_application(app_id) is None:
            problems.append(f"Unknown application '{app_id}'")
            continue
        seen_ids = set()
        for role in roles:
            if role['id'] in seen_ids:
                problems.append(f"{app_id}: duplicate role id '{role['id']}'")
            seen_ids.add(role['id'])
            for raw in role.get('permissions', []):
                grant = parse_grant(raw)
                if grant is None:
                    problems.append(f"{app_id}/{role['id']}: malformed permission '{raw}'")
                    continue
                module = catalog.get_module(app_id, grant.module)
                if module is None:
                    problems.append(f"{app_id}/{role['id']}: unknown module in '{raw}'")
                elif isinstance(grant, ExactGrant) and module.find_action(grant.action) is None:
                    problems.append(f"{app_id}/{role['id']}: unknown action in '{raw}'")
    return problems


__all__ = ['validate_presets']

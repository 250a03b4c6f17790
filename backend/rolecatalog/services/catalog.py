"""Read-only catalog of applications, modules and actions.

Lookups never raise for unknown ids: permission checks must stay total over
arbitrary strings, so absence is reported as None or an empty list.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
from rolecatalog.models.catalog import Action, Module, Application


class Catalog:
    def __init__(self, applications: Iterable[Application]):
        self._apps: Dict[str, Application] = {}
        for app in applications:
            if app.id in self._apps:
                raise ValueError(f"Duplicate application id '{app.id}'")
            _assert_unique([m.id for m in app.modules], f"module id in application '{app.id}'")
            for module in app.modules:
                _assert_unique([a.id for a in module.actions], f"action id in module '{app.id}/{module.id}'")
            self._apps[app.id] = app

    @classmethod
    def from_config(cls, apps_config: Iterable[Dict[str, Any]]) -> 'Catalog':
        """Build from the APPLICATIONS structure in constants.permissions."""
        apps = []
        for cfg in apps_config:
            modules = [
                Module(
                    id=m['id'],
                    name=m.get('name', m['id']),
                    description=m.get('description', ''),
                    actions=[Action(*a) if isinstance(a, (tuple, list)) else Action(**a) for a in m.get('actions', [])],
                )
                for m in cfg.get('modules', [])
            ]
            apps.append(Application(
                id=cfg['id'],
                name=cfg.get('name', cfg['id']),
                description=cfg.get('description', ''),
                is_enabled=bool(cfg.get('is_enabled', True)),
                color=cfg.get('color', ''),
                icon=cfg.get('icon', ''),
                modules=modules,
            ))
        return cls(apps)

    def get_application(self, app_id: str) -> Optional[Application]:
        return self._apps.get(app_id)

    def list_applications(self, enabled_only: bool = False) -> List[Application]:
        apps = list(self._apps.values())
        if enabled_only:
            return [a for a in apps if a.is_enabled]
        return apps

    def list_modules(self, app_id: str) -> List[Module]:
        app = self._apps.get(app_id)
        return list(app.modules) if app else []

    def get_module(self, app_id: str, module_id: str) -> Optional[Module]:
        app = self._apps.get(app_id)
        return app.find_module(module_id) if app else None

    def list_actions(self, app_id: str, module_id: str) -> List[Action]:
        module = self.get_module(app_id, module_id)
        return list(module.actions) if module else []

    def permission_codes(self, app_id: str) -> List[str]:
        """Every exact permission of the application, in catalog order."""
        return [f"{m.id}.{a.id}" for m in self.list_modules(app_id) for a in m.actions]


def _assert_unique(ids: List[str], label: str):
    seen = set()
    for ident in ids:
        if ident in seen:
            raise ValueError(f"Duplicate {label}: '{ident}'")
        seen.add(ident)


__all__ = ['Catalog']

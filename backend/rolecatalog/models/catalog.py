from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from .grants import Grant, parse_grants


# --- Catalog (authored configuration) ---
@dataclass(frozen=True)
class Action:
    id: str
    name: str
    description: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'description': self.description}


@dataclass
class Module:
    id: str
    name: str
    description: str = ''
    actions: List[Action] = field(default_factory=list)

    def find_action(self, action_id: str) -> Optional[Action]:
        for action in self.actions:
            if action.id == action_id:
                return action
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'actions': [a.to_dict() for a in self.actions],
        }


@dataclass
class Application:
    id: str
    name: str
    description: str = ''
    is_enabled: bool = True
    color: str = ''
    icon: str = ''
    modules: List[Module] = field(default_factory=list)

    def find_module(self, module_id: str) -> Optional[Module]:
        for module in self.modules:
            if module.id == module_id:
                return module
        return None

    @property
    def action_count(self) -> int:
        return sum(len(m.actions) for m in self.modules)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'is_enabled': self.is_enabled,
            'color': self.color,
            'icon': self.icon,
            'modules': [m.to_dict() for m in self.modules],
        }


# --- Roles (runtime data, owned by the registry) ---
ROLE_FIELDS = ('name', 'description', 'is_system', 'permissions')


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    description: Optional[str] = None
    is_system: bool = False
    permissions: FrozenSet[str] = frozenset()
    grants: FrozenSet[Grant] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Permission strings collapse to a set; grants are parsed once here.
        perms = frozenset(self.permissions or ())
        object.__setattr__(self, 'permissions', perms)
        object.__setattr__(self, 'grants', frozenset(parse_grants(perms)))

    @classmethod
    def from_dict(cls, role_id: str, data: Dict[str, Any]) -> 'Role':
        return cls(
            id=role_id,
            name=data.get('name', ''),
            description=data.get('description'),
            is_system=bool(data.get('is_system', False)),
            permissions=frozenset(data.get('permissions') or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'is_system': self.is_system,
            'permissions': sorted(self.permissions),
        }


__all__ = ['Action', 'Module', 'Application', 'Role', 'ROLE_FIELDS']

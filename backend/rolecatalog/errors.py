"""Domain errors raised by the role registry.

Catalog lookups and permission checks never raise; only registry writes (and
`get_role`) report a missing application or role, and a guarded delete
refuses system roles.
"""
from __future__ import annotations


class NotFound(LookupError):
    """Referenced application or role does not exist."""

    def __init__(self, kind: str, ident: str):
        self.kind = kind
        self.ident = ident
        super().__init__(f"{kind} '{ident}' not found")


class SystemRoleProtected(ValueError):
    """Deleting a system role was refused."""

    def __init__(self, role_id: str):
        self.role_id = role_id
        super().__init__('system roles cannot be deleted')


__all__ = ['NotFound', 'SystemRoleProtected']

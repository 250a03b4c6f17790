"""Parsed permission grants.

External format stays the plain string used by stored roles and the admin API:
    "<module>.<action>"   exact grant
    "<module>.*"          every action currently defined in <module>

A trailing ".*" always marks a wildcard, and its module is everything before it,
so "customers.view.*" is a wildcard on module "customers.view". Other strings
are split on the first '.': "reports.export.pdf" is an exact grant for action
"export.pdf" of module "reports". Strings without a '.' or with an empty
module/action part are malformed and parse to None.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Set, Union

WILDCARD = '*'
WILDCARD_SUFFIX = '.' + WILDCARD


@dataclass(frozen=True)
class ExactGrant:
    module: str
    action: str

    def __str__(self) -> str:
        return f"{self.module}.{self.action}"


@dataclass(frozen=True)
class WildcardGrant:
    module: str

    def __str__(self) -> str:
        return f"{self.module}.{WILDCARD}"


Grant = Union[ExactGrant, WildcardGrant]


def parse_grant(raw) -> Optional[Grant]:
    if isinstance(raw, (ExactGrant, WildcardGrant)):
        return raw
    if not isinstance(raw, str) or '.' not in raw:
        return None
    if raw.endswith(WILDCARD_SUFFIX):
        module = raw[:-len(WILDCARD_SUFFIX)]
        return WildcardGrant(module) if module else None
    module, action = raw.split('.', 1)
    if not module or not action:
        return None
    return ExactGrant(module, action)


def parse_grants(raws: Iterable) -> Set[Grant]:
    """Parse an iterable of strings/grants, dropping malformed entries."""
    out: Set[Grant] = set()
    for raw in raws or ():
        grant = parse_grant(raw)
        if grant is not None:
            out.add(grant)
    return out


__all__ = ['ExactGrant', 'WildcardGrant', 'Grant', 'WILDCARD', 'parse_grant', 'parse_grants']

"""Test seeding utilities to reduce duplication.

These helpers build small synthetic catalogs and role stores so engine and
registry tests do not depend on the production preset data.
"""
from typing import Dict, Iterable, List
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from rolecatalog.models.catalog import Action, Module, Application
from rolecatalog.models.roles import Base
from rolecatalog.services.catalog import Catalog
from rolecatalog.services.role_store import InMemoryRoleStore, SqlRoleStore


def make_application(app_id: str, modules: Dict[str, Iterable[str]], is_enabled: bool = True) -> Application:
    """Application whose modules map module id -> action ids (names derived from ids)."""
    return Application(
        id=app_id,
        name=app_id.title(),
        is_enabled=is_enabled,
        modules=[
            Module(id=mid, name=mid.title(), actions=[Action(a, a.title()) for a in actions])
            for mid, actions in modules.items()
        ],
    )


def make_catalog(apps: Dict[str, Dict[str, Iterable[str]]]) -> Catalog:
    return Catalog([make_application(app_id, modules) for app_id, modules in apps.items()])


def sales_catalog() -> Catalog:
    """The customers module from the sales application, plus a small leads module."""
    return make_catalog({
        'sales': {
            'customers': ['view', 'create', 'edit', 'delete', 'export'],
            'leads': ['view', 'convert'],
        },
        'hr': {'employees': ['view', 'edit']},
    })


def make_sql_store() -> SqlRoleStore:
    """SQL store over a private in-memory SQLite database."""
    engine = create_engine(
        'sqlite+pysqlite:///:memory:',
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = scoped_session(sessionmaker(bind=engine, expire_on_commit=False, autoflush=False))
    return SqlRoleStore(factory)


def make_store(kind: str):
    if kind == 'sql':
        return make_sql_store()
    return InMemoryRoleStore()


STORE_KINDS: List[str] = ['memory', 'sql']


__all__ = ['make_application', 'make_catalog', 'sales_catalog', 'make_sql_store', 'make_store', 'STORE_KINDS']

from flask import Flask, current_app
from werkzeug.exceptions import HTTPException
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import sessionmaker, scoped_session
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

load_dotenv()

db_engine = None
SessionLocal = None

EXTENSION_KEY = 'rolecatalog'


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ('1', 'true', 'yes', 'on')


def create_app(config: Optional[Dict[str, Any]] = None):
    global db_engine, SessionLocal
    app = Flask(__name__)

    app.config['DATABASE_URL'] = os.getenv('DATABASE_URL', 'sqlite:///dev.db')
    app.config['ROLE_STORE'] = os.getenv('ROLE_STORE', 'memory')
    app.config['SEED_PRESET_ROLES'] = _env_flag('SEED_PRESET_ROLES', True)
    app.config['AUTO_CREATE_SCHEMA'] = _env_flag('AUTO_CREATE_SCHEMA', False)

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    # Database
    db_url = app.config['DATABASE_URL']
    if db_url.endswith(':memory:'):
        # Ensure a single shared in-memory SQLite database across all sessions
        db_engine = create_engine(
            db_url,
            echo=False,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(db_url, echo=False, future=True)
    SessionLocal = scoped_session(sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False))

    from .constants.permissions import APPLICATIONS, ROLE_PRESETS
    from .services.catalog import Catalog
    from .services.roles import RoleRegistry
    from .services.role_store import InMemoryRoleStore, SqlRoleStore

    store_kind = app.config['ROLE_STORE']
    if store_kind == 'sql':
        if app.config['AUTO_CREATE_SCHEMA']:
            from .models.roles import Base
            Base.metadata.create_all(db_engine)
        store = SqlRoleStore(get_db)
    elif store_kind == 'memory':
        store = InMemoryRoleStore()
    else:
        raise ValueError(f"Unknown ROLE_STORE '{store_kind}' (expected 'memory' or 'sql')")

    registry = RoleRegistry(Catalog.from_config(APPLICATIONS), store)
    if app.config['SEED_PRESET_ROLES']:
        created = registry.seed(ROLE_PRESETS)
        app.logger.info('seeded %d preset roles into %s store', created, store_kind)
    app.extensions[EXTENSION_KEY] = registry

    from .routes.admin import admin_bp
    app.register_blueprint(admin_bp, url_prefix='/admin')

    @app.teardown_appcontext
    def remove_session(exc=None):
        SessionLocal.remove()

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    from .errors import NotFound

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        if isinstance(e, NotFound):
            return {
                'error': {
                    'status': 404,
                    'title': 'Not Found',
                    'detail': str(e),
                }
            }, 404
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    return app


def get_db():
    return SessionLocal()


def get_registry():
    return current_app.extensions[EXTENSION_KEY]

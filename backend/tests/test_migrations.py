import os
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

MIGRATIONS = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'migrations'))


def _alembic_config():
    cfg = Config()
    cfg.set_main_option('script_location', MIGRATIONS)
    return cfg


def test_upgrade_creates_role_tables_and_downgrade_drops_them(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'roles.db'}"
    # env.py reads the target database from DATABASE_URL
    monkeypatch.setenv('DATABASE_URL', url)
    cfg = _alembic_config()
    command.upgrade(cfg, 'head')

    engine = create_engine(url, future=True)
    insp = inspect(engine)
    assert {'app_roles', 'app_role_sequences'} <= set(insp.get_table_names())
    cols = {c['name'] for c in insp.get_columns('app_roles')}
    assert {'app_id', 'role_id', 'name', 'description', 'is_system', 'permissions', 'position', 'updated_at'} <= cols
    uniques = [u['column_names'] for u in insp.get_unique_constraints('app_roles')]
    assert ['app_id', 'role_id'] in uniques
    engine.dispose()

    command.downgrade(cfg, 'base')
    engine = create_engine(url, future=True)
    assert 'app_roles' not in inspect(engine).get_table_names()
    engine.dispose()

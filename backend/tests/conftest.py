import os, sys, pytest
# Ensure backend directory is on path so 'rolecatalog' and 'tests' can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)
from rolecatalog import create_app


@pytest.fixture()
def app_instance():
    # Fresh app per test: the in-memory role store is process state.
    app = create_app({'DATABASE_URL': 'sqlite+pysqlite:///:memory:', 'ROLE_STORE': 'memory'})
    yield app


@pytest.fixture()
def sql_app_instance():
    app = create_app({
        'DATABASE_URL': 'sqlite+pysqlite:///:memory:',
        'ROLE_STORE': 'sql',
        'AUTO_CREATE_SCHEMA': True,
    })
    yield app


@pytest.fixture()
def client(app_instance):
    return app_instance.test_client()

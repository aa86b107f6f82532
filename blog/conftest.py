"""
Shared fixtures for the blog API tests.

Each test runs inside an outer connection-level transaction that is rolled
back afterwards, so joins, saves and deletes never leak between tests and the
seeded fixture data (users 1-3, boards 1-10) is the same for every test.
"""

import os
import tempfile

import pytest

# Point the DB at a temp file and provide a key before the app is imported
_test_db = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
_test_db.close()
os.environ["BLOG_DB_PATH"] = _test_db.name
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-unit-tests-1234567890")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from blog import database  # noqa: E402
from blog.main import app  # noqa: E402
from blog.security import create_token  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def _seeded_db():
    """TestClient without a `with` block skips lifespan, so seed here once."""
    database.init_db()
    yield
    database.engine.dispose()
    os.unlink(_test_db.name)


@pytest.fixture()
def db_session():
    connection = database.engine.connect()
    transaction = connection.begin()
    # commit() inside the app only releases a SAVEPOINT; the outer transaction stays open
    session = Session(bind=connection, join_transaction_mode="create_savepoint")
    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()


@pytest.fixture()
def client(db_session):
    def _override_get_db():
        yield db_session

    app.dependency_overrides[database.get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def access_token():
    """Token for the seeded user ssar (id 1), minted without going through /login."""
    return create_token(1, "ssar")


@pytest.fixture()
def auth_header(access_token):
    return {"Authorization": f"Bearer {access_token}"}

# tests/test_api/conftest.py
import pytest
from fastapi.testclient import TestClient

from api.main import app
from booknet.sa.database import get_db

@pytest.fixture
def client(database):
    """TestClient whose requests use the test database"""
    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

@pytest.fixture
def as_user():
    """Headers identifying the acting user"""
    def _headers(user):
        return {"X-User-Id": str(user.id)}
    return _headers

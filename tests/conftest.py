import pytest
from fastapi.testclient import TestClient

from core.security import get_current_user
from main import app
from services.draft_service import draft_store

TEST_USER = {"uid": "user-1", "email": "asha@packpal.app", "name": "Asha Rao"}


@pytest.fixture(autouse=True)
def reset_drafts():
    draft_store._drafts.clear()
    draft_store._versions.clear()
    yield
    draft_store._drafts.clear()
    draft_store._versions.clear()


@pytest.fixture
def client():
    app.dependency_overrides[get_current_user] = lambda: TEST_USER
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    with TestClient(app) as test_client:
        yield test_client

# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from party_invite.config import Settings
from party_invite.main import create_app
from party_invite.models import FoodChoice
from party_invite.services.auth_service import AuthService

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct horse battery staple"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def database(app):
    """Fresh in-memory database shared by the app and the test session"""
    database = app.state.database
    database.init_db()
    yield database
    database.dispose()


@pytest.fixture
def db_session(database):
    session = database.session()
    yield session
    session.close()


@pytest.fixture
def client(app, database):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def food_choices(db_session):
    """Pizza (id 1) and Pasta (id 2)"""
    choices = [FoodChoice(label="Pizza"), FoodChoice(label="Pasta")]
    db_session.add_all(choices)
    db_session.commit()
    return {choice.label: choice.id for choice in choices}


@pytest.fixture
def admin(db_session, settings):
    return AuthService(db_session, settings).seed_admin(ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def admin_headers(admin, db_session, settings):
    token = AuthService(db_session, settings).issue_token(admin)
    return {"Authorization": f"Bearer {token}"}

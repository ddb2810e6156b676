# tests/services/test_auth_service.py

from datetime import timedelta

import pytest

from party_invite.models import Admin
from party_invite.services.auth_service import AuthService
from party_invite.services.errors import AuthenticationError, ValidationError
from party_invite.utils.security import create_access_token

from ..conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_password_is_stored_hashed(admin):
    assert admin.password_hash != ADMIN_PASSWORD
    assert admin.password_hash.startswith("$2")


def test_authenticate_with_valid_credentials(db_session, settings, admin):
    assert AuthService(db_session, settings).authenticate(ADMIN_EMAIL, ADMIN_PASSWORD).id == admin.id


@pytest.mark.parametrize(
    "email, password",
    [(ADMIN_EMAIL, "wrong password"), ("nobody@example.com", ADMIN_PASSWORD)],
)
def test_authenticate_rejects_bad_credentials(db_session, settings, admin, email, password):
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        AuthService(db_session, settings).authenticate(email, password)


def test_authenticate_requires_both_fields(db_session, settings):
    with pytest.raises(ValidationError):
        AuthService(db_session, settings).authenticate(ADMIN_EMAIL, "")


def test_issued_token_identifies_admin(db_session, settings, admin):
    service = AuthService(db_session, settings)

    identity = service.identify(service.issue_token(admin))

    assert (identity.id, identity.email) == (admin.id, ADMIN_EMAIL)


def test_token_signed_with_another_secret_is_rejected(db_session, settings, admin):
    token = create_access_token({"sub": str(admin.id)}, secret="someone-else")

    with pytest.raises(AuthenticationError):
        AuthService(db_session, settings).identify(token)


def test_expired_token_is_rejected(db_session, settings, admin):
    token = create_access_token(
        {"sub": str(admin.id)},
        secret=settings.JWT_SECRET,
        expires_delta=timedelta(seconds=-10),
    )

    with pytest.raises(AuthenticationError):
        AuthService(db_session, settings).identify(token)


def test_token_for_removed_admin_is_rejected(db_session, settings, admin):
    service = AuthService(db_session, settings)
    token = service.issue_token(admin)
    db_session.delete(admin)
    db_session.commit()

    with pytest.raises(AuthenticationError):
        service.identify(token)


def test_seed_admin_resets_existing_password(db_session, settings, admin):
    service = AuthService(db_session, settings)

    service.seed_admin(ADMIN_EMAIL, "a new password")

    assert db_session.query(Admin).count() == 1
    assert service.authenticate(ADMIN_EMAIL, "a new password").id == admin.id
    with pytest.raises(AuthenticationError):
        service.authenticate(ADMIN_EMAIL, ADMIN_PASSWORD)

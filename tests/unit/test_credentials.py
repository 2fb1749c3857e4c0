"""Tests for password hashing and legacy credential upgrades."""

import pytest

from app.auth.credentials import CredentialVerifier
from app.exceptions import ConflictError, UnauthorizedError
from app.models.user import User
from app.schemas.user import LoginRequest, RegisterRequest
from app.services import account_service


def test_hash_is_not_the_password():
    verifier = CredentialVerifier()
    hashed = verifier.hash("rahasia")
    assert hashed != "rahasia"
    assert verifier.verify("rahasia", hashed) == (True, None)


def test_wrong_password_fails():
    verifier = CredentialVerifier()
    ok, new_hash = verifier.verify("salah", verifier.hash("rahasia"))
    assert not ok
    assert new_hash is None


def test_missing_stored_credential_fails():
    assert CredentialVerifier().verify("rahasia", None) == (False, None)


def test_plaintext_credential_verifies_and_asks_for_upgrade():
    verifier = CredentialVerifier()
    ok, new_hash = verifier.verify("rahasia", "rahasia")
    assert ok
    assert new_hash is not None and new_hash != "rahasia"
    assert verifier.verify("rahasia", new_hash) == (True, None)


@pytest.mark.asyncio
async def test_register_then_login(db):
    await account_service.register(db, RegisterRequest(nip="1001", name="Pak Joko", password="pw"))

    user = await account_service.login(db, LoginRequest(nip="1001", password="pw"))
    assert user.nip == "1001"
    assert user.username == "1001"
    assert user.password != "pw"


@pytest.mark.asyncio
async def test_register_twice_conflicts(db):
    body = RegisterRequest(nip="1001", name="Pak Joko", password="pw")
    await account_service.register(db, body)
    with pytest.raises(ConflictError):
        await account_service.register(db, body)


@pytest.mark.asyncio
async def test_login_upgrades_legacy_plaintext_row(db):
    db.add(User(nip="2002", name="Bu Rina", username="2002", password="lama"))
    await db.commit()

    await account_service.login(db, LoginRequest(nip="2002", password="lama"))

    db.expunge_all()
    user = await db.get(User, "2002")
    assert user.password != "lama"
    assert user.password.startswith("$pbkdf2-sha256$")


@pytest.mark.asyncio
async def test_login_rejects_unknown_user_and_bad_password(db):
    await account_service.register(db, RegisterRequest(nip="1001", name="Pak Joko", password="pw"))
    with pytest.raises(UnauthorizedError):
        await account_service.login(db, LoginRequest(nip="1001", password="nope"))
    with pytest.raises(UnauthorizedError):
        await account_service.login(db, LoginRequest(nip="9999", password="pw"))

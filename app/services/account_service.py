"""Registration, login and profile changes for user accounts."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.auth.credentials import CredentialVerifier, credential_verifier
from app.crud import crud_school, crud_user
from app.database import transaction
from app.exceptions import ConflictError, NotFoundError, UnauthorizedError
from app.models.user import User
from app.schemas.user import LoginRequest, RegisterRequest, UserUpdate

logger = logging.getLogger(__name__)


async def register(
    db: AsyncSession,
    body: RegisterRequest,
    verifier: CredentialVerifier = credential_verifier,
) -> User:
    async with transaction(db):
        if await crud_user.get(db, body.nip):
            raise ConflictError("User already exists")
        user = await crud_user.create_with_password(
            db, nip=body.nip, name=body.name, password_hash=verifier.hash(body.password)
        )
    logger.info("Registered user %s", user.nip)
    return user


async def login(
    db: AsyncSession,
    body: LoginRequest,
    verifier: CredentialVerifier = credential_verifier,
) -> User:
    async with transaction(db):
        user = await crud_user.get(db, body.nip)
        ok, new_hash = verifier.verify(body.password, user.password if user else None)
        if not ok:
            raise UnauthorizedError("Invalid credentials")
        if new_hash:
            user.password = new_hash
            await db.flush()
            logger.info("Upgraded stored credential for user %s", user.nip)
    return user


async def change_school(db: AsyncSession, nip: str, npsn: str | None) -> User:
    async with transaction(db):
        if npsn is not None and await crud_school.get(db, npsn) is None:
            raise NotFoundError("School not found")
        user = await crud_user.set_school(db, nip, npsn)
        if user is None:
            raise NotFoundError("User not found")
    return user


async def update_profile(db: AsyncSession, nip: str, body: UserUpdate) -> User:
    """Update name and personnel number; reports follow the new nip via ON UPDATE CASCADE."""
    async with transaction(db):
        user = await crud_user.get(db, nip)
        if user is None:
            raise NotFoundError("User not found")
        if body.nip != nip and await crud_user.get(db, body.nip):
            raise ConflictError("User already exists")
        user = await crud_user.update(db, db_obj=user, obj_in=body)
    return user

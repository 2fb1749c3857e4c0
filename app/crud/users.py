from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.user import User
from app.schemas.user import RegisterRequest, UserUpdate


class CRUDUser(CRUDBase[User, RegisterRequest, UserUpdate]):
    async def create_with_password(
        self, db: AsyncSession, *, nip: str, name: str, password_hash: str
    ) -> User:
        # username mirrors nip for the login form
        user = User(nip=nip, name=name, password=password_hash, username=nip)
        db.add(user)
        await db.flush()
        return user

    async def set_school(self, db: AsyncSession, nip: str, npsn: Optional[str]) -> Optional[User]:
        user = await self.get(db, nip)
        if user is None:
            return None
        return await self.update(db, db_obj=user, obj_in={"npsn": npsn})


crud_user = CRUDUser(User)

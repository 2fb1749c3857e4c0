from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.school import School
from app.schemas.school import SchoolCreate, SchoolUpdate


class CRUDSchool(CRUDBase[School, SchoolCreate, SchoolUpdate]):
    async def get_all_by_name(self, db: AsyncSession) -> Sequence[School]:
        result = await db.execute(select(School).order_by(School.satuan_pendidikan))
        return result.scalars().all()


crud_school = CRUDSchool(School)

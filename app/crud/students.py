from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.student import Student
from app.schemas.student import StudentIn


class CRUDStudent(CRUDBase[Student, StudentIn, StudentIn]):
    async def get_by_report(self, db: AsyncSession, report_id: str) -> Sequence[Student]:
        result = await db.execute(
            select(Student).where(Student.report_id == report_id).order_by(Student.name)
        )
        return result.scalars().all()


crud_student = CRUDStudent(Student)

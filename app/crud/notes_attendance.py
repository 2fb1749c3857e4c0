from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.notes_attendance import NotesAttendance
from app.schemas.notes_attendance import NotesAttendanceIn


class CRUDNotesAttendance(CRUDBase[NotesAttendance, NotesAttendanceIn, NotesAttendanceIn]):
    async def get_by_report(self, db: AsyncSession, report_id: str) -> Sequence[NotesAttendance]:
        result = await db.execute(
            select(NotesAttendance).where(NotesAttendance.report_id == report_id)
        )
        return result.scalars().all()


crud_notes_attendance = CRUDNotesAttendance(NotesAttendance)

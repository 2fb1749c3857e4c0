from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.subject import CompetencyDescriptor, Subject
from app.schemas.subject import CPIn, SubjectIn


class CRUDSubject(CRUDBase[Subject, SubjectIn, SubjectIn]):
    async def get_by_report(self, db: AsyncSession, report_id: str) -> Sequence[Subject]:
        result = await db.execute(
            select(Subject).where(Subject.report_id == report_id).order_by(Subject.subject_name)
        )
        return result.scalars().all()

    async def delete_with_cps(self, db: AsyncSession, subject_id: str) -> bool:
        """Delete a subject and its descriptors. Returns False if it did not exist."""
        await db.execute(
            delete(CompetencyDescriptor).where(CompetencyDescriptor.subject_id == subject_id)
        )
        result = await db.execute(delete(Subject).where(Subject.subject_id == subject_id))
        return result.rowcount > 0


class CRUDCompetencyDescriptor(CRUDBase[CompetencyDescriptor, CPIn, CPIn]):
    async def get_by_subject(
        self, db: AsyncSession, subject_id: str
    ) -> Sequence[CompetencyDescriptor]:
        result = await db.execute(
            select(CompetencyDescriptor)
            .where(CompetencyDescriptor.subject_id == subject_id)
            .order_by(CompetencyDescriptor.cp_num)
        )
        return result.scalars().all()

    async def get_by_subjects(
        self, db: AsyncSession, subject_ids: Sequence[str]
    ) -> Sequence[CompetencyDescriptor]:
        if not subject_ids:
            return []
        result = await db.execute(
            select(CompetencyDescriptor)
            .where(CompetencyDescriptor.subject_id.in_(subject_ids))
            .order_by(CompetencyDescriptor.subject_id, CompetencyDescriptor.cp_num)
        )
        return result.scalars().all()


crud_subject = CRUDSubject(Subject)
crud_cp = CRUDCompetencyDescriptor(CompetencyDescriptor)

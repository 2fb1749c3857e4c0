from typing import Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.report import Report
from app.schemas.report import ReportData


class CRUDReport(CRUDBase[Report, ReportData, ReportData]):
    async def get_by_user(self, db: AsyncSession, nip: str) -> Sequence[Report]:
        result = await db.execute(
            select(Report).where(Report.nip == nip).order_by(Report.updated_at.desc())
        )
        return result.scalars().all()

    async def create_for_user(self, db: AsyncSession, nip: str, data: ReportData) -> Report:
        report = Report(nip=nip, **data.model_dump(exclude={"report_id"}))
        db.add(report)
        await db.flush()
        return report

    async def update_fields(
        self, db: AsyncSession, report_id: str, data: ReportData
    ) -> Optional[Report]:
        report = await self.get(db, report_id)
        if report is None:
            return None
        return await self.update(db, db_obj=report, obj_in=data.model_dump(exclude={"report_id"}))


crud_report = CRUDReport(Report)

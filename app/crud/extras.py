from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.base import CRUDBase
from app.models.extra import Extra, ExtraMark
from app.schemas.extra import ExtraIn, ExtraMarkIn


class CRUDExtra(CRUDBase[Extra, ExtraIn, ExtraIn]):
    async def get_by_report(self, db: AsyncSession, report_id: str) -> Sequence[Extra]:
        result = await db.execute(
            select(Extra).where(Extra.report_id == report_id).order_by(Extra.name)
        )
        return result.scalars().all()


class CRUDExtraMark(CRUDBase[ExtraMark, ExtraMarkIn, ExtraMarkIn]):
    async def get_by_extra(self, db: AsyncSession, extra_id: str) -> Sequence[ExtraMark]:
        result = await db.execute(select(ExtraMark).where(ExtraMark.extra_id == extra_id))
        return result.scalars().all()

    async def get_by_extras(
        self, db: AsyncSession, extra_ids: Sequence[str]
    ) -> Sequence[ExtraMark]:
        if not extra_ids:
            return []
        result = await db.execute(select(ExtraMark).where(ExtraMark.extra_id.in_(extra_ids)))
        return result.scalars().all()


crud_extra = CRUDExtra(Extra)
crud_extra_mark = CRUDExtraMark(ExtraMark)

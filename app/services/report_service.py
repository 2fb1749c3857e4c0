"""Point upserts and deletes for reports, schools and subjects."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud import crud_report, crud_school, crud_subject, crud_user
from app.database import transaction
from app.exceptions import ConflictError, NotFoundError
from app.models.report import Report
from app.models.school import School
from app.models.subject import Subject
from app.schemas.report import ReportData
from app.schemas.school import SchoolCreate, SchoolUpdate
from app.schemas.subject import SubjectIn

logger = logging.getLogger(__name__)


async def save_report(db: AsyncSession, nip: str, data: ReportData) -> Report:
    """Create a report for ``nip`` when ``data`` has no report_id, else update it in place."""
    async with transaction(db):
        if not data.report_id:
            if await crud_user.get(db, nip) is None:
                raise NotFoundError("User not found")
            report = await crud_report.create_for_user(db, nip, data)
            logger.info("Created report %s for user %s", report.report_id, nip)
        else:
            report = await crud_report.update_fields(db, data.report_id, data)
            if report is None:
                raise NotFoundError("Report not found")
    return report


async def add_school(db: AsyncSession, body: SchoolCreate) -> School:
    async with transaction(db):
        if await crud_school.get(db, body.npsn):
            raise ConflictError("School already exists")
        school = await crud_school.create(db, obj_in=body)
    return school


async def update_school(db: AsyncSession, npsn: str, body: SchoolUpdate) -> School:
    async with transaction(db):
        school = await crud_school.get(db, npsn)
        if school is None:
            raise NotFoundError("School not found")
        # Full replacement: fields left out of the body are cleared
        school = await crud_school.update(db, db_obj=school, obj_in=body.model_dump())
    return school


async def save_subject(db: AsyncSession, report_id: str, body: SubjectIn) -> Subject:
    """Upsert one subject of a report; a supplied but unknown subject_id is kept as the new id."""
    async with transaction(db):
        if await crud_report.get(db, report_id) is None:
            raise NotFoundError("Report not found")
        subject = await crud_subject.get(db, body.subject_id) if body.subject_id else None
        if subject is not None:
            if subject.report_id != report_id:
                raise ConflictError("Subject belongs to another report")
            subject = await crud_subject.update(
                db, db_obj=subject, obj_in=body.model_dump(exclude={"subject_id"})
            )
        else:
            subject = Subject(report_id=report_id, **body.model_dump(exclude_none=True))
            db.add(subject)
            await db.flush()
    return subject


async def delete_subject(db: AsyncSession, subject_id: str) -> None:
    async with transaction(db):
        if not await crud_subject.delete_with_cps(db, subject_id):
            raise NotFoundError("Subject not found")
    logger.info("Deleted subject %s and its descriptors", subject_id)

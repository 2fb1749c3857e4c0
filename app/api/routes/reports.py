"""Report endpoints plus the report-scoped student and notes/attendance collections."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.crud import crud_notes_attendance, crud_report, crud_student
from app.exceptions import NotFoundError
from app.schemas.common import StatusResponse
from app.schemas.notes_attendance import NotesAttendanceIn, NotesAttendanceResponse
from app.schemas.report import ReportResponse, ReportSaved, ReportUpsertRequest
from app.schemas.student import StudentResponse, StudentsRequest
from app.services import report_service, sync_service

router = APIRouter(tags=["reports"])


@router.get("/users/{nip}/reports", response_model=list[ReportResponse])
async def list_user_reports(nip: str, db: DbSession):
    return await crud_report.get_by_user(db, nip)


@router.post("/users/{nip}/reports", response_model=ReportSaved)
async def save_report(nip: str, body: ReportUpsertRequest, db: DbSession):
    report = await report_service.save_report(db, nip, body.report_data)
    return ReportSaved(report_id=report.report_id)


@router.get("/reports/{report_id}", response_model=ReportResponse)
async def get_report(report_id: str, db: DbSession):
    report = await crud_report.get(db, report_id)
    if not report:
        raise NotFoundError("Report not found")
    return report


@router.get("/reports/{report_id}/students", response_model=list[StudentResponse])
async def list_students(report_id: str, db: DbSession):
    return await crud_student.get_by_report(db, report_id)


@router.post("/reports/{report_id}/students", response_model=StatusResponse)
async def save_students(report_id: str, body: StudentsRequest, db: DbSession):
    await sync_service.sync_students(db, report_id, body.students_data)
    return StatusResponse()


@router.get(
    "/reports/{report_id}/notes-attendance", response_model=list[NotesAttendanceResponse]
)
async def list_notes_attendance(report_id: str, db: DbSession):
    return await crud_notes_attendance.get_by_report(db, report_id)


@router.post("/reports/{report_id}/notes-attendance", response_model=StatusResponse)
async def save_notes_attendance(report_id: str, body: list[NotesAttendanceIn], db: DbSession):
    await sync_service.sync_notes_attendance(db, report_id, body)
    return StatusResponse()

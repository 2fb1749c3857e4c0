"""Subject, competency descriptor (CP) and subject mark endpoints."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.crud import crud_cp, crud_subject, get_subject_marks
from app.schemas.common import StatusResponse
from app.schemas.mark import SubjectMarksIn, SubjectMarksListResponse
from app.schemas.subject import (
    CPListResponse,
    CPRequest,
    CPResponse,
    SubjectIdsRequest,
    SubjectResponse,
    SubjectUpsertRequest,
)
from app.services import report_service, sync_service

router = APIRouter(tags=["subjects"])


@router.get("/reports/{report_id}/subjects", response_model=list[SubjectResponse])
async def list_subjects(report_id: str, db: DbSession):
    return await crud_subject.get_by_report(db, report_id)


@router.post("/reports/{report_id}/subjects", response_model=StatusResponse)
async def save_subject(report_id: str, body: SubjectUpsertRequest, db: DbSession):
    await report_service.save_subject(db, report_id, body.subject)
    return StatusResponse()


@router.delete("/subjects/{subject_id}", response_model=StatusResponse)
async def delete_subject(subject_id: str, db: DbSession):
    await report_service.delete_subject(db, subject_id)
    return StatusResponse()


@router.post("/subjects/cps", response_model=CPListResponse)
async def list_cps_for_subjects(body: SubjectIdsRequest, db: DbSession):
    cps = await crud_cp.get_by_subjects(db, body.subject_ids)
    return CPListResponse(cp=[CPResponse.model_validate(cp) for cp in cps])


@router.post("/subjects/get-marks", response_model=SubjectMarksListResponse)
async def get_marks(body: SubjectIdsRequest, db: DbSession):
    return SubjectMarksListResponse(subject_marks=await get_subject_marks(db, body.subject_ids))


@router.post("/subjects/set-marks", response_model=StatusResponse)
async def set_marks(body: list[SubjectMarksIn], db: DbSession):
    await sync_service.set_subject_marks(db, body)
    return StatusResponse()


@router.get("/subjects/{subject_id}/cp", response_model=list[CPResponse])
async def list_cps(subject_id: str, db: DbSession):
    return await crud_cp.get_by_subject(db, subject_id)


@router.post("/subjects/{subject_id}/cp", response_model=StatusResponse)
async def save_cps(subject_id: str, body: CPRequest, db: DbSession):
    await sync_service.sync_cps(db, subject_id, body.cp_data)
    return StatusResponse()

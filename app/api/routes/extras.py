"""Extracurricular activities and their marks."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.crud import crud_extra, crud_extra_mark
from app.schemas.common import StatusResponse
from app.schemas.extra import (
    ExtraIdsRequest,
    ExtraMarkListResponse,
    ExtraMarkResponse,
    ExtraMarksRequest,
    ExtraResponse,
    ExtrasRequest,
)
from app.services import sync_service

router = APIRouter(tags=["extras"])


@router.get("/reports/{report_id}/extras", response_model=list[ExtraResponse])
async def list_extras(report_id: str, db: DbSession):
    return await crud_extra.get_by_report(db, report_id)


@router.post("/reports/{report_id}/extras", response_model=StatusResponse)
async def save_report_extras(report_id: str, body: ExtrasRequest, db: DbSession):
    await sync_service.sync_extras(db, body.extras_data, report_id=report_id)
    return StatusResponse()


@router.post("/extras", response_model=StatusResponse)
async def save_extras(body: ExtrasRequest, db: DbSession):
    await sync_service.sync_extras(db, body.extras_data)
    return StatusResponse()


@router.post("/extras/extra-marks", response_model=ExtraMarkListResponse)
async def list_extra_marks_for_extras(body: ExtraIdsRequest, db: DbSession):
    marks = await crud_extra_mark.get_by_extras(db, body.extra_ids)
    return ExtraMarkListResponse(
        extra_marks=[ExtraMarkResponse.model_validate(m) for m in marks]
    )


@router.get("/extras/{extra_id}/extra-marks", response_model=list[ExtraMarkResponse])
async def list_extra_marks(extra_id: str, db: DbSession):
    return await crud_extra_mark.get_by_extra(db, extra_id)


@router.post("/extras/{extra_id}/extra-marks", response_model=StatusResponse)
async def save_extra_marks_for_extra(extra_id: str, body: ExtraMarksRequest, db: DbSession):
    await sync_service.sync_extra_marks(db, body.extra_marks_data, extra_id=extra_id)
    return StatusResponse()


@router.post("/extra-marks", response_model=StatusResponse)
async def save_extra_marks(body: ExtraMarksRequest, db: DbSession):
    await sync_service.sync_extra_marks(db, body.extra_marks_data)
    return StatusResponse()

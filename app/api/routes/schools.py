"""School endpoints."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.crud import crud_school
from app.schemas.common import StatusResponse
from app.schemas.school import SchoolCreate, SchoolResponse, SchoolUpdate
from app.services import report_service

router = APIRouter(tags=["schools"])


@router.get("/school-list", response_model=list[SchoolResponse])
async def list_schools(db: DbSession):
    return await crud_school.get_all_by_name(db)


@router.post("/schools/add-school", response_model=StatusResponse)
async def add_school(body: SchoolCreate, db: DbSession):
    await report_service.add_school(db, body)
    return StatusResponse()


@router.post("/schools/{npsn}/update-school", response_model=StatusResponse)
async def update_school(npsn: str, body: SchoolUpdate, db: DbSession):
    await report_service.update_school(db, npsn, body)
    return StatusResponse()

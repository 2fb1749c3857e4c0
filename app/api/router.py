"""Aggregates all API routers."""
from fastapi import APIRouter
from app.api.routes.users import router as users_router
from app.api.routes.schools import router as schools_router
from app.api.routes.reports import router as reports_router
from app.api.routes.subjects import router as subjects_router
from app.api.routes.extras import router as extras_router
from app.schemas.common import ErrorResponse

# Documents the {"error": ...} body the exception handlers in app.main return
router = APIRouter(
    responses={code: {"model": ErrorResponse} for code in (400, 401, 404, 500)}
)
router.include_router(users_router)
router.include_router(schools_router)
router.include_router(reports_router)
router.include_router(subjects_router)
router.include_router(extras_router)

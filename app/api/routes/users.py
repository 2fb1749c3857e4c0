"""User endpoints: profile, school assignment, login and registration."""

from fastapi import APIRouter

from app.api.deps import DbSession
from app.crud import crud_school, crud_user
from app.exceptions import NotFoundError
from app.schemas.common import StatusResponse
from app.schemas.school import SchoolResponse
from app.schemas.user import (
    ChangeSchoolRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
    UserUpdate,
)
from app.services import account_service

router = APIRouter(tags=["users"])


@router.post("/users/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: DbSession):
    user = await account_service.login(db, body)
    return LoginResponse(user=UserResponse.model_validate(user))


@router.post("/users/register", response_model=StatusResponse)
async def register(body: RegisterRequest, db: DbSession):
    await account_service.register(db, body)
    return StatusResponse()


@router.get("/users/{nip}", response_model=UserResponse)
async def get_user(nip: str, db: DbSession):
    user = await crud_user.get(db, nip)
    if not user:
        raise NotFoundError("User not found")
    return user


@router.get("/user/{nip}/school-data", response_model=SchoolResponse)
async def get_user_school(nip: str, db: DbSession):
    user = await crud_user.get(db, nip)
    if not user:
        raise NotFoundError("User not found")
    school = await crud_school.get(db, user.npsn) if user.npsn else None
    if not school:
        raise NotFoundError("School not found")
    return school


@router.post("/users/{nip}/change-school", response_model=UserResponse)
async def change_school(nip: str, body: ChangeSchoolRequest, db: DbSession):
    return await account_service.change_school(db, nip, body.npsn)


@router.post("/users/{nip}/update-user", response_model=StatusResponse)
async def update_user(nip: str, body: UserUpdate, db: DbSession):
    await account_service.update_profile(db, nip, body)
    return StatusResponse()

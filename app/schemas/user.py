from typing import Optional
from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    model_config = {"from_attributes": True}

    nip: str
    name: str
    npsn: Optional[str]


class ChangeSchoolRequest(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    npsn: Optional[str] = Field(None, max_length=20)


class UserUpdate(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    nip: str = Field(..., min_length=1, max_length=30)
    name: str = Field(..., min_length=1, max_length=100)


class LoginRequest(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    nip: str
    password: str


class RegisterRequest(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    nip: str = Field(..., min_length=1, max_length=30)
    name: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    user: UserResponse

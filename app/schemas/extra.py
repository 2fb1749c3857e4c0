from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ExtraIn(BaseModel):
    extra_id: Optional[str] = None
    report_id: Optional[str] = None
    name: Optional[str] = Field(None, max_length=100)


class ExtrasRequest(BaseModel):
    extras_data: list[ExtraIn]


class ExtraResponse(BaseModel):
    model_config = {"from_attributes": True}

    extra_id: str
    report_id: str
    name: Optional[str]
    updated_at: Optional[datetime] = None


class ExtraMarkBase(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    value: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    recommendation: Optional[str] = None


class ExtraMarkIn(ExtraMarkBase):
    extra_mark_id: Optional[str] = None
    extra_id: Optional[str] = None
    student_id: str


class ExtraMarksRequest(BaseModel):
    extra_marks_data: list[ExtraMarkIn]


class ExtraMarkResponse(ExtraMarkBase):
    model_config = {"from_attributes": True}

    extra_mark_id: str
    extra_id: str
    student_id: str
    updated_at: Optional[datetime] = None


class ExtraIdsRequest(BaseModel):
    extra_ids: list[str]


class ExtraMarkListResponse(BaseModel):
    extra_marks: list[ExtraMarkResponse]

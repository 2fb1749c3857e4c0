from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class SubjectBase(BaseModel):
    subject_name: Optional[str] = Field(None, max_length=100)
    subject_category: Optional[str] = Field(None, max_length=50)
    min_mark: Optional[int] = Field(None, ge=0)


class SubjectIn(SubjectBase):
    subject_id: Optional[str] = None


class SubjectUpsertRequest(BaseModel):
    subject: SubjectIn


class SubjectResponse(SubjectBase):
    model_config = {"from_attributes": True}

    subject_id: str
    report_id: str
    updated_at: Optional[datetime] = None


class CPBase(BaseModel):
    cp_num: Optional[int] = None
    cp_desc: Optional[str] = None


class CPIn(CPBase):
    cp_id: Optional[str] = None


class CPRequest(BaseModel):
    cp_data: list[CPIn]


class CPResponse(CPBase):
    model_config = {"from_attributes": True}

    cp_id: str
    subject_id: str
    updated_at: Optional[datetime] = None


class SubjectIdsRequest(BaseModel):
    subject_ids: list[str]


class CPListResponse(BaseModel):
    cp: list[CPResponse]

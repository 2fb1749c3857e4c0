from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

# Columns copied onto an existing student when a roster is resubmitted
STUDENT_PROFILE_FIELDS = (
    "name",
    "nis",
    "birthday",
    "gender",
    "religion",
    "prev_edu",
    "address",
    "father_name",
    "father_job",
    "mother_name",
    "mother_job",
    "parent_address",
    "village",
    "sub_dis",
    "regen",
    "prov",
    "guardian_name",
    "guardian_job",
    "guardian_address",
    "phone_num",
)


class StudentBase(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    nisn: str = Field(..., min_length=1, max_length=20)
    nis: Optional[str] = Field(None, max_length=20)
    name: Optional[str] = Field(None, max_length=100)
    birthday: Optional[str] = Field(None, max_length=100)
    gender: Optional[str] = Field(None, max_length=20)
    religion: Optional[str] = Field(None, max_length=30)
    prev_edu: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = Field(None, max_length=300)
    father_name: Optional[str] = Field(None, max_length=100)
    father_job: Optional[str] = Field(None, max_length=100)
    mother_name: Optional[str] = Field(None, max_length=100)
    mother_job: Optional[str] = Field(None, max_length=100)
    parent_address: Optional[str] = Field(None, max_length=300)
    village: Optional[str] = Field(None, max_length=100)
    sub_dis: Optional[str] = Field(None, max_length=100)
    regen: Optional[str] = Field(None, max_length=100)
    prov: Optional[str] = Field(None, max_length=100)
    guardian_name: Optional[str] = Field(None, max_length=100)
    guardian_job: Optional[str] = Field(None, max_length=100)
    guardian_address: Optional[str] = Field(None, max_length=300)
    phone_num: Optional[str] = Field(None, max_length=30)


class StudentIn(StudentBase):
    student_id: Optional[str] = None


class StudentsRequest(BaseModel):
    students_data: list[StudentIn]


class StudentResponse(StudentBase):
    model_config = {"from_attributes": True}

    student_id: str
    report_id: str
    updated_at: Optional[datetime] = None

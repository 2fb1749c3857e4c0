from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class NotesAttendanceBase(BaseModel):
    student_id: str
    notes: Optional[str] = None
    sick: int = Field(0, ge=0)
    leave: int = Field(0, ge=0)
    alpha: int = Field(0, ge=0)


class NotesAttendanceIn(NotesAttendanceBase):
    id: Optional[str] = None


class NotesAttendanceResponse(NotesAttendanceBase):
    model_config = {"from_attributes": True}

    id: str
    report_id: str
    updated_at: Optional[datetime] = None

from typing import Optional
from pydantic import BaseModel, Field, model_validator


class CPMarkIn(BaseModel):
    mark_id: Optional[str] = None
    subject_id: Optional[str] = None
    student_id: Optional[str] = None
    cp_id: str
    value: Optional[float] = None


class OtherMarkIn(BaseModel):
    mark_id: Optional[str] = None
    subject_id: Optional[str] = None
    student_id: Optional[str] = None
    type: Optional[str] = Field(None, max_length=50)
    value: Optional[float] = None


class SubjectMarksIn(BaseModel):
    """All marks of one student in one subject.

    Individual marks may omit ``subject_id``/``student_id``; they inherit the
    group's values.
    """

    subject_id: Optional[str] = None
    student_id: Optional[str] = None
    cp_marks: list[CPMarkIn] = []
    other_marks: list[OtherMarkIn] = []

    @model_validator(mode="after")
    def fill_owner_ids(self) -> "SubjectMarksIn":
        for mark in [*self.cp_marks, *self.other_marks]:
            mark.subject_id = mark.subject_id or self.subject_id
            mark.student_id = mark.student_id or self.student_id
            if not mark.subject_id or not mark.student_id:
                raise ValueError("every mark needs a subject_id and a student_id")
        return self


class CPMarkOut(BaseModel):
    mark_id: str
    value: Optional[float]
    cp_id: str
    cp_num: Optional[int]
    student_id: str
    subject_id: str


class OtherMarkOut(BaseModel):
    mark_id: str
    type: Optional[str]
    value: Optional[float]
    student_id: str
    subject_id: str


class SubjectMarksOut(BaseModel):
    subject_id: str
    student_id: str
    cp_marks: list[CPMarkOut] = []
    other_marks: list[OtherMarkOut] = []


class SubjectMarksListResponse(BaseModel):
    subject_marks: list[SubjectMarksOut]

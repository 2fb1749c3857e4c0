from datetime import date, datetime
from typing import Optional
from pydantic import AliasChoices, BaseModel, Field


class ReportBase(BaseModel):
    model_config = {"coerce_numbers_to_str": True, "populate_by_name": True}

    school_year: Optional[str] = Field(None, max_length=20)
    semester: Optional[str] = Field(None, max_length=20)
    class_: Optional[str] = Field(
        None,
        max_length=20,
        validation_alias=AliasChoices("class", "class_"),
        serialization_alias="class",
    )
    phase: Optional[str] = Field(None, max_length=10)
    deadline: Optional[date] = None


class ReportData(ReportBase):
    """Body of a report save: no ``report_id`` means create."""

    report_id: Optional[str] = None


class ReportUpsertRequest(BaseModel):
    report_data: ReportData


class ReportSaved(BaseModel):
    status: int = 200
    report_id: str


class ReportResponse(ReportBase):
    model_config = {"from_attributes": True, "populate_by_name": True}

    report_id: str
    nip: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

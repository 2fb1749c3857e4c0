from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from app.models.extra import Extra
    from app.models.notes_attendance import NotesAttendance
    from app.models.student import Student
    from app.models.subject import Subject
    from app.models.user import User


class Report(Base, TimestampMixin):
    __tablename__ = "reports"

    report_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    nip: Mapped[str] = mapped_column(
        String(30),
        ForeignKey("users.nip", onupdate="CASCADE", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    school_year: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    semester: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    # "class" is reserved in Python, the column keeps its name
    class_: Mapped[Optional[str]] = mapped_column("class", String(20), nullable=True)
    phase: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    deadline: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="reports")
    students: Mapped[list["Student"]] = relationship(
        "Student", back_populates="report", passive_deletes=True
    )
    subjects: Mapped[list["Subject"]] = relationship(
        "Subject", back_populates="report", passive_deletes=True
    )
    extras: Mapped[list["Extra"]] = relationship(
        "Extra", back_populates="report", passive_deletes=True
    )
    notes_attendances: Mapped[list["NotesAttendance"]] = relationship(
        "NotesAttendance", back_populates="report", passive_deletes=True
    )

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from app.models.report import Report


class NotesAttendance(Base, TimestampMixin):
    """Homeroom notes plus absence counts for one student in one report."""

    __tablename__ = "notes_attendances"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    report_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Days absent: sick, excused leave, unexcused ("alpha")
    sick: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    leave: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    alpha: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    report: Mapped["Report"] = relationship("Report", back_populates="notes_attendances")

from typing import Optional

from sqlalchemy import Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, TimestampMixin, new_id


class SubjectMark(Base, TimestampMixin):
    """One mark of a student in a subject.

    A "CP mark" carries ``cp_id``; an "other mark" carries a free-form ``type``
    (e.g. mid-term, final exam) and no ``cp_id``.
    """

    __tablename__ = "subject_marks"

    mark_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    subject_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("subjects.subject_id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    cp_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("cps.cp_id", ondelete="CASCADE"), nullable=True
    )
    type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    value: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

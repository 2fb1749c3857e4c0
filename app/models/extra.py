from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from app.models.report import Report


class Extra(Base, TimestampMixin):
    """An extracurricular activity offered in a report."""

    __tablename__ = "extras"

    extra_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    report_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Relationships
    report: Mapped["Report"] = relationship("Report", back_populates="extras")
    marks: Mapped[list["ExtraMark"]] = relationship(
        "ExtraMark", back_populates="extra", passive_deletes=True
    )


class ExtraMark(Base, TimestampMixin):
    __tablename__ = "extra_marks"

    extra_mark_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    extra_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("extras.extra_id", ondelete="CASCADE"), nullable=False, index=True
    )
    student_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("students.student_id", ondelete="CASCADE"), nullable=False, index=True
    )
    value: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    recommendation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    extra: Mapped["Extra"] = relationship("Extra", back_populates="marks")

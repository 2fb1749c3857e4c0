from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from app.models.report import Report


class Subject(Base, TimestampMixin):
    __tablename__ = "subjects"

    subject_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    report_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    subject_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    subject_category: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    min_mark: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # Relationships
    report: Mapped["Report"] = relationship("Report", back_populates="subjects")
    cps: Mapped[list["CompetencyDescriptor"]] = relationship(
        "CompetencyDescriptor",
        back_populates="subject",
        order_by="CompetencyDescriptor.cp_num",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class CompetencyDescriptor(Base, TimestampMixin):
    """A learning-outcome descriptor ("CP") of a subject, ordered by ``cp_num``."""

    __tablename__ = "cps"

    cp_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    subject_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("subjects.subject_id", ondelete="CASCADE"), nullable=False, index=True
    )
    cp_num: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    cp_desc: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    subject: Mapped["Subject"] = relationship("Subject", back_populates="cps")

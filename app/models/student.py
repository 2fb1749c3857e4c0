from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin, new_id

if TYPE_CHECKING:
    from app.models.report import Report


class Student(Base, TimestampMixin):
    __tablename__ = "students"
    __table_args__ = (UniqueConstraint("report_id", "nisn", name="uq_student_report_nisn"),)

    student_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    report_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("reports.report_id", ondelete="CASCADE"), nullable=False, index=True
    )
    # NISN: national student number, the natural key within a report
    nisn: Mapped[str] = mapped_column(String(20), nullable=False)
    nis: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    birthday: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    religion: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    prev_edu: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    father_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    father_job: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    mother_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    mother_job: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    parent_address: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    village: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    sub_dis: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    regen: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    prov: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    guardian_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    guardian_job: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    guardian_address: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    phone_num: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    # Relationships
    report: Mapped["Report"] = relationship("Report", back_populates="students")

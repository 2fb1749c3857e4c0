from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.report import Report
    from app.models.school import School


class User(Base, TimestampMixin):
    __tablename__ = "users"

    # NIP: personnel number, doubles as the login name
    nip: Mapped[str] = mapped_column(String(30), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    username: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    npsn: Mapped[Optional[str]] = mapped_column(
        String(20), ForeignKey("schools.npsn", onupdate="CASCADE"), nullable=True, index=True
    )

    # Relationships
    school: Mapped[Optional["School"]] = relationship("School", back_populates="users")
    reports: Mapped[list["Report"]] = relationship(
        "Report", back_populates="user", passive_deletes=True
    )

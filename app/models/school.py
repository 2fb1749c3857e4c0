from typing import TYPE_CHECKING, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from app.models.user import User


class School(Base, TimestampMixin):
    __tablename__ = "schools"

    # NPSN: national school registration number
    npsn: Mapped[str] = mapped_column(String(20), primary_key=True)
    dinas_pendidikan: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    satuan_pendidikan: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    alamat: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)
    desa: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    kecamatan: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    kabupaten: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    provinsi: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    kode_pos: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    telp: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    kepala_sekolah: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    nip_kepala_sekolah: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)

    # Relationships
    users: Mapped[list["User"]] = relationship("User", back_populates="school")

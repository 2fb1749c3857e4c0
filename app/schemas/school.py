from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class SchoolBase(BaseModel):
    model_config = {"coerce_numbers_to_str": True}

    dinas_pendidikan: Optional[str] = Field(None, max_length=200)
    satuan_pendidikan: Optional[str] = Field(None, max_length=200)
    alamat: Optional[str] = Field(None, max_length=300)
    desa: Optional[str] = Field(None, max_length=100)
    kecamatan: Optional[str] = Field(None, max_length=100)
    kabupaten: Optional[str] = Field(None, max_length=100)
    provinsi: Optional[str] = Field(None, max_length=100)
    kode_pos: Optional[str] = Field(None, max_length=10)
    website: Optional[str] = Field(None, max_length=200)
    email: Optional[str] = Field(None, max_length=200)
    telp: Optional[str] = Field(None, max_length=30)
    kepala_sekolah: Optional[str] = Field(None, max_length=100)
    nip_kepala_sekolah: Optional[str] = Field(None, max_length=30)


class SchoolCreate(SchoolBase):
    npsn: str = Field(..., min_length=1, max_length=20)


class SchoolUpdate(SchoolBase):
    pass


class SchoolResponse(SchoolBase):
    model_config = {"from_attributes": True}

    npsn: str
    updated_at: Optional[datetime] = None

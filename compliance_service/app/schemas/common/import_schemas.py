from pydantic import BaseModel, EmailStr
from typing import Optional

from shared.core.schemas import RequiredStr
from ...enum.status_enum import RecordStatus


class SupplierImportRow(BaseModel):
    supplier_name: RequiredStr
    contact_person: RequiredStr
    email: EmailStr
    phone_number: Optional[str] = None
    address: RequiredStr
    status: RecordStatus = RecordStatus.ACTIVE


class MasterDataImportRow(BaseModel):
    category: RequiredStr
    label: RequiredStr
    value: Optional[str] = None
    status: RecordStatus = RecordStatus.ACTIVE
    sort_order: int = 0


class LocationImportRow(BaseModel):
    """Location row keyed by its full path; type and storage type are master data labels."""
    name: RequiredStr
    location_type: RequiredStr
    parent_path: Optional[str] = None
    is_storage_location: bool = False
    storage_type: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    status: RecordStatus = RecordStatus.ACTIVE

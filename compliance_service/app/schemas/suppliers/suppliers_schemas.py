from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.status_enum import RecordStatus

# ---------------- Base Supplier ----------------


class SupplierBase(BaseModel):
    supplier_name: RequiredStr
    contact_person: RequiredStr
    email: EmailStr
    phone_number: Optional[str] = None
    address: RequiredStr
    status: RecordStatus = RecordStatus.ACTIVE


# ---------------- Supplier Request ----------------
class SupplierRequest(CommonQueryParams):
    status: Optional[str] = None  # comma separated ACTIVE,INACTIVE


# ---------------- Supplier Create/Update ----------------
class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(PartialUpdateModel):
    not_nullable = ("supplier_name", "contact_person", "email", "address", "status")

    supplier_name: Optional[RequiredStr] = None
    contact_person: Optional[RequiredStr] = None
    email: Optional[EmailStr] = None
    phone_number: Optional[str] = None
    address: Optional[RequiredStr] = None
    status: Optional[RecordStatus] = None


# ---------------- Supplier Output ----------------
class SupplierOut(BaseModel):
    id: UUID
    supplier_name: str
    contact_person: str
    email: str
    phone_number: Optional[str] = None
    address: str
    status: Optional[str] = None
    status_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SupplierListResponse(PageMeta):
    suppliers: List[SupplierOut]

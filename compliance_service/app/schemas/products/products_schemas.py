from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.status_enum import ApprovalStatus, RecordStatus


class ProductBase(BaseModel):
    product_name: RequiredStr
    product_code: RequiredStr
    brand_name: Optional[str] = None
    uom_id: UUID
    unit_size: float = Field(..., gt=0)
    description: Optional[str] = None
    product_set: bool = False
    aerosol: bool = False
    cryogenic_fluid: bool = False
    other_names: Optional[str] = None
    uses: Optional[str] = None
    sds_id: UUID
    status: RecordStatus = RecordStatus.ACTIVE
    approval_status: ApprovalStatus = ApprovalStatus.PENDING


class ProductRequest(CommonQueryParams):
    supplier_id: Optional[str] = None  # comma separated supplier ids
    status: Optional[str] = None  # comma separated ACTIVE,INACTIVE
    dg_class_id: Optional[str] = None
    is_dg: Optional[str] = None
    sds_id: Optional[UUID] = None


class ProductCreate(ProductBase):
    pass


class ProductUpdate(PartialUpdateModel):
    not_nullable = ("product_name", "product_code", "uom_id", "unit_size", "sds_id",
                    "product_set", "aerosol", "cryogenic_fluid", "status", "approval_status")

    product_name: Optional[RequiredStr] = None
    product_code: Optional[RequiredStr] = None
    brand_name: Optional[str] = None
    uom_id: Optional[UUID] = None
    unit_size: Optional[float] = Field(None, gt=0)
    description: Optional[str] = None
    product_set: Optional[bool] = None
    aerosol: Optional[bool] = None
    cryogenic_fluid: Optional[bool] = None
    other_names: Optional[str] = None
    uses: Optional[str] = None
    sds_id: Optional[UUID] = None
    status: Optional[RecordStatus] = None
    approval_status: Optional[ApprovalStatus] = None


class ProductDuplicate(BaseModel):
    """Copy of an existing product; at least one of name, code or SDS must differ."""
    product_name: Optional[RequiredStr] = None
    product_code: Optional[RequiredStr] = None
    sds_id: Optional[UUID] = None
    copy_hazards: bool = True


class ProductOut(BaseModel):
    id: UUID
    product_name: str
    product_code: str
    brand_name: Optional[str] = None
    uom_id: Optional[UUID] = None
    uom: Optional[str] = None
    unit_size: Optional[float] = None
    description: Optional[str] = None
    product_set: bool = False
    aerosol: bool = False
    cryogenic_fluid: bool = False
    other_names: Optional[str] = None
    uses: Optional[str] = None
    sds_id: Optional[UUID] = None
    sds_product_name: Optional[str] = None
    is_dg: bool = False
    dg_class: Optional[str] = None
    packing_group: Optional[str] = None
    supplier_id: Optional[UUID] = None
    supplier_name: Optional[str] = None
    status: Optional[str] = None
    product_status_id: Optional[int] = None
    approval_status: Optional[str] = None
    approval_status_id: Optional[int] = None
    created_at: Optional[datetime] = None


class ProductListResponse(PageMeta):
    products: List[ProductOut]

# ---------------- Product hazards ----------------


class ProductHazardBase(BaseModel):
    hazard_type: UUID
    hazard: RequiredStr
    control: RequiredStr
    source: Optional[str] = None


class ProductHazardCreate(ProductHazardBase):
    pass


class ProductHazardUpdate(PartialUpdateModel):
    not_nullable = ("hazard_type", "hazard", "control")

    hazard_type: Optional[UUID] = None
    hazard: Optional[RequiredStr] = None
    control: Optional[RequiredStr] = None
    source: Optional[str] = None


class ProductHazardOut(BaseModel):
    hazard_control_id: UUID
    product_id: UUID
    hazard_type: UUID
    hazard_type_name: Optional[str] = None
    hazard: str
    control: str
    source: Optional[str] = None
    created_at: Optional[datetime] = None

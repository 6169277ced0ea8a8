from pydantic import BaseModel, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel
from ...enum.site_register_enum import StockAction
from ...enum.status_enum import RecordStatus


class SiteRegisterBase(BaseModel):
    location_id: UUID
    product_id: UUID
    status: RecordStatus = RecordStatus.ACTIVE
    current_stock_level: float = Field(0, ge=0)
    max_stock_level: Optional[float] = Field(None, ge=0)
    total_qty: Optional[float] = Field(None, ge=0)
    uom_id: Optional[UUID] = None
    exact_location: Optional[str] = None
    override_product_name: Optional[str] = None
    storage_conditions: Optional[str] = None
    placarding_required: bool = False
    manifest_required: bool = False
    fire_protection_required: bool = False


class SiteRegisterRequest(CommonQueryParams):
    location_id: Optional[UUID] = None  # includes every location below it
    product_id: Optional[UUID] = None
    status: Optional[str] = None


class SiteRegisterCreate(SiteRegisterBase):
    pass


class SiteRegisterUpdate(PartialUpdateModel):
    not_nullable = ("location_id", "product_id", "status", "current_stock_level",
                    "placarding_required", "manifest_required", "fire_protection_required")

    location_id: Optional[UUID] = None
    product_id: Optional[UUID] = None
    status: Optional[RecordStatus] = None
    current_stock_level: Optional[float] = Field(None, ge=0)
    max_stock_level: Optional[float] = Field(None, ge=0)
    total_qty: Optional[float] = Field(None, ge=0)
    uom_id: Optional[UUID] = None
    exact_location: Optional[str] = None
    override_product_name: Optional[str] = None
    storage_conditions: Optional[str] = None
    placarding_required: Optional[bool] = None
    manifest_required: Optional[bool] = None
    fire_protection_required: Optional[bool] = None


class SiteRegisterOut(BaseModel):
    id: UUID
    location_id: UUID
    location_name: Optional[str] = None
    location_path: Optional[str] = None
    product_id: UUID
    product_name: Optional[str] = None
    product_code: Optional[str] = None
    is_dg: bool = False
    status: Optional[str] = None
    status_id: Optional[int] = None
    current_stock_level: Optional[float] = None
    max_stock_level: Optional[float] = None
    total_qty: Optional[float] = None
    uom_id: Optional[UUID] = None
    uom: Optional[str] = None
    exact_location: Optional[str] = None
    override_product_name: Optional[str] = None
    storage_conditions: Optional[str] = None
    placarding_required: bool = False
    manifest_required: bool = False
    fire_protection_required: bool = False
    created_at: Optional[datetime] = None


class SiteRegisterListResponse(PageMeta):
    site_registers: List[SiteRegisterOut]

# ---------------- Stock movements ----------------


class StockMovementCreate(BaseModel):
    movement_date: Optional[datetime] = None
    action: StockAction
    reason_id: UUID
    quantity: float = Field(..., ge=0)
    comments: Optional[str] = None


class StockMovementOut(BaseModel):
    id: UUID
    site_register_id: UUID
    movement_date: datetime
    action: StockAction
    reason_id: UUID
    reason: Optional[str] = None
    quantity: float
    comments: Optional[str] = None
    created_at: Optional[datetime] = None


class StockMovementResult(BaseModel):
    movement: StockMovementOut
    current_stock_level: float

from pydantic import BaseModel, EmailStr
from typing import Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import PartialUpdateModel


class SystemSettingsUpdate(PartialUpdateModel):
    not_nullable = ("customer_name", "customer_email", "auto_update_sds")

    customer_name: Optional[str] = None
    customer_email: Optional[EmailStr] = None
    logo_path: Optional[str] = None
    auto_update_sds: Optional[bool] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None


class SystemSettingsOut(BaseModel):
    id: Optional[UUID] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    logo_path: Optional[str] = None
    auto_update_sds: bool = False
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class DashboardOverview(BaseModel):
    products: int
    suppliers: int
    locations: int
    site_registers: int
    risk_assessments: int
    active_sds: int
    expired_sds: int
    expiring_sds: int
    requested_sds: int

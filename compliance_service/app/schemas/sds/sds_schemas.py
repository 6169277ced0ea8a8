from pydantic import BaseModel
from typing import List, Literal, Optional
from uuid import UUID
from datetime import date, datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.status_enum import SDSStatus


class SDSBase(BaseModel):
    product_name: RequiredStr
    product_id: RequiredStr
    supplier_id: UUID
    is_dg: bool = False
    other_names: Optional[str] = None
    emergency_phone: Optional[str] = None
    issue_date: Optional[date] = None
    revision_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: SDSStatus = SDSStatus.ACTIVE

    current_file_path: Optional[str] = None
    current_file_name: Optional[str] = None
    current_file_size: Optional[int] = None
    current_content_type: Optional[str] = None

    un_number: Optional[str] = None
    un_proper_shipping_name: Optional[str] = None
    hazchem_code: Optional[str] = None
    dg_class_id: Optional[UUID] = None
    subsidiary_dg_class_id: Optional[UUID] = None
    packing_group_id: Optional[UUID] = None
    dg_subdivision_id: Optional[UUID] = None
    source: Optional[str] = None


class SDSRequest(CommonQueryParams):
    status: Optional[str] = None  # comma separated ACTIVE,INACTIVE,REQUESTED
    dg_class_id: Optional[str] = None  # comma separated master data ids
    supplier_id: Optional[str] = None
    is_dg: Optional[str] = None
    date_field: Optional[Literal["issue_date", "expiry_date"]] = None
    date_type: Optional[Literal["on", "after", "before", "between"]] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class SDSCreate(SDSBase):
    pass


class SDSUpdate(PartialUpdateModel):
    not_nullable = ("product_name", "product_id", "supplier_id", "is_dg", "status")

    product_name: Optional[RequiredStr] = None
    product_id: Optional[RequiredStr] = None
    supplier_id: Optional[UUID] = None
    is_dg: Optional[bool] = None
    other_names: Optional[str] = None
    emergency_phone: Optional[str] = None
    issue_date: Optional[date] = None
    revision_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[SDSStatus] = None

    current_file_path: Optional[str] = None
    current_file_name: Optional[str] = None
    current_file_size: Optional[int] = None
    current_content_type: Optional[str] = None

    un_number: Optional[str] = None
    un_proper_shipping_name: Optional[str] = None
    hazchem_code: Optional[str] = None
    dg_class_id: Optional[UUID] = None
    subsidiary_dg_class_id: Optional[UUID] = None
    packing_group_id: Optional[UUID] = None
    dg_subdivision_id: Optional[UUID] = None
    source: Optional[str] = None


class SDSRequestCreate(BaseModel):
    """Ask for an SDS that is not in the library yet."""
    product_name: RequiredStr
    product_code: RequiredStr
    other_product_name: Optional[str] = None
    supplier_name: Optional[str] = None
    other_supplier_details: Optional[str] = None
    request_info: Optional[str] = None


class SDSOut(BaseModel):
    id: UUID
    product_name: str
    product_id: str
    supplier_id: UUID
    supplier_name: Optional[str] = None
    is_dg: bool = False
    other_names: Optional[str] = None
    emergency_phone: Optional[str] = None
    issue_date: Optional[date] = None
    revision_date: Optional[date] = None
    expiry_date: Optional[date] = None
    status: Optional[str] = None
    status_id: Optional[int] = None

    current_file_path: Optional[str] = None
    current_file_name: Optional[str] = None
    current_file_size: Optional[int] = None
    current_content_type: Optional[str] = None

    un_number: Optional[str] = None
    un_proper_shipping_name: Optional[str] = None
    hazchem_code: Optional[str] = None
    dg_class_id: Optional[UUID] = None
    dg_class: Optional[str] = None
    subsidiary_dg_class_id: Optional[UUID] = None
    subsidiary_dg_class: Optional[str] = None
    packing_group_id: Optional[UUID] = None
    packing_group: Optional[str] = None
    dg_subdivision_id: Optional[UUID] = None
    dg_subdivision: Optional[str] = None
    source: Optional[str] = None

    request_supplier_name: Optional[str] = None
    request_supplier_details: Optional[str] = None
    request_information: Optional[str] = None
    request_date: Optional[date] = None
    requested_by: Optional[UUID] = None
    created_at: Optional[datetime] = None


class SDSListResponse(PageMeta):
    sds: List[SDSOut]


class ExpiryDateOut(BaseModel):
    issue_date: date
    expiry_date: date


class SDSOverview(BaseModel):
    total: int
    active: int
    requested: int
    expired: int
    expiring_soon: int

# ---------------- Versions ----------------


class SDSVersionCreate(BaseModel):
    file_path: RequiredStr
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    content_type: Optional[str] = None
    notes: Optional[str] = None


class SDSVersionOut(BaseModel):
    id: UUID
    sds_id: UUID
    version_number: int
    file_path: str
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    content_type: Optional[str] = None
    notes: Optional[str] = None
    uploaded_by: Optional[UUID] = None
    uploaded_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

# ---------------- GHS / precautionary links ----------------


class SDSGHSLink(BaseModel):
    hazard_classification_id: UUID


class SDSGHSClassificationOut(BaseModel):
    sds_ghs_id: UUID
    sds_id: UUID
    hazard_classification_id: UUID
    hazard_class: Optional[str] = None
    hazard_category: Optional[str] = None
    signal_word: Optional[str] = None
    ghs_code: Optional[str] = None
    pictogram_url: Optional[str] = None
    hazard_statement_code: Optional[str] = None
    hazard_statement_text: Optional[str] = None


class SDSPrecautionaryLink(BaseModel):
    precautionary_statement_id: UUID


class SDSPrecautionaryStatementOut(BaseModel):
    sds_precautionary_statement_id: UUID
    sds_id: UUID
    precautionary_statement_id: UUID
    code: Optional[str] = None
    statement: Optional[str] = None
    type: Optional[str] = None

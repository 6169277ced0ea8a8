from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.status_enum import RecordStatus


class MasterDataRequest(CommonQueryParams):
    category: Optional[str] = None   # comma separated
    status: Optional[str] = None     # comma separated


class MasterDataBase(BaseModel):
    category: RequiredStr
    label: RequiredStr
    value: Optional[str] = None
    status: RecordStatus = RecordStatus.ACTIVE
    sort_order: int = 0


class MasterDataCreate(MasterDataBase):
    pass


class MasterDataUpdate(PartialUpdateModel):
    not_nullable = ("category", "label", "status", "sort_order")

    category: Optional[RequiredStr] = None
    label: Optional[RequiredStr] = None
    value: Optional[str] = None
    status: Optional[RecordStatus] = None
    sort_order: Optional[int] = None


class MasterDataOut(MasterDataBase):
    id: UUID
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class MasterDataListResponse(PageMeta):
    master_data: List[MasterDataOut]


class StatusLookupOut(BaseModel):
    id: int
    category: str
    status_name: str

    model_config = {"from_attributes": True}

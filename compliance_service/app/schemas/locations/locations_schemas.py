from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.status_enum import RecordStatus


class Coordinates(BaseModel):
    lat: float
    lng: float


class LocationBase(BaseModel):
    name: RequiredStr
    type_id: UUID
    parent_location_id: Optional[UUID] = None
    coordinates: Optional[Coordinates] = None
    is_storage_location: bool = False
    storage_type_id: Optional[UUID] = None
    status: RecordStatus = RecordStatus.ACTIVE


class LocationRequest(CommonQueryParams):
    status: Optional[str] = None
    type_id: Optional[str] = None  # comma separated master data ids
    parent_location_id: Optional[UUID] = None
    is_storage_location: Optional[str] = None


class LocationCreate(LocationBase):
    pass


class LocationUpdate(PartialUpdateModel):
    not_nullable = ("name", "type_id", "is_storage_location", "status")

    name: Optional[RequiredStr] = None
    type_id: Optional[UUID] = None
    parent_location_id: Optional[UUID] = None
    coordinates: Optional[Coordinates] = None
    is_storage_location: Optional[bool] = None
    storage_type_id: Optional[UUID] = None
    status: Optional[RecordStatus] = None


class LocationOut(BaseModel):
    id: UUID
    name: str
    full_path: Optional[str] = None
    type_id: UUID
    type_name: Optional[str] = None
    parent_location_id: Optional[UUID] = None
    parent_name: Optional[str] = None
    coordinates: Optional[Coordinates] = None
    is_storage_location: bool = False
    storage_type_id: Optional[UUID] = None
    storage_type_name: Optional[str] = None
    status: Optional[str] = None
    status_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LocationListResponse(PageMeta):
    locations: List[LocationOut]


class LocationHierarchyOut(BaseModel):
    location_id: UUID
    location_ids: List[UUID]


class LocationTreeNode(BaseModel):
    id: UUID
    name: str
    full_path: Optional[str] = None
    is_storage_location: bool = False
    children: List["LocationTreeNode"] = []


LocationTreeNode.model_rebuild()

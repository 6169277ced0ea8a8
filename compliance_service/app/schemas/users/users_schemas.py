from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID
from datetime import datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel, RequiredStr
from ...enum.users_enum import UserStatus


class UserBase(BaseModel):
    email: EmailStr
    first_name: RequiredStr
    last_name: RequiredStr
    phone_number: Optional[str] = None
    active: UserStatus = UserStatus.active
    manager_id: Optional[UUID] = None
    location_id: Optional[UUID] = None


class UserRequest(CommonQueryParams):
    active: Optional[str] = None  # comma separated active,inactive
    role_id: Optional[UUID] = None


class UserCreate(UserBase):
    role_ids: List[UUID] = []


class UserUpdate(PartialUpdateModel):
    not_nullable = ("email", "first_name", "last_name", "active")

    email: Optional[EmailStr] = None
    first_name: Optional[RequiredStr] = None
    last_name: Optional[RequiredStr] = None
    phone_number: Optional[str] = None
    active: Optional[UserStatus] = None
    manager_id: Optional[UUID] = None
    location_id: Optional[UUID] = None


class RoleOut(BaseModel):
    id: UUID
    role_name: str

    model_config = {"from_attributes": True}


class RoleCreate(BaseModel):
    role_name: RequiredStr


class UserRolesUpdate(BaseModel):
    role_ids: List[UUID]


class UserOut(BaseModel):
    id: UUID
    email: str
    first_name: str
    last_name: str
    full_name: str
    phone_number: Optional[str] = None
    active: UserStatus
    manager_id: Optional[UUID] = None
    manager_name: Optional[str] = None
    location_id: Optional[UUID] = None
    location_name: Optional[str] = None
    last_login_date: Optional[datetime] = None
    roles: List[RoleOut] = []
    created_at: Optional[datetime] = None


class UserListResponse(PageMeta):
    users: List[UserOut]

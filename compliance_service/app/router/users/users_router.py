# app/router/users/users_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.users import users_crud as crud
from ...schemas.users.users_schemas import (
    RoleCreate, RoleOut, UserCreate, UserListResponse, UserOut, UserRequest,
    UserRolesUpdate, UserUpdate)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/all", response_model=UserListResponse)
def get_users(params: UserRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_users(db, params)


@router.get("/managers", response_model=List[Lookup])
def manager_lookup(exclude_id: Optional[UUID] = Query(None), db: Session = Depends(get_db)):
    return crud.manager_lookup(db, exclude_id)


@router.get("/roles", response_model=List[RoleOut])
def get_roles(db: Session = Depends(get_db)):
    return crud.get_roles(db)


@router.post("/roles", response_model=RoleOut)
def create_role(payload: RoleCreate, db: Session = Depends(get_db)):
    return crud.create_role(db, payload)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    return crud.get_user(db, user_id)


@router.post("/", response_model=UserOut)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    return crud.create_user(db, user)


@router.put("/{user_id}", response_model=UserOut)
def update_user(user_id: UUID, user: UserUpdate, db: Session = Depends(get_db)):
    return crud.update_user(db, user_id, user)


@router.put("/{user_id}/roles", response_model=UserOut)
def assign_roles(user_id: UUID, payload: UserRolesUpdate, db: Session = Depends(get_db)):
    return crud.assign_roles(db, user_id, payload.role_ids)


@router.delete("/{user_id}", response_model=UserOut)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_user(db, user_id)

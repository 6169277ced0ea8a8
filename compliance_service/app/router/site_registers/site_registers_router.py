# app/router/site_registers/site_registers_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.site_registers import site_registers_crud as crud
from ...crud.site_registers import stock_movements_crud
from ...schemas.site_registers.site_registers_schemas import (
    SiteRegisterCreate, SiteRegisterListResponse, SiteRegisterOut, SiteRegisterRequest,
    SiteRegisterUpdate, StockMovementCreate, StockMovementOut, StockMovementResult)

router = APIRouter(prefix="/api/site-registers", tags=["site registers"])


@router.get("/all", response_model=SiteRegisterListResponse)
def get_site_registers(params: SiteRegisterRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_site_registers(db, params)


@router.get("/lookup", response_model=List[Lookup])
def site_register_lookup(search: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return crud.site_register_lookup(db, search)


@router.get("/{register_id}", response_model=SiteRegisterOut)
def get_site_register(register_id: UUID, db: Session = Depends(get_db)):
    return crud.get_site_register(db, register_id)


@router.post("/", response_model=SiteRegisterOut)
def create_site_register(
    register: SiteRegisterCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.create_site_register(db, register, user_id)


@router.put("/{register_id}", response_model=SiteRegisterOut)
def update_site_register(
    register_id: UUID,
    register: SiteRegisterUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.update_site_register(db, register_id, register, user_id)


@router.delete("/{register_id}", response_model=SiteRegisterOut)
def delete_site_register(register_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_site_register(db, register_id)

# ---------------- Stock movements ----------------


@router.get("/{register_id}/stock-movements", response_model=List[StockMovementOut])
def get_stock_movements(register_id: UUID, db: Session = Depends(get_db)):
    return stock_movements_crud.get_stock_movements(db, register_id)


@router.post("/{register_id}/stock-movements", response_model=StockMovementResult)
def add_stock_movement(
    register_id: UUID,
    movement: StockMovementCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return stock_movements_crud.add_stock_movement(db, register_id, movement, user_id)

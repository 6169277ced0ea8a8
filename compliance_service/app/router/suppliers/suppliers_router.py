# app/router/suppliers/suppliers_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.suppliers import suppliers_crud as crud
from ...schemas.suppliers.suppliers_schemas import (
    SupplierCreate, SupplierListResponse, SupplierOut, SupplierRequest, SupplierUpdate)

router = APIRouter(prefix="/api/suppliers", tags=["suppliers"])

# ---------------- List all suppliers ----------------


@router.get("/all", response_model=SupplierListResponse)
def get_suppliers(params: SupplierRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_suppliers(db, params)


@router.get("/lookup", response_model=List[Lookup])
def supplier_lookup(db: Session = Depends(get_db)):
    return crud.supplier_lookup(db)


@router.get("/{supplier_id}", response_model=SupplierOut)
def get_supplier(supplier_id: UUID, db: Session = Depends(get_db)):
    return crud.get_supplier(db, supplier_id)

# -------create-------------------------------


@router.post("/", response_model=SupplierOut)
def create_supplier(
    supplier: SupplierCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.create_supplier(db, supplier, user_id)

# ---------------- Update Suppliers ----------------


@router.put("/{supplier_id}", response_model=SupplierOut)
def update_supplier(
    supplier_id: UUID,
    supplier: SupplierUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.update_supplier(db, supplier_id, supplier, user_id)


@router.delete("/{supplier_id}", response_model=SupplierOut)
def delete_supplier(supplier_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_supplier(db, supplier_id)

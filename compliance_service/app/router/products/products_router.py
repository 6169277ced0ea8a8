# app/router/products/products_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.products import product_hazards_crud
from ...crud.products import products_crud as crud
from ...schemas.products.products_schemas import (
    ProductCreate, ProductDuplicate, ProductHazardCreate, ProductHazardOut, ProductHazardUpdate,
    ProductListResponse, ProductOut, ProductRequest, ProductUpdate)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/all", response_model=ProductListResponse)
def get_products(params: ProductRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_products(db, params)


@router.get("/lookup", response_model=List[Lookup])
def product_lookup(db: Session = Depends(get_db)):
    return crud.product_lookup(db)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: UUID, db: Session = Depends(get_db)):
    return crud.get_product(db, product_id)


@router.post("/", response_model=ProductOut)
def create_product(
    product: ProductCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.create_product(db, product, user_id)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: UUID,
    product: ProductUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.update_product(db, product_id, product, user_id)


@router.delete("/{product_id}", response_model=ProductOut)
def delete_product(product_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_product(db, product_id)


@router.post("/{product_id}/duplicate", response_model=ProductOut)
def duplicate_product(
    product_id: UUID,
    payload: ProductDuplicate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.duplicate_product(db, product_id, payload, user_id)

# ---------------- Product hazards ----------------


@router.get("/{product_id}/hazards", response_model=List[ProductHazardOut])
def get_product_hazards(product_id: UUID, db: Session = Depends(get_db)):
    return product_hazards_crud.get_product_hazards(db, product_id)


@router.post("/{product_id}/hazards", response_model=ProductHazardOut)
def add_product_hazard(
    product_id: UUID,
    hazard: ProductHazardCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return product_hazards_crud.add_product_hazard(db, product_id, hazard, user_id)


@router.put("/{product_id}/hazards/{hazard_control_id}", response_model=ProductHazardOut)
def update_product_hazard(
    product_id: UUID,
    hazard_control_id: UUID,
    hazard: ProductHazardUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return product_hazards_crud.update_product_hazard(db, product_id, hazard_control_id, hazard, user_id)


@router.delete("/{product_id}/hazards/{hazard_control_id}", response_model=ProductHazardOut)
def delete_product_hazard(product_id: UUID, hazard_control_id: UUID, db: Session = Depends(get_db)):
    return product_hazards_crud.delete_product_hazard(db, product_id, hazard_control_id)

# app/router/master_data/master_data_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import not_found_response
from ...crud.master_data import master_data_crud as crud
from ...crud.master_data import status_lookup_crud
from ...schemas.master_data.master_data_schemas import (
    MasterDataCreate, MasterDataListResponse, MasterDataOut, MasterDataRequest, MasterDataUpdate, StatusLookupOut)

router = APIRouter(prefix="/api/master-data", tags=["master data"])


@router.get("/all", response_model=MasterDataListResponse)
def get_master_data(params: MasterDataRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_master_data(db, params)


@router.get("/categories", response_model=List[str])
def get_categories(db: Session = Depends(get_db)):
    return crud.get_categories(db)


@router.get("/lookup/{category}", response_model=List[Lookup])
def master_data_lookup(category: str, db: Session = Depends(get_db)):
    return crud.master_data_lookup(db, category.upper())


# ----------status lookup-------------


@router.get("/status-lookup", response_model=List[StatusLookupOut])
def status_lookup(category: Optional[str] = None, db: Session = Depends(get_db)):
    return status_lookup_crud.get_status_lookup(db, category)


@router.get("/status-id", response_model=int)
def status_id(status_name: str, category: str, db: Session = Depends(get_db)):
    return status_lookup_crud.get_status_id(db, status_name, category)


@router.get("/{master_data_id}", response_model=MasterDataOut)
def get_master_data_by_id(master_data_id: UUID, db: Session = Depends(get_db)):
    row = crud.get_master_data_by_id(db, master_data_id)
    if not row:
        return not_found_response("Master data")
    return row


@router.post("/", response_model=MasterDataOut)
def create_master_data(payload: MasterDataCreate, db: Session = Depends(get_db)):
    return crud.create_master_data(db, payload)


@router.put("/{master_data_id}", response_model=MasterDataOut)
def update_master_data(master_data_id: UUID, payload: MasterDataUpdate, db: Session = Depends(get_db)):
    return crud.update_master_data(db, master_data_id, payload)


@router.delete("/{master_data_id}", response_model=MasterDataOut)
def delete_master_data(master_data_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_master_data(db, master_data_id)

# app/router/sds/sds_router.py
from datetime import date
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.sds import sds_crud as crud
from ...crud.sds import sds_ghs_crud, sds_versions_crud
from ...schemas.sds.sds_schemas import (
    ExpiryDateOut, SDSCreate, SDSGHSClassificationOut, SDSGHSLink, SDSListResponse,
    SDSOut, SDSOverview, SDSPrecautionaryLink, SDSPrecautionaryStatementOut, SDSRequest,
    SDSRequestCreate, SDSUpdate, SDSVersionCreate, SDSVersionOut)

router = APIRouter(prefix="/api/sds", tags=["sds"])


@router.get("/all", response_model=SDSListResponse)
def get_sds_list(params: SDSRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_sds_list(db, params)


@router.get("/overview", response_model=SDSOverview)
def get_sds_overview(db: Session = Depends(get_db)):
    return crud.get_sds_overview(db)


@router.get("/expiry-date", response_model=ExpiryDateOut)
def get_expiry_date(issue_date: date = Query(...)):
    return crud.get_expiry_date(issue_date)


@router.get("/lookup", response_model=List[Lookup])
def sds_lookup(active_only: bool = Query(True), db: Session = Depends(get_db)):
    return crud.sds_lookup(db, active_only)


@router.post("/request", response_model=SDSOut)
def request_sds(
    request: SDSRequestCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.request_sds(db, request, user_id)


@router.get("/{sds_id}", response_model=SDSOut)
def get_sds(sds_id: UUID, db: Session = Depends(get_db)):
    return crud.get_sds(db, sds_id)


@router.post("/", response_model=SDSOut)
def create_sds(
    sds: SDSCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.create_sds(db, sds, user_id)


@router.put("/{sds_id}", response_model=SDSOut)
def update_sds(
    sds_id: UUID,
    sds: SDSUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.update_sds(db, sds_id, sds, user_id)


@router.delete("/{sds_id}", response_model=SDSOut)
def delete_sds(sds_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_sds(db, sds_id)

# ---------------- Versions ----------------


@router.get("/{sds_id}/versions", response_model=List[SDSVersionOut])
def get_sds_versions(sds_id: UUID, db: Session = Depends(get_db)):
    return sds_versions_crud.get_sds_versions(db, sds_id)


@router.post("/{sds_id}/versions", response_model=SDSVersionOut)
def add_sds_version(
    sds_id: UUID,
    version: SDSVersionCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return sds_versions_crud.add_sds_version(db, sds_id, version, user_id)

# ---------------- GHS classifications ----------------


@router.get("/{sds_id}/ghs-classifications", response_model=List[SDSGHSClassificationOut])
def get_sds_ghs_classifications(sds_id: UUID, db: Session = Depends(get_db)):
    return sds_ghs_crud.get_sds_ghs_classifications(db, sds_id)


@router.post("/{sds_id}/ghs-classifications", response_model=SDSGHSClassificationOut)
def link_ghs_classification(
    sds_id: UUID,
    payload: SDSGHSLink,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return sds_ghs_crud.link_ghs_classification(db, sds_id, payload, user_id)


@router.delete("/{sds_id}/ghs-classifications/{sds_ghs_id}", response_model=SDSGHSClassificationOut)
def unlink_ghs_classification(sds_id: UUID, sds_ghs_id: UUID, db: Session = Depends(get_db)):
    return sds_ghs_crud.unlink_ghs_classification(db, sds_id, sds_ghs_id)

# ---------------- Precautionary statements ----------------


@router.get("/{sds_id}/precautionary-statements", response_model=List[SDSPrecautionaryStatementOut])
def get_sds_precautionary_statements(sds_id: UUID, db: Session = Depends(get_db)):
    return sds_ghs_crud.get_sds_precautionary_statements(db, sds_id)


@router.post("/{sds_id}/precautionary-statements", response_model=SDSPrecautionaryStatementOut)
def link_precautionary_statement(
    sds_id: UUID,
    payload: SDSPrecautionaryLink,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return sds_ghs_crud.link_precautionary_statement(db, sds_id, payload, user_id)


@router.delete("/{sds_id}/precautionary-statements/{link_id}", response_model=SDSPrecautionaryStatementOut)
def unlink_precautionary_statement(sds_id: UUID, link_id: UUID, db: Session = Depends(get_db)):
    return sds_ghs_crud.unlink_precautionary_statement(db, sds_id, link_id)

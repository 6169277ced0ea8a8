# app/router/ghs/ghs_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from ...crud.ghs import ghs_crud, hazard_classifications_crud
from ...schemas.ghs.ghs_schemas import (
    GHSCodeCreate, GHSCodeOut, GHSCodeUpdate, HazardClassificationCreate,
    HazardClassificationListResponse, HazardClassificationOut, HazardClassificationRequest,
    HazardClassificationUpdate, HazardStatementCreate, HazardStatementOut,
    PrecautionaryStatementCreate, PrecautionaryStatementOut, StatementRequest)

router = APIRouter(prefix="/api/ghs", tags=["ghs"])

# ---------------- GHS codes ----------------


@router.get("/codes", response_model=List[GHSCodeOut])
def get_ghs_codes(search: Optional[str] = Query(None), db: Session = Depends(get_db)):
    return ghs_crud.get_ghs_codes(db, search)


@router.post("/codes", response_model=GHSCodeOut)
def create_ghs_code(
    payload: GHSCodeCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return ghs_crud.create_ghs_code(db, payload, user_id)


@router.put("/codes/{ghs_code_id}", response_model=GHSCodeOut)
def update_ghs_code(
    ghs_code_id: UUID,
    payload: GHSCodeUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return ghs_crud.update_ghs_code(db, ghs_code_id, payload, user_id)


@router.delete("/codes/{ghs_code_id}", response_model=GHSCodeOut)
def delete_ghs_code(ghs_code_id: UUID, db: Session = Depends(get_db)):
    return ghs_crud.delete_ghs_code(db, ghs_code_id)

# ---------------- Statements ----------------


@router.get("/hazard-statements", response_model=List[HazardStatementOut])
def get_hazard_statements(params: StatementRequest = Depends(), db: Session = Depends(get_db)):
    return ghs_crud.get_hazard_statements(db, params)


@router.post("/hazard-statements", response_model=HazardStatementOut)
def create_hazard_statement(
    payload: HazardStatementCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return ghs_crud.create_hazard_statement(db, payload, user_id)


@router.get("/precautionary-statements", response_model=List[PrecautionaryStatementOut])
def get_precautionary_statements(params: StatementRequest = Depends(), db: Session = Depends(get_db)):
    return ghs_crud.get_precautionary_statements(db, params)


@router.post("/precautionary-statements", response_model=PrecautionaryStatementOut)
def create_precautionary_statement(
    payload: PrecautionaryStatementCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return ghs_crud.create_precautionary_statement(db, payload, user_id)

# ---------------- Hazard classifications ----------------


@router.get("/classifications", response_model=HazardClassificationListResponse)
def get_hazard_classifications(params: HazardClassificationRequest = Depends(), db: Session = Depends(get_db)):
    return hazard_classifications_crud.get_hazard_classifications(db, params)


@router.get("/classifications/{classification_id}", response_model=HazardClassificationOut)
def get_hazard_classification(classification_id: UUID, db: Session = Depends(get_db)):
    return hazard_classifications_crud.get_hazard_classification(db, classification_id)


@router.post("/classifications", response_model=HazardClassificationOut)
def create_hazard_classification(
    payload: HazardClassificationCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return hazard_classifications_crud.create_hazard_classification(db, payload, user_id)


@router.put("/classifications/{classification_id}", response_model=HazardClassificationOut)
def update_hazard_classification(
    classification_id: UUID,
    payload: HazardClassificationUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return hazard_classifications_crud.update_hazard_classification(db, classification_id, payload, user_id)


@router.delete("/classifications/{classification_id}", response_model=HazardClassificationOut)
def delete_hazard_classification(classification_id: UUID, db: Session = Depends(get_db)):
    return hazard_classifications_crud.delete_hazard_classification(db, classification_id)

# app/router/risk_assessments/risk_assessments_router.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from ...crud.risk_assessments import risk_assessments_crud as crud
from ...crud.risk_assessments import risk_hazards_crud, risk_reference_crud
from ...schemas.risk_assessments.risk_assessments_schemas import (
    ConsequenceOut, GeneratedHazardsOut, LikelihoodOut, RiskAssessmentCreate,
    RiskAssessmentListResponse, RiskAssessmentOut, RiskAssessmentRequest,
    RiskAssessmentUpdate, RiskHazardCreate, RiskHazardOut, RiskHazardUpdate,
    RiskMatrixOut, RiskScoreOut)

router = APIRouter(prefix="/api/risk-assessments", tags=["risk assessments"])

# ---------------- Reference tables ----------------


@router.get("/likelihood", response_model=List[LikelihoodOut])
def get_likelihoods(db: Session = Depends(get_db)):
    return risk_reference_crud.get_likelihoods(db)


@router.get("/consequence", response_model=List[ConsequenceOut])
def get_consequences(db: Session = Depends(get_db)):
    return risk_reference_crud.get_consequences(db)


@router.get("/risk-matrix", response_model=List[RiskMatrixOut])
def get_risk_matrix(db: Session = Depends(get_db)):
    return risk_reference_crud.get_risk_matrix(db)


@router.get("/risk-score", response_model=RiskScoreOut)
def lookup_risk_score(
    likelihood_id: int = Query(...),
    consequence_id: int = Query(...),
    db: Session = Depends(get_db)
):
    return risk_reference_crud.lookup_risk_score(db, likelihood_id, consequence_id)

# ---------------- Assessments ----------------


@router.get("/all", response_model=RiskAssessmentListResponse)
def get_risk_assessments(params: RiskAssessmentRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_risk_assessments(db, params)


@router.get("/{assessment_id}", response_model=RiskAssessmentOut)
def get_risk_assessment(assessment_id: UUID, db: Session = Depends(get_db)):
    return crud.get_risk_assessment(db, assessment_id)


@router.post("/", response_model=RiskAssessmentOut)
def create_risk_assessment(
    assessment: RiskAssessmentCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.create_risk_assessment(db, assessment, user_id)


@router.put("/{assessment_id}", response_model=RiskAssessmentOut)
def update_risk_assessment(
    assessment_id: UUID,
    assessment: RiskAssessmentUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return crud.update_risk_assessment(db, assessment_id, assessment, user_id)


@router.delete("/{assessment_id}", response_model=RiskAssessmentOut)
def delete_risk_assessment(assessment_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_risk_assessment(db, assessment_id)


@router.post("/{assessment_id}/generate-hazards", response_model=GeneratedHazardsOut)
def generate_hazards(
    assessment_id: UUID,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return risk_hazards_crud.generate_hazards(db, assessment_id, user_id)

# ---------------- Risk hazards ----------------


@router.get("/{assessment_id}/hazards", response_model=List[RiskHazardOut])
def get_risk_hazards(assessment_id: UUID, db: Session = Depends(get_db)):
    return risk_hazards_crud.get_risk_hazards(db, assessment_id)


@router.post("/{assessment_id}/hazards", response_model=RiskHazardOut)
def add_risk_hazard(
    assessment_id: UUID,
    hazard: RiskHazardCreate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return risk_hazards_crud.add_risk_hazard(db, assessment_id, hazard, user_id)


@router.put("/{assessment_id}/hazards/{hazard_id}", response_model=RiskHazardOut)
def update_risk_hazard(
    assessment_id: UUID,
    hazard_id: UUID,
    hazard: RiskHazardUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return risk_hazards_crud.update_risk_hazard(db, assessment_id, hazard_id, hazard, user_id)


@router.delete("/{assessment_id}/hazards/{hazard_id}", response_model=RiskHazardOut)
def delete_risk_hazard(assessment_id: UUID, hazard_id: UUID, db: Session = Depends(get_db)):
    return risk_hazards_crud.delete_risk_hazard(db, assessment_id, hazard_id)

from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import date, datetime

from shared.core.schemas import CommonQueryParams, PageMeta, PartialUpdateModel

# ---------------- Reference tables ----------------


class LikelihoodOut(BaseModel):
    id: int
    name: str
    score: int

    model_config = {"from_attributes": True}


class ConsequenceOut(BaseModel):
    id: int
    name: str
    score: int

    model_config = {"from_attributes": True}


class RiskMatrixOut(BaseModel):
    id: int
    likelihood_id: int
    consequence_id: int
    risk_score: int
    risk_level: str
    risk_label: Optional[str] = None
    risk_color: str

    model_config = {"from_attributes": True}


class RiskScoreOut(BaseModel):
    """Result of a likelihood x consequence lookup; empty score on a miss."""
    likelihood_id: int
    consequence_id: int
    found: bool = False
    risk_score_id: Optional[int] = None
    risk_score: Optional[int] = None
    risk_level: Optional[str] = None
    risk_label: Optional[str] = None
    risk_color: Optional[str] = None

# ---------------- Risk hazards ----------------


class RiskHazardCreate(BaseModel):
    hazard_type_id: Optional[UUID] = None
    hazard: str = ""
    control: str = ""
    control_in_place: bool = False
    likelihood_id: Optional[int] = None
    consequence_id: Optional[int] = None


class RiskHazardUpdate(PartialUpdateModel):
    not_nullable = ("control_in_place",)

    hazard_type_id: Optional[UUID] = None
    hazard: Optional[str] = None
    control: Optional[str] = None
    control_in_place: Optional[bool] = None
    likelihood_id: Optional[int] = None
    consequence_id: Optional[int] = None


class RiskHazardOut(BaseModel):
    id: UUID
    risk_assessment_id: UUID
    hazard_type_id: Optional[UUID] = None
    hazard_type: Optional[str] = None
    hazard: Optional[str] = None
    control: Optional[str] = None
    control_in_place: bool = False
    source: Optional[str] = None
    hazard_control_id: Optional[UUID] = None
    likelihood_id: Optional[int] = None
    consequence_id: Optional[int] = None
    risk_score_id: Optional[int] = None
    likelihood_text: Optional[str] = None
    consequence_text: Optional[str] = None
    risk_level_text: Optional[str] = None
    risk_score_int: Optional[int] = None
    risk_color: Optional[str] = None
    created_at: Optional[datetime] = None

# ---------------- Risk assessments ----------------


class RiskAssessmentBase(BaseModel):
    site_register_record_id: UUID
    risk_assessment_date: Optional[date] = None
    date_of_next_review: Optional[date] = None
    conducted_by: Optional[UUID] = None
    approver: Optional[UUID] = None
    product_usage: Optional[str] = None
    overall_likelihood_id: Optional[int] = None
    overall_consequence_id: Optional[int] = None
    overall_evaluation: Optional[str] = None
    overall_evaluation_status_id: Optional[UUID] = None
    approval_status_id: Optional[UUID] = None


class RiskAssessmentRequest(CommonQueryParams):
    site_register_record_id: Optional[UUID] = None
    approval_status_id: Optional[str] = None  # comma separated master data ids
    evaluation_status_id: Optional[str] = None


class RiskAssessmentCreate(RiskAssessmentBase):
    auto_generate_hazards: bool = False


class RiskAssessmentUpdate(PartialUpdateModel):
    not_nullable = ("site_register_record_id",)

    site_register_record_id: Optional[UUID] = None
    risk_assessment_date: Optional[date] = None
    date_of_next_review: Optional[date] = None
    conducted_by: Optional[UUID] = None
    approver: Optional[UUID] = None
    product_usage: Optional[str] = None
    overall_likelihood_id: Optional[int] = None
    overall_consequence_id: Optional[int] = None
    overall_evaluation: Optional[str] = None
    overall_evaluation_status_id: Optional[UUID] = None
    approval_status_id: Optional[UUID] = None
    auto_generate_hazards: bool = False


class RiskAssessmentOut(BaseModel):
    id: UUID
    site_register_record_id: UUID
    product_name: Optional[str] = None
    location_path: Optional[str] = None
    risk_assessment_date: Optional[date] = None
    date_of_next_review: Optional[date] = None
    conducted_by: Optional[UUID] = None
    conducted_by_name: Optional[str] = None
    approver: Optional[UUID] = None
    approver_name: Optional[str] = None
    product_usage: Optional[str] = None
    overall_likelihood_id: Optional[int] = None
    overall_consequence_id: Optional[int] = None
    overall_risk_score_id: Optional[int] = None
    overall_likelihood_text: Optional[str] = None
    overall_consequence_text: Optional[str] = None
    overall_risk_level_text: Optional[str] = None
    overall_risk_score_int: Optional[int] = None
    overall_risk_color: Optional[str] = None
    overall_evaluation: Optional[str] = None
    overall_evaluation_status_id: Optional[UUID] = None
    evaluation_status: Optional[str] = None
    approval_status_id: Optional[UUID] = None
    approval_status: Optional[str] = None
    hazards: List[RiskHazardOut] = []
    created_at: Optional[datetime] = None


class RiskAssessmentListResponse(PageMeta):
    risk_assessments: List[RiskAssessmentOut]


class GeneratedHazardsOut(BaseModel):
    added: int
    hazards: List[RiskHazardOut]

# app/crud/risk_assessments/risk_assessments_crud.py
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from ...enum.master_data_enum import MasterDataCategory
from ...models.locations.locations import Location
from ...models.products.products import Product
from ...models.risk_assessments.risk_assessments import RiskAssessment
from ...models.site_registers.site_registers import SiteRegister
from ...models.users.users import User
from ...schemas.risk_assessments.risk_assessments_schemas import (
    RiskAssessmentCreate, RiskAssessmentListResponse, RiskAssessmentOut,
    RiskAssessmentRequest, RiskAssessmentUpdate)
from ..master_data.master_data_crud import ensure_category
from ..site_registers.site_registers_crud import get_site_register_by_id
from .risk_hazards_crud import copy_product_hazards, risk_hazard_to_out
from .risk_reference_crud import resolve_risk_fields

logger = logging.getLogger(__name__)


def _user_name(user: Optional[User]) -> Optional[str]:
    return f"{user.first_name} {user.last_name}" if user else None


def risk_assessment_to_out(assessment: RiskAssessment, with_hazards: bool = False) -> RiskAssessmentOut:
    register = assessment.site_register
    product = register.product if register else None
    return RiskAssessmentOut(
        id=assessment.id,
        site_register_record_id=assessment.site_register_record_id,
        product_name=(register.override_product_name or product.product_name) if product else None,
        location_path=register.location.full_path if register and register.location else None,
        risk_assessment_date=assessment.risk_assessment_date,
        date_of_next_review=assessment.date_of_next_review,
        conducted_by=assessment.conducted_by,
        conducted_by_name=_user_name(assessment.assessor),
        approver=assessment.approver,
        approver_name=_user_name(assessment.approver_user),
        product_usage=assessment.product_usage,
        overall_likelihood_id=assessment.overall_likelihood_id,
        overall_consequence_id=assessment.overall_consequence_id,
        overall_risk_score_id=assessment.overall_risk_score_id,
        overall_likelihood_text=assessment.overall_likelihood_text,
        overall_consequence_text=assessment.overall_consequence_text,
        overall_risk_level_text=assessment.overall_risk_level_text,
        overall_risk_score_int=assessment.overall_risk_score_int,
        overall_risk_color=assessment.risk_matrix.risk_color if assessment.risk_matrix else None,
        overall_evaluation=assessment.overall_evaluation,
        overall_evaluation_status_id=assessment.overall_evaluation_status_id,
        evaluation_status=assessment.evaluation_status.label if assessment.evaluation_status else None,
        approval_status_id=assessment.approval_status_id,
        approval_status=assessment.approval_status.label if assessment.approval_status else None,
        hazards=[risk_hazard_to_out(h) for h in assessment.hazards] if with_hazards else [],
        created_at=assessment.created_at,
    )


def overall_risk_fields(db: Session, likelihood_id: Optional[int], consequence_id: Optional[int]) -> dict:
    fields = resolve_risk_fields(db, likelihood_id, consequence_id)
    return {
        "overall_likelihood_text": fields["likelihood_text"],
        "overall_consequence_text": fields["consequence_text"],
        "overall_risk_score_id": fields["risk_score_id"],
        "overall_risk_score_int": fields["risk_score_int"],
        "overall_risk_level_text": fields["risk_level_text"],
    }

# ----------------- Build Filters for Risk Assessments -----------------


def build_risk_assessment_filters(params: RiskAssessmentRequest):
    filters = []

    if params.site_register_record_id:
        filters.append(RiskAssessment.site_register_record_id == params.site_register_record_id)

    approvals = split_filter(params.approval_status_id)
    if approvals:
        filters.append(RiskAssessment.approval_status_id.in_([UUID(a) for a in approvals]))

    evaluations = split_filter(params.evaluation_status_id)
    if evaluations:
        filters.append(RiskAssessment.overall_evaluation_status_id.in_(
            [UUID(e) for e in evaluations]))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Product.product_name.ilike(search_term),
                Location.full_path.ilike(search_term),
                RiskAssessment.product_usage.ilike(search_term),
                RiskAssessment.overall_evaluation.ilike(search_term),
            )
        )
    return filters


def get_risk_assessments(db: Session, params: RiskAssessmentRequest, is_export: bool = False) -> RiskAssessmentListResponse:
    query = (
        db.query(RiskAssessment)
        .join(SiteRegister, RiskAssessment.site_register_record_id == SiteRegister.id)
        .join(Product, SiteRegister.product_id == Product.id)
        .join(Location, SiteRegister.location_id == Location.id)
        .options(
            joinedload(RiskAssessment.site_register).joinedload(SiteRegister.product),
            joinedload(RiskAssessment.site_register).joinedload(SiteRegister.location),
            joinedload(RiskAssessment.assessor),
            joinedload(RiskAssessment.approver_user),
            joinedload(RiskAssessment.risk_matrix),
            joinedload(RiskAssessment.evaluation_status),
            joinedload(RiskAssessment.approval_status),
        )
        .filter(*build_risk_assessment_filters(params))
        .order_by(RiskAssessment.risk_assessment_date.desc(), RiskAssessment.created_at.desc())
    )
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return RiskAssessmentListResponse(
        risk_assessments=[risk_assessment_to_out(r) for r in rows], **meta)


def get_risk_assessment_by_id(db: Session, assessment_id: UUID) -> Optional[RiskAssessment]:
    return db.query(RiskAssessment).filter(RiskAssessment.id == assessment_id).first()


def get_risk_assessment(db: Session, assessment_id: UUID) -> RiskAssessmentOut:
    assessment = get_risk_assessment_by_id(db, assessment_id)
    if not assessment:
        return not_found_response("Risk assessment")
    return risk_assessment_to_out(assessment, with_hazards=True)


def _validate_references(db: Session, data: dict):
    if data.get("site_register_record_id") and \
            not get_site_register_by_id(db, data["site_register_record_id"]):
        return not_found_response("Site register")
    for field in ("conducted_by", "approver"):
        if data.get(field) and not db.get(User, data[field]):
            return not_found_response("User")
    ensure_category(db, data.get("overall_evaluation_status_id"),
                    MasterDataCategory.EVALUATION_STATUS.value, "overall_evaluation_status_id")
    ensure_category(db, data.get("approval_status_id"),
                    MasterDataCategory.APPROVAL_STATUS.value, "approval_status_id")


def create_risk_assessment(db: Session, assessment: RiskAssessmentCreate,
                           user_id: Optional[UUID] = None) -> RiskAssessmentOut:
    data = assessment.model_dump(exclude={"auto_generate_hazards"})
    _validate_references(db, data)
    data.update(overall_risk_fields(
        db, data["overall_likelihood_id"], data["overall_consequence_id"]))
    data["updated_by"] = user_id

    db_assessment = RiskAssessment(**data)
    db.add(db_assessment)
    try:
        db.flush()
        if assessment.auto_generate_hazards:
            db.refresh(db_assessment)
            added = copy_product_hazards(db, db_assessment, user_id)
            logger.info(f"Generated {len(added)} hazards for new risk assessment {db_assessment.id}")
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error creating risk assessment")
        raise

    db.refresh(db_assessment)
    logger.info(f"Created risk assessment {db_assessment.id}")
    return risk_assessment_to_out(db_assessment, with_hazards=True)


def update_risk_assessment(db: Session, assessment_id: UUID, assessment: RiskAssessmentUpdate,
                           user_id: Optional[UUID] = None) -> RiskAssessmentOut:
    db_assessment = get_risk_assessment_by_id(db, assessment_id)
    if not db_assessment:
        return not_found_response("Risk assessment")

    update_data = assessment.model_dump(exclude_unset=True, exclude={"auto_generate_hazards"})
    _validate_references(db, update_data)

    if "overall_likelihood_id" in update_data or "overall_consequence_id" in update_data:
        update_data.update(overall_risk_fields(
            db,
            update_data.get("overall_likelihood_id", db_assessment.overall_likelihood_id),
            update_data.get("overall_consequence_id", db_assessment.overall_consequence_id),
        ))
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_assessment, key, value)

    try:
        db.flush()
        if assessment.auto_generate_hazards:
            db.refresh(db_assessment)
            added = copy_product_hazards(db, db_assessment, user_id)
            logger.info(f"Generated {len(added)} hazards for risk assessment {assessment_id}")
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(f"Error updating risk assessment {assessment_id}")
        raise

    db.refresh(db_assessment)
    logger.info(f"Updated risk assessment {assessment_id}")
    return risk_assessment_to_out(db_assessment, with_hazards=True)


def delete_risk_assessment(db: Session, assessment_id: UUID) -> RiskAssessmentOut:
    db_assessment = get_risk_assessment_by_id(db, assessment_id)
    if not db_assessment:
        return not_found_response("Risk assessment")

    deleted = risk_assessment_to_out(db_assessment)
    db.delete(db_assessment)
    db.commit()
    logger.info(f"Deleted risk assessment {assessment_id} with its hazards")
    return deleted

# app/crud/risk_assessments/risk_hazards_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.risk_enum import HazardSource
from ...models.master_data.master_data import MasterData
from ...models.products.hazards_and_controls import HazardAndControl
from ...models.risk_assessments.risk_assessments import RiskAssessment
from ...models.risk_assessments.risk_hazards_and_controls import RiskHazardAndControl
from ...schemas.risk_assessments.risk_assessments_schemas import (
    GeneratedHazardsOut, RiskHazardCreate, RiskHazardOut, RiskHazardUpdate)
from ..master_data.master_data_crud import ensure_category
from .risk_reference_crud import resolve_risk_fields

logger = logging.getLogger(__name__)


def risk_hazard_to_out(hazard: RiskHazardAndControl) -> RiskHazardOut:
    return RiskHazardOut(
        id=hazard.id,
        risk_assessment_id=hazard.risk_assessment_id,
        hazard_type_id=hazard.hazard_type_id,
        hazard_type=hazard.hazard_type.label if hazard.hazard_type else None,
        hazard=hazard.hazard,
        control=hazard.control,
        control_in_place=bool(hazard.control_in_place),
        source=hazard.source,
        hazard_control_id=hazard.hazard_control_id,
        likelihood_id=hazard.likelihood_id,
        consequence_id=hazard.consequence_id,
        risk_score_id=hazard.risk_score_id,
        likelihood_text=hazard.likelihood_text,
        consequence_text=hazard.consequence_text,
        risk_level_text=hazard.risk_level_text,
        risk_score_int=hazard.risk_score_int,
        risk_color=hazard.risk_matrix.risk_color if hazard.risk_matrix else None,
        created_at=hazard.created_at,
    )


def _get_assessment(db: Session, assessment_id: UUID) -> RiskAssessment:
    assessment = db.query(RiskAssessment).filter(RiskAssessment.id == assessment_id).first()
    if not assessment:
        return not_found_response("Risk assessment")
    return assessment


def _get_risk_hazard(db: Session, assessment_id: UUID, hazard_id: UUID) -> Optional[RiskHazardAndControl]:
    return db.query(RiskHazardAndControl).filter(
        RiskHazardAndControl.risk_assessment_id == assessment_id,
        RiskHazardAndControl.id == hazard_id,
    ).first()


def default_hazard_type_id(db: Session) -> Optional[UUID]:
    row = (
        db.query(MasterData.id)
        .filter(MasterData.category == MasterDataCategory.HAZARD_TYPE.value,
                MasterData.status == "ACTIVE")
        .order_by(MasterData.sort_order.asc(), MasterData.label.asc())
        .first()
    )
    return row.id if row else None


def get_risk_hazards(db: Session, assessment_id: UUID) -> List[RiskHazardOut]:
    _get_assessment(db, assessment_id)
    rows = (
        db.query(RiskHazardAndControl)
        .options(
            joinedload(RiskHazardAndControl.hazard_type),
            joinedload(RiskHazardAndControl.risk_matrix),
        )
        .filter(RiskHazardAndControl.risk_assessment_id == assessment_id)
        .order_by(RiskHazardAndControl.created_at.asc())
        .all()
    )
    return [risk_hazard_to_out(r) for r in rows]


def add_risk_hazard(db: Session, assessment_id: UUID, hazard: RiskHazardCreate,
                    user_id: Optional[UUID] = None) -> RiskHazardOut:
    _get_assessment(db, assessment_id)

    data = hazard.model_dump()
    if data["hazard_type_id"] is None:
        data["hazard_type_id"] = default_hazard_type_id(db)
        if data["hazard_type_id"] is None:
            return error_response(
                message="No active hazard type configured",
                status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
                http_status=400
            )
    else:
        ensure_category(db, data["hazard_type_id"],
                        MasterDataCategory.HAZARD_TYPE.value, "hazard_type_id")

    data.update(resolve_risk_fields(db, data["likelihood_id"], data["consequence_id"]))
    db_hazard = RiskHazardAndControl(
        risk_assessment_id=assessment_id,
        source=HazardSource.manual.value,
        updated_by=user_id,
        **data
    )
    db.add(db_hazard)
    db.commit()
    db.refresh(db_hazard)
    logger.info(f"Added manual hazard {db_hazard.id} to risk assessment {assessment_id}")
    return risk_hazard_to_out(db_hazard)


def update_risk_hazard(db: Session, assessment_id: UUID, hazard_id: UUID,
                       hazard: RiskHazardUpdate, user_id: Optional[UUID] = None) -> RiskHazardOut:
    db_hazard = _get_risk_hazard(db, assessment_id, hazard_id)
    if not db_hazard:
        return not_found_response("Risk hazard")

    update_data = hazard.model_dump(exclude_unset=True)
    if update_data.get("hazard_type_id"):
        ensure_category(db, update_data["hazard_type_id"],
                        MasterDataCategory.HAZARD_TYPE.value, "hazard_type_id")

    if "likelihood_id" in update_data or "consequence_id" in update_data:
        update_data.update(resolve_risk_fields(
            db,
            update_data.get("likelihood_id", db_hazard.likelihood_id),
            update_data.get("consequence_id", db_hazard.consequence_id),
        ))
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_hazard, key, value)

    db.commit()
    db.refresh(db_hazard)
    logger.info(f"Updated risk hazard {hazard_id}")
    return risk_hazard_to_out(db_hazard)


def delete_risk_hazard(db: Session, assessment_id: UUID, hazard_id: UUID) -> RiskHazardOut:
    db_hazard = _get_risk_hazard(db, assessment_id, hazard_id)
    if not db_hazard:
        return not_found_response("Risk hazard")

    deleted = risk_hazard_to_out(db_hazard)
    db.delete(db_hazard)
    db.commit()
    logger.info(f"Deleted risk hazard {hazard_id}")
    return deleted


def copy_product_hazards(db: Session, assessment: RiskAssessment,
                         user_id: Optional[UUID] = None) -> List[RiskHazardAndControl]:
    """
    Copy the product hazards of the assessed site register into the assessment.

    Hazards already linked through hazard_control_id are skipped, so running
    it twice adds nothing the second time. Rows are added to the session
    without committing.
    """
    register = assessment.site_register
    if not register or not register.product_id:
        return []

    existing_ids = {
        row.hazard_control_id
        for row in db.query(RiskHazardAndControl.hazard_control_id).filter(
            RiskHazardAndControl.risk_assessment_id == assessment.id,
            RiskHazardAndControl.hazard_control_id.isnot(None),
        )
    }
    product_hazards = (
        db.query(HazardAndControl)
        .filter(HazardAndControl.product_id == register.product_id)
        .order_by(HazardAndControl.created_at.asc())
        .all()
    )

    added = []
    for product_hazard in product_hazards:
        if product_hazard.hazard_control_id in existing_ids:
            continue
        row = RiskHazardAndControl(
            risk_assessment_id=assessment.id,
            hazard_type_id=product_hazard.hazard_type,
            hazard=product_hazard.hazard,
            control=product_hazard.control,
            hazard_control_id=product_hazard.hazard_control_id,
            source=HazardSource.product.value,
            control_in_place=False,
            updated_by=user_id,
        )
        db.add(row)
        added.append(row)
    return added


def generate_hazards(db: Session, assessment_id: UUID, user_id: Optional[UUID] = None) -> GeneratedHazardsOut:
    assessment = _get_assessment(db, assessment_id)
    try:
        added = copy_product_hazards(db, assessment, user_id)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(f"Error generating hazards for risk assessment {assessment_id}")
        raise

    for row in added:
        db.refresh(row)
    logger.info(f"Generated {len(added)} hazards for risk assessment {assessment_id}")
    return GeneratedHazardsOut(added=len(added), hazards=[risk_hazard_to_out(r) for r in added])

# app/crud/ghs/hazard_classifications_crud.py
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...models.ghs.ghs_codes import GHSCode
from ...models.ghs.ghs_hazard_classifications import GHSHazardClassification
from ...models.ghs.statements import HazardStatement
from ...models.sds.sds_ghs_classifications import SDSGHSClassification
from ...schemas.ghs.ghs_schemas import (
    HazardClassificationCreate, HazardClassificationListResponse, HazardClassificationOut,
    HazardClassificationRequest, HazardClassificationUpdate)
from .ghs_crud import get_ghs_code_by_id

logger = logging.getLogger(__name__)


def classification_to_out(row: GHSHazardClassification) -> HazardClassificationOut:
    return HazardClassificationOut(
        hazard_classification_id=row.hazard_classification_id,
        hazard_class=row.hazard_class,
        hazard_category=row.hazard_category,
        ghs_code_id=row.ghs_code_id,
        ghs_code=row.ghs_code.ghs_code if row.ghs_code else None,
        pictogram_url=row.ghs_code.pictogram_url if row.ghs_code else None,
        hazard_statement_id=row.hazard_statement_id,
        hazard_statement_code=row.hazard_statement.hazard_statement_code if row.hazard_statement else None,
        hazard_statement_text=row.hazard_statement.hazard_statement_text if row.hazard_statement else None,
        signal_word=row.signal_word,
        notes=row.notes,
        source=row.source,
        updated_at=row.updated_at,
    )


def build_classification_filters(params: HazardClassificationRequest):
    filters = []

    signal_words = split_filter(params.signal_word)
    if signal_words:
        filters.append(GHSHazardClassification.signal_word.in_(signal_words))

    if params.ghs_code_id:
        filters.append(GHSHazardClassification.ghs_code_id == params.ghs_code_id)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                GHSHazardClassification.hazard_class.ilike(search_term),
                GHSHazardClassification.hazard_category.ilike(search_term),
                GHSCode.ghs_code.ilike(search_term),
                HazardStatement.hazard_statement_code.ilike(search_term),
                HazardStatement.hazard_statement_text.ilike(search_term),
            )
        )
    return filters


def get_hazard_classifications(db: Session, params: HazardClassificationRequest) -> HazardClassificationListResponse:
    query = (
        db.query(GHSHazardClassification)
        .outerjoin(GHSCode, GHSHazardClassification.ghs_code_id == GHSCode.ghs_code_id)
        .outerjoin(HazardStatement,
                   GHSHazardClassification.hazard_statement_id == HazardStatement.hazard_statement_id)
        .options(
            joinedload(GHSHazardClassification.ghs_code),
            joinedload(GHSHazardClassification.hazard_statement),
        )
        .filter(*build_classification_filters(params))
        .order_by(GHSHazardClassification.hazard_class.asc(),
                  GHSHazardClassification.hazard_category.asc())
    )
    rows, meta = paginate(query, params.page, params.page_size)
    return HazardClassificationListResponse(
        classifications=[classification_to_out(r) for r in rows], **meta)


def get_classification_by_id(db: Session, classification_id: UUID) -> Optional[GHSHazardClassification]:
    return db.query(GHSHazardClassification).filter(
        GHSHazardClassification.hazard_classification_id == classification_id).first()


def get_hazard_classification(db: Session, classification_id: UUID) -> HazardClassificationOut:
    row = get_classification_by_id(db, classification_id)
    if not row:
        return not_found_response("Hazard classification")
    return classification_to_out(row)


def _validate_references(db: Session, data: dict):
    if data.get("ghs_code_id") and not get_ghs_code_by_id(db, data["ghs_code_id"]):
        return not_found_response("GHS code")
    if data.get("hazard_statement_id"):
        exists = db.query(HazardStatement.hazard_statement_id).filter(
            HazardStatement.hazard_statement_id == data["hazard_statement_id"]).first()
        if not exists:
            return not_found_response("Hazard statement")


def create_hazard_classification(db: Session, payload: HazardClassificationCreate,
                                 user_id: Optional[UUID] = None) -> HazardClassificationOut:
    data = payload.model_dump()
    _validate_references(db, data)
    data["signal_word"] = payload.signal_word.value
    data["updated_by"] = user_id

    row = GHSHazardClassification(**data)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Created hazard classification {row.hazard_class} {row.hazard_category}")
    return classification_to_out(row)


def update_hazard_classification(db: Session, classification_id: UUID, payload: HazardClassificationUpdate,
                                 user_id: Optional[UUID] = None) -> HazardClassificationOut:
    row = get_classification_by_id(db, classification_id)
    if not row:
        return not_found_response("Hazard classification")

    update_data = payload.model_dump(exclude_unset=True)
    _validate_references(db, update_data)
    if payload.signal_word is not None:
        update_data["signal_word"] = payload.signal_word.value
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(row, key, value)
    db.commit()
    db.refresh(row)
    logger.info(f"Updated hazard classification {classification_id}")
    return classification_to_out(row)


def delete_hazard_classification(db: Session, classification_id: UUID) -> HazardClassificationOut:
    row = get_classification_by_id(db, classification_id)
    if not row:
        return not_found_response("Hazard classification")

    linked = db.query(func.count(SDSGHSClassification.sds_ghs_id)).filter(
        SDSGHSClassification.hazard_classification_id == classification_id).scalar()
    if linked:
        return error_response(
            message="Cannot delete the hazard classification as SDS records use it",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = classification_to_out(row)
    db.delete(row)
    db.commit()
    logger.info(f"Deleted hazard classification {classification_id}")
    return deleted

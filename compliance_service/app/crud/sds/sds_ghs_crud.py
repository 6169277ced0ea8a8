# app/crud/sds/sds_ghs_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from ...models.ghs.ghs_hazard_classifications import GHSHazardClassification
from ...models.ghs.statements import PrecautionaryStatement
from ...models.sds.sds_ghs_classifications import SDSGHSClassification
from ...models.sds.sds_precautionary_statements import SDSPrecautionaryStatement
from ...schemas.sds.sds_schemas import (
    SDSGHSClassificationOut, SDSGHSLink, SDSPrecautionaryLink, SDSPrecautionaryStatementOut)
from .sds_crud import get_sds_by_id

logger = logging.getLogger(__name__)


def _require_sds(db: Session, sds_id: UUID):
    if not get_sds_by_id(db, sds_id):
        return not_found_response("SDS")

# ---------------- GHS classifications ----------------


def ghs_link_to_out(link: SDSGHSClassification) -> SDSGHSClassificationOut:
    classification = link.hazard_classification
    ghs_code = classification.ghs_code if classification else None
    statement = classification.hazard_statement if classification else None
    return SDSGHSClassificationOut(
        sds_ghs_id=link.sds_ghs_id,
        sds_id=link.sds_id,
        hazard_classification_id=link.hazard_classification_id,
        hazard_class=classification.hazard_class if classification else None,
        hazard_category=classification.hazard_category if classification else None,
        signal_word=classification.signal_word if classification else None,
        ghs_code=ghs_code.ghs_code if ghs_code else None,
        pictogram_url=ghs_code.pictogram_url if ghs_code else None,
        hazard_statement_code=statement.hazard_statement_code if statement else None,
        hazard_statement_text=statement.hazard_statement_text if statement else None,
    )


def get_sds_ghs_classifications(db: Session, sds_id: UUID) -> List[SDSGHSClassificationOut]:
    _require_sds(db, sds_id)
    rows = (
        db.query(SDSGHSClassification)
        .options(
            joinedload(SDSGHSClassification.hazard_classification)
            .joinedload(GHSHazardClassification.ghs_code),
            joinedload(SDSGHSClassification.hazard_classification)
            .joinedload(GHSHazardClassification.hazard_statement),
        )
        .filter(SDSGHSClassification.sds_id == sds_id)
        .all()
    )
    return [ghs_link_to_out(r) for r in rows]


def link_ghs_classification(db: Session, sds_id: UUID, payload: SDSGHSLink, user_id: Optional[UUID] = None) -> SDSGHSClassificationOut:
    _require_sds(db, sds_id)
    exists = db.query(GHSHazardClassification.hazard_classification_id).filter(
        GHSHazardClassification.hazard_classification_id == payload.hazard_classification_id).first()
    if not exists:
        return not_found_response("Hazard classification")

    duplicate = db.query(SDSGHSClassification).filter(
        SDSGHSClassification.sds_id == sds_id,
        SDSGHSClassification.hazard_classification_id == payload.hazard_classification_id,
    ).first()
    if duplicate:
        return error_response(
            message="Hazard classification already linked to this SDS",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=409
        )

    link = SDSGHSClassification(
        sds_id=sds_id,
        hazard_classification_id=payload.hazard_classification_id,
        updated_by=user_id,
    )
    db.add(link)
    db.commit()
    db.refresh(link)
    logger.info(f"Linked hazard classification {payload.hazard_classification_id} to SDS {sds_id}")
    return ghs_link_to_out(link)


def unlink_ghs_classification(db: Session, sds_id: UUID, sds_ghs_id: UUID) -> SDSGHSClassificationOut:
    link = db.query(SDSGHSClassification).filter(
        SDSGHSClassification.sds_id == sds_id,
        SDSGHSClassification.sds_ghs_id == sds_ghs_id,
    ).first()
    if not link:
        return not_found_response("SDS hazard classification")

    deleted = ghs_link_to_out(link)
    db.delete(link)
    db.commit()
    logger.info(f"Unlinked hazard classification {sds_ghs_id} from SDS {sds_id}")
    return deleted

# ---------------- Precautionary statements ----------------


def precautionary_link_to_out(link: SDSPrecautionaryStatement) -> SDSPrecautionaryStatementOut:
    statement = link.precautionary_statement
    return SDSPrecautionaryStatementOut(
        sds_precautionary_statement_id=link.sds_precautionary_statement_id,
        sds_id=link.sds_id,
        precautionary_statement_id=link.precautionary_statement_id,
        code=statement.code if statement else None,
        statement=statement.statement if statement else None,
        type=statement.type if statement else None,
    )


def get_sds_precautionary_statements(db: Session, sds_id: UUID) -> List[SDSPrecautionaryStatementOut]:
    _require_sds(db, sds_id)
    rows = (
        db.query(SDSPrecautionaryStatement)
        .join(PrecautionaryStatement,
              SDSPrecautionaryStatement.precautionary_statement_id
              == PrecautionaryStatement.precautionary_statement_id)
        .options(joinedload(SDSPrecautionaryStatement.precautionary_statement))
        .filter(SDSPrecautionaryStatement.sds_id == sds_id)
        .order_by(PrecautionaryStatement.code.asc())
        .all()
    )
    return [precautionary_link_to_out(r) for r in rows]


def link_precautionary_statement(db: Session, sds_id: UUID, payload: SDSPrecautionaryLink, user_id: Optional[UUID] = None) -> SDSPrecautionaryStatementOut:
    _require_sds(db, sds_id)
    exists = db.query(PrecautionaryStatement.precautionary_statement_id).filter(
        PrecautionaryStatement.precautionary_statement_id == payload.precautionary_statement_id).first()
    if not exists:
        return not_found_response("Precautionary statement")

    duplicate = db.query(SDSPrecautionaryStatement).filter(
        SDSPrecautionaryStatement.sds_id == sds_id,
        SDSPrecautionaryStatement.precautionary_statement_id == payload.precautionary_statement_id,
    ).first()
    if duplicate:
        return error_response(
            message="Precautionary statement already linked to this SDS",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=409
        )

    link = SDSPrecautionaryStatement(
        sds_id=sds_id,
        precautionary_statement_id=payload.precautionary_statement_id,
        updated_by=user_id,
    )
    db.add(link)
    db.commit()
    db.refresh(link)
    logger.info(f"Linked precautionary statement {payload.precautionary_statement_id} to SDS {sds_id}")
    return precautionary_link_to_out(link)


def unlink_precautionary_statement(db: Session, sds_id: UUID, link_id: UUID) -> SDSPrecautionaryStatementOut:
    link = db.query(SDSPrecautionaryStatement).filter(
        SDSPrecautionaryStatement.sds_id == sds_id,
        SDSPrecautionaryStatement.sds_precautionary_statement_id == link_id,
    ).first()
    if not link:
        return not_found_response("SDS precautionary statement")

    deleted = precautionary_link_to_out(link)
    db.delete(link)
    db.commit()
    logger.info(f"Unlinked precautionary statement {link_id} from SDS {sds_id}")
    return deleted

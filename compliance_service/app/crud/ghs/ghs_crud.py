# app/crud/ghs/ghs_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import split_filter
from shared.utils.app_status_code import AppStatusCode
from ...models.ghs.ghs_codes import GHSCode
from ...models.ghs.ghs_hazard_classifications import GHSHazardClassification
from ...models.ghs.statements import HazardStatement, PrecautionaryStatement
from ...schemas.ghs.ghs_schemas import (
    GHSCodeCreate, GHSCodeOut, GHSCodeUpdate, HazardStatementCreate, HazardStatementOut,
    PrecautionaryStatementCreate, PrecautionaryStatementOut, StatementRequest)

logger = logging.getLogger(__name__)


def _duplicate(message: str):
    return error_response(
        message=message,
        status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
        http_status=409
    )

# ---------------- GHS codes ----------------


def get_ghs_codes(db: Session, search: Optional[str] = None) -> List[GHSCodeOut]:
    query = db.query(GHSCode)
    if search:
        query = query.filter(GHSCode.ghs_code.ilike(f"%{search}%"))
    return [GHSCodeOut.model_validate(r) for r in query.order_by(GHSCode.ghs_code.asc()).all()]


def get_ghs_code_by_id(db: Session, ghs_code_id: UUID) -> Optional[GHSCode]:
    return db.query(GHSCode).filter(GHSCode.ghs_code_id == ghs_code_id).first()


def create_ghs_code(db: Session, payload: GHSCodeCreate, user_id: Optional[UUID] = None) -> GHSCodeOut:
    if db.query(GHSCode).filter(func.upper(GHSCode.ghs_code) == payload.ghs_code.upper()).first():
        return _duplicate(f"GHS code {payload.ghs_code} already exists")

    db_code = GHSCode(ghs_code=payload.ghs_code.upper(),
                      pictogram_url=payload.pictogram_url, updated_by=user_id)
    db.add(db_code)
    db.commit()
    db.refresh(db_code)
    logger.info(f"Created GHS code {db_code.ghs_code}")
    return GHSCodeOut.model_validate(db_code)


def update_ghs_code(db: Session, ghs_code_id: UUID, payload: GHSCodeUpdate,
                    user_id: Optional[UUID] = None) -> GHSCodeOut:
    db_code = get_ghs_code_by_id(db, ghs_code_id)
    if not db_code:
        return not_found_response("GHS code")

    update_data = payload.model_dump(exclude_unset=True)
    if update_data.get("ghs_code"):
        update_data["ghs_code"] = update_data["ghs_code"].upper()
        clash = db.query(GHSCode).filter(
            GHSCode.ghs_code == update_data["ghs_code"],
            GHSCode.ghs_code_id != ghs_code_id).first()
        if clash:
            return _duplicate(f"GHS code {update_data['ghs_code']} already exists")
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_code, key, value)
    db.commit()
    db.refresh(db_code)
    logger.info(f"Updated GHS code {ghs_code_id}")
    return GHSCodeOut.model_validate(db_code)


def delete_ghs_code(db: Session, ghs_code_id: UUID) -> GHSCodeOut:
    db_code = get_ghs_code_by_id(db, ghs_code_id)
    if not db_code:
        return not_found_response("GHS code")

    in_use = db.query(func.count(GHSHazardClassification.hazard_classification_id)).filter(
        GHSHazardClassification.ghs_code_id == ghs_code_id).scalar()
    if in_use:
        return error_response(
            message="Cannot delete the GHS code as hazard classifications use it",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = GHSCodeOut.model_validate(db_code)
    db.delete(db_code)
    db.commit()
    logger.info(f"Deleted GHS code {ghs_code_id}")
    return deleted

# ---------------- Hazard statements ----------------


def get_hazard_statements(db: Session, params: StatementRequest) -> List[HazardStatementOut]:
    query = db.query(HazardStatement)
    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(or_(
            HazardStatement.hazard_statement_code.ilike(search_term),
            HazardStatement.hazard_statement_text.ilike(search_term),
        ))
    rows = query.order_by(HazardStatement.hazard_statement_code.asc()).all()
    return [HazardStatementOut.model_validate(r) for r in rows]


def create_hazard_statement(db: Session, payload: HazardStatementCreate,
                            user_id: Optional[UUID] = None) -> HazardStatementOut:
    exists = db.query(HazardStatement).filter(
        HazardStatement.hazard_statement_code == payload.hazard_statement_code).first()
    if exists:
        return _duplicate(f"Hazard statement {payload.hazard_statement_code} already exists")

    row = HazardStatement(updated_by=user_id, **payload.model_dump())
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Created hazard statement {row.hazard_statement_code}")
    return HazardStatementOut.model_validate(row)

# ---------------- Precautionary statements ----------------


def get_precautionary_statements(db: Session, params: StatementRequest) -> List[PrecautionaryStatementOut]:
    query = db.query(PrecautionaryStatement)
    types = split_filter(params.type)
    if types:
        query = query.filter(PrecautionaryStatement.type.in_(types))
    if params.search:
        search_term = f"%{params.search}%"
        query = query.filter(or_(
            PrecautionaryStatement.code.ilike(search_term),
            PrecautionaryStatement.statement.ilike(search_term),
        ))
    rows = query.order_by(PrecautionaryStatement.code.asc()).all()
    return [PrecautionaryStatementOut.model_validate(r) for r in rows]


def create_precautionary_statement(db: Session, payload: PrecautionaryStatementCreate,
                                   user_id: Optional[UUID] = None) -> PrecautionaryStatementOut:
    exists = db.query(PrecautionaryStatement).filter(
        PrecautionaryStatement.code == payload.code).first()
    if exists:
        return _duplicate(f"Precautionary statement {payload.code} already exists")

    row = PrecautionaryStatement(
        code=payload.code,
        statement=payload.statement,
        type=payload.type.value,
        updated_by=user_id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(f"Created precautionary statement {row.code}")
    return PrecautionaryStatementOut.model_validate(row)

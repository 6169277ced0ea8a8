# app/crud/master_data/master_data_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlalchemy.orm import Session

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...models.master_data.master_data import MasterData
from ...schemas.master_data.master_data_schemas import (
    MasterDataCreate, MasterDataListResponse, MasterDataOut, MasterDataRequest, MasterDataUpdate)

logger = logging.getLogger(__name__)

# ----------------- Build Filters for Master Data -----------------


def build_master_data_filters(params: MasterDataRequest):
    filters = []

    categories = split_filter(params.category)
    if categories:
        filters.append(MasterData.category.in_(categories))

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(MasterData.status.in_(statuses))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                MasterData.label.ilike(search_term),
                MasterData.category.ilike(search_term),
                MasterData.value.ilike(search_term),
            )
        )
    return filters


def get_master_data(db: Session, params: MasterDataRequest, is_export: bool = False) -> MasterDataListResponse:
    query = (
        db.query(MasterData)
        .filter(*build_master_data_filters(params))
        .order_by(MasterData.category.asc(), MasterData.sort_order.asc(), MasterData.label.asc())
    )
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return MasterDataListResponse(
        master_data=[MasterDataOut.model_validate(r) for r in rows], **meta)


def get_master_data_by_id(db: Session, master_data_id: UUID) -> Optional[MasterData]:
    return db.query(MasterData).filter(MasterData.id == master_data_id).first()


def get_categories(db: Session) -> List[str]:
    rows = db.query(MasterData.category).distinct().order_by(MasterData.category.asc()).all()
    return [r.category for r in rows]


def master_data_lookup(db: Session, category: str) -> List[Lookup]:
    rows = (
        db.query(MasterData.id, MasterData.label)
        .filter(MasterData.category == category, MasterData.status == "ACTIVE")
        .order_by(MasterData.sort_order.asc(), MasterData.label.asc())
        .all()
    )
    return [Lookup(id=r.id, name=r.label) for r in rows]


def find_master_data_id(db: Session, category: str, label: str) -> Optional[UUID]:
    row = (
        db.query(MasterData.id)
        .filter(MasterData.category == category, MasterData.label == label)
        .first()
    )
    return row.id if row else None


def ensure_category(db: Session, master_data_id: Optional[UUID], category: str, field: str):
    """Reject a foreign key that points at master data of another category."""
    if master_data_id is None:
        return
    row = get_master_data_by_id(db, master_data_id)
    if not row or row.category != category:
        error_response(
            message=f"{field} must reference {category} master data",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )


def create_master_data(db: Session, payload: MasterDataCreate) -> MasterData:
    data = payload.model_dump(mode="json")
    data["category"] = data["category"].upper()
    db_row = MasterData(**data)
    db.add(db_row)
    db.commit()
    db.refresh(db_row)
    logger.info(f"Created master data {db_row.category}/{db_row.label}")
    return db_row


def update_master_data(db: Session, master_data_id: UUID, payload: MasterDataUpdate) -> MasterData:
    db_row = get_master_data_by_id(db, master_data_id)
    if not db_row:
        return not_found_response("Master data")

    update_data = payload.model_dump(mode="json", exclude_unset=True)
    if update_data.get("category"):
        update_data["category"] = update_data["category"].upper()
    for key, value in update_data.items():
        setattr(db_row, key, value)

    db.commit()
    db.refresh(db_row)
    logger.info(f"Updated master data {master_data_id}")
    return db_row


def delete_master_data(db: Session, master_data_id: UUID) -> MasterDataOut:
    db_row = get_master_data_by_id(db, master_data_id)
    if not db_row:
        return not_found_response("Master data")

    deleted = MasterDataOut.model_validate(db_row)
    db.delete(db_row)
    db.commit()
    logger.info(f"Deleted master data {master_data_id}")
    return deleted

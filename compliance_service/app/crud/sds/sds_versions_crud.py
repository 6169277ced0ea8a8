# app/crud/sds/sds_versions_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import not_found_response
from ...models.sds.sds_versions import SDSVersion
from ...schemas.sds.sds_schemas import SDSVersionCreate, SDSVersionOut
from .sds_crud import get_sds_by_id

logger = logging.getLogger(__name__)


def get_sds_versions(db: Session, sds_id: UUID) -> List[SDSVersionOut]:
    if not get_sds_by_id(db, sds_id):
        return not_found_response("SDS")
    rows = (
        db.query(SDSVersion)
        .filter(SDSVersion.sds_id == sds_id)
        .order_by(SDSVersion.version_number.desc())
        .all()
    )
    return [SDSVersionOut.model_validate(r) for r in rows]


def add_sds_version(db: Session, sds_id: UUID, version: SDSVersionCreate, user_id: Optional[UUID] = None) -> SDSVersionOut:
    """Store a new document version; it becomes the current file of the SDS."""
    db_sds = get_sds_by_id(db, sds_id)
    if not db_sds:
        return not_found_response("SDS")

    latest = db.query(func.max(SDSVersion.version_number)).filter(
        SDSVersion.sds_id == sds_id).scalar() or 0

    db_version = SDSVersion(
        sds_id=sds_id,
        version_number=latest + 1,
        uploaded_by=user_id,
        **version.model_dump()
    )
    db.add(db_version)

    db_sds.current_file_path = version.file_path
    db_sds.current_file_name = version.file_name
    db_sds.current_file_size = version.file_size
    db_sds.current_content_type = version.content_type
    db_sds.updated_by = user_id

    db.commit()
    db.refresh(db_version)
    logger.info(f"Added version {db_version.version_number} to SDS {sds_id}")
    return SDSVersionOut.model_validate(db_version)

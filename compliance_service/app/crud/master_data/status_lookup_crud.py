# app/crud/master_data/status_lookup_crud.py
from typing import List, Optional
from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...models.master_data.status_lookup import StatusLookup


def get_status_lookup(db: Session, category: Optional[str] = None) -> List[StatusLookup]:
    query = db.query(StatusLookup)
    if category:
        query = query.filter(StatusLookup.category == category)
    return query.order_by(StatusLookup.category.asc(), StatusLookup.status_name.asc()).all()


def find_status_id(db: Session, status_name: str, category: str) -> Optional[int]:
    row = (
        db.query(StatusLookup.id)
        .filter(StatusLookup.category == category,
                StatusLookup.status_name == status_name.upper())
        .first()
    )
    return row.id if row else None


def get_status_id(db: Session, status_name: str, category: str) -> int:
    status_id = find_status_id(db, status_name, category)
    if status_id is None:
        return error_response(
            message=f"Status {status_name} not configured for {category}",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )
    return status_id

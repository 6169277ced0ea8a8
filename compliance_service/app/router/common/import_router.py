# app/router/common/import_router.py
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import ImportResult
from ...crud.common import import_crud as crud

router = APIRouter(
    prefix="/api/import",
    tags=["Import"],
)


@router.post("/{type}", response_model=ImportResult)
def import_rows(
        type: str,
        rows: List[Dict[str, Any]] = Body(...),
        db: Session = Depends(get_db)):
    return crud.import_rows(db, type, rows)

# app/router/common/export_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import ExportRequestParams, ExportResponse
from ...crud.common import export_crud as crud

router = APIRouter(
    prefix="/api/export",
    tags=["Export"],
)


@router.get("/", response_model=ExportResponse)
def get_export_data(
        type: str,
        params: ExportRequestParams = Depends(),
        db: Session = Depends(get_db)):
    return crud.get_export_data(db, type, params)

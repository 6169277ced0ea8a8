# app/router/system/system_router.py
from typing import Optional
from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shared.core.auth import get_current_user_id
from shared.core.database import get_db
from ...crud.system import dashboard_crud, system_settings_crud
from ...schemas.system.system_settings_schemas import (
    DashboardOverview, SystemSettingsOut, SystemSettingsUpdate)

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/settings", response_model=SystemSettingsOut)
def get_system_settings(db: Session = Depends(get_db)):
    return system_settings_crud.get_system_settings(db)


@router.put("/settings", response_model=SystemSettingsOut)
def upsert_system_settings(
    payload: SystemSettingsUpdate,
    db: Session = Depends(get_db),
    user_id: Optional[UUID] = Depends(get_current_user_id)
):
    return system_settings_crud.upsert_system_settings(db, payload, user_id)


@router.get("/dashboard", response_model=DashboardOverview)
def get_dashboard_overview(db: Session = Depends(get_db)):
    return dashboard_crud.get_dashboard_overview(db)

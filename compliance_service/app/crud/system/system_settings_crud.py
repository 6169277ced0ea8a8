# app/crud/system/system_settings_crud.py
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...models.system.system_settings import SystemSettings
from ...schemas.system.system_settings_schemas import SystemSettingsOut, SystemSettingsUpdate

logger = logging.getLogger(__name__)


def get_system_settings(db: Session) -> SystemSettingsOut:
    row = db.query(SystemSettings).first()
    if not row:
        return SystemSettingsOut()
    return SystemSettingsOut.model_validate(row)


def upsert_system_settings(db: Session, payload: SystemSettingsUpdate,
                           user_id: Optional[UUID] = None) -> SystemSettingsOut:
    row = db.query(SystemSettings).first()
    data = payload.model_dump(exclude_unset=True)

    if row is None:
        if not (data.get("customer_name") or "").strip() or not data.get("customer_email"):
            return error_response(
                message="Customer name and email are required",
                status_code=AppStatusCode.REQUIRED_VALIDATION_ERROR,
                http_status=400
            )
        row = SystemSettings(updated_by=user_id, **data)
        db.add(row)
        logger.info("Created system settings")
    else:
        for key, value in data.items():
            setattr(row, key, value)
        row.updated_by = user_id
        logger.info("Updated system settings")

    db.commit()
    db.refresh(row)
    return SystemSettingsOut.model_validate(row)

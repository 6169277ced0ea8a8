import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from compliance_service.app.models.users.users import User
from shared.core.database import get_db
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode

logger = logging.getLogger(__name__)


def get_current_user_id(
    x_user_email: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[UUID]:
    """
    Resolve the acting user for `updated_by` columns.

    Sign-in happens upstream; the caller forwards the signed-in e-mail in
    X-User-Email. Without the header writes are recorded anonymously.
    """
    if not x_user_email:
        return None

    user = db.query(User.id).filter(
        User.email == x_user_email.strip().lower()).first()
    if not user:
        logger.error(f"Unknown user e-mail on request: {x_user_email}")
        return error_response(
            message="Could not find user",
            status_code=AppStatusCode.AUTHENTICATION_USER_INVALID,
            http_status=401
        )
    return user.id

# app/crud/site_registers/stock_movements_crud.py
import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import error_response, not_found_response
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.site_register_enum import StockAction
from ...models.site_registers.stock_movements import StockMovement
from ...schemas.site_registers.site_registers_schemas import (
    StockMovementCreate, StockMovementOut, StockMovementResult)
from ..master_data.master_data_crud import ensure_category
from .site_registers_crud import get_site_register_by_id

logger = logging.getLogger(__name__)


def apply_stock_action(current_level, action: StockAction, quantity) -> Decimal:
    """New stock level after a movement; a decrease may not take it below zero."""
    current = Decimal(str(current_level or 0))
    qty = Decimal(str(quantity))

    if action == StockAction.INCREASE:
        return current + qty
    if action == StockAction.DECREASE:
        if qty > current:
            raise ValueError(
                f"Cannot decrease stock by {qty}, only {current} available")
        return current - qty
    return qty


def movement_to_out(movement: StockMovement) -> StockMovementOut:
    return StockMovementOut(
        id=movement.id,
        site_register_id=movement.site_register_id,
        movement_date=movement.movement_date,
        action=movement.action,
        reason_id=movement.reason_id,
        reason=movement.reason.label if movement.reason else None,
        quantity=movement.quantity,
        comments=movement.comments,
        created_at=movement.created_at,
    )


def get_stock_movements(db: Session, register_id: UUID) -> List[StockMovementOut]:
    if not get_site_register_by_id(db, register_id):
        return not_found_response("Site register")
    rows = (
        db.query(StockMovement)
        .options(joinedload(StockMovement.reason))
        .filter(StockMovement.site_register_id == register_id)
        .order_by(StockMovement.movement_date.desc())
        .all()
    )
    return [movement_to_out(r) for r in rows]


def add_stock_movement(db: Session, register_id: UUID, movement: StockMovementCreate,
                       user_id: Optional[UUID] = None) -> StockMovementResult:
    db_register = get_site_register_by_id(db, register_id)
    if not db_register:
        return not_found_response("Site register")
    ensure_category(db, movement.reason_id, MasterDataCategory.STOCK_REASON.value, "reason_id")

    try:
        new_level = apply_stock_action(
            db_register.current_stock_level, movement.action, movement.quantity)
    except ValueError as e:
        return error_response(
            message=str(e),
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )

    db_movement = StockMovement(
        site_register_id=register_id,
        movement_date=movement.movement_date or datetime.now(timezone.utc),
        action=movement.action,
        reason_id=movement.reason_id,
        quantity=movement.quantity,
        comments=movement.comments,
        updated_by=user_id,
    )
    db.add(db_movement)
    db_register.current_stock_level = new_level
    db_register.updated_by = user_id

    db.commit()
    db.refresh(db_movement)
    db.refresh(db_register)
    logger.info(
        f"Stock {movement.action.value} of {movement.quantity} on site register {register_id}, "
        f"level now {db_register.current_stock_level}")
    return StockMovementResult(
        movement=movement_to_out(db_movement),
        current_stock_level=db_register.current_stock_level,
    )

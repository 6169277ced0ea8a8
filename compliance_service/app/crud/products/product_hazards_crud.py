# app/crud/products/product_hazards_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from shared.helpers.json_response_helper import not_found_response
from ...enum.master_data_enum import MasterDataCategory
from ...models.products.hazards_and_controls import HazardAndControl
from ...schemas.products.products_schemas import (
    ProductHazardCreate, ProductHazardOut, ProductHazardUpdate)
from ..master_data.master_data_crud import ensure_category
from .products_crud import get_product_by_id

logger = logging.getLogger(__name__)


def hazard_to_out(hazard: HazardAndControl) -> ProductHazardOut:
    return ProductHazardOut(
        hazard_control_id=hazard.hazard_control_id,
        product_id=hazard.product_id,
        hazard_type=hazard.hazard_type,
        hazard_type_name=hazard.hazard_type_ref.label if hazard.hazard_type_ref else None,
        hazard=hazard.hazard,
        control=hazard.control,
        source=hazard.source,
        created_at=hazard.created_at,
    )


def get_product_hazards(db: Session, product_id: UUID) -> List[ProductHazardOut]:
    if not get_product_by_id(db, product_id):
        return not_found_response("Product")
    rows = (
        db.query(HazardAndControl)
        .options(joinedload(HazardAndControl.hazard_type_ref))
        .filter(HazardAndControl.product_id == product_id)
        .order_by(HazardAndControl.created_at.asc())
        .all()
    )
    return [hazard_to_out(r) for r in rows]


def _get_hazard(db: Session, product_id: UUID, hazard_control_id: UUID) -> Optional[HazardAndControl]:
    return db.query(HazardAndControl).filter(
        HazardAndControl.product_id == product_id,
        HazardAndControl.hazard_control_id == hazard_control_id,
    ).first()


def add_product_hazard(db: Session, product_id: UUID, hazard: ProductHazardCreate, user_id: Optional[UUID] = None) -> ProductHazardOut:
    if not get_product_by_id(db, product_id):
        return not_found_response("Product")
    ensure_category(db, hazard.hazard_type, MasterDataCategory.HAZARD_TYPE.value, "hazard_type")

    db_hazard = HazardAndControl(product_id=product_id, updated_by=user_id, **hazard.model_dump())
    db.add(db_hazard)
    db.commit()
    db.refresh(db_hazard)
    logger.info(f"Added hazard {db_hazard.hazard_control_id} to product {product_id}")
    return hazard_to_out(db_hazard)


def update_product_hazard(db: Session, product_id: UUID, hazard_control_id: UUID,
                          hazard: ProductHazardUpdate, user_id: Optional[UUID] = None) -> ProductHazardOut:
    db_hazard = _get_hazard(db, product_id, hazard_control_id)
    if not db_hazard:
        return not_found_response("Product hazard")

    update_data = hazard.model_dump(exclude_unset=True)
    if "hazard_type" in update_data:
        ensure_category(db, update_data["hazard_type"],
                        MasterDataCategory.HAZARD_TYPE.value, "hazard_type")
    update_data["updated_by"] = user_id
    for key, value in update_data.items():
        setattr(db_hazard, key, value)

    db.commit()
    db.refresh(db_hazard)
    logger.info(f"Updated product hazard {hazard_control_id}")
    return hazard_to_out(db_hazard)


def delete_product_hazard(db: Session, product_id: UUID, hazard_control_id: UUID) -> ProductHazardOut:
    db_hazard = _get_hazard(db, product_id, hazard_control_id)
    if not db_hazard:
        return not_found_response("Product hazard")

    deleted = hazard_to_out(db_hazard)
    db.delete(db_hazard)
    db.commit()
    logger.info(f"Deleted product hazard {hazard_control_id}")
    return deleted

# app/crud/site_registers/site_registers_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.status_enum import StatusCategory
from ...models.locations.locations import Location
from ...models.master_data.status_lookup import StatusLookup
from ...models.products.products import Product
from ...models.risk_assessments.risk_assessments import RiskAssessment
from ...models.site_registers.site_registers import SiteRegister
from ...schemas.site_registers.site_registers_schemas import (
    SiteRegisterCreate, SiteRegisterListResponse, SiteRegisterOut, SiteRegisterRequest,
    SiteRegisterUpdate)
from ..locations.locations_crud import get_descendant_ids, get_location_by_id
from ..master_data.master_data_crud import ensure_category
from ..master_data.status_lookup_crud import get_status_id
from ..products.products_crud import get_product_by_id

logger = logging.getLogger(__name__)


def site_register_to_out(register: SiteRegister) -> SiteRegisterOut:
    product = register.product
    location = register.location
    return SiteRegisterOut(
        id=register.id,
        location_id=register.location_id,
        location_name=location.name if location else None,
        location_path=location.full_path if location else None,
        product_id=register.product_id,
        product_name=register.override_product_name or (product.product_name if product else None),
        product_code=product.product_code if product else None,
        is_dg=bool(product.sds.is_dg) if product and product.sds else False,
        status=register.status_lookup.status_name if register.status_lookup else None,
        status_id=register.status_id,
        current_stock_level=register.current_stock_level,
        max_stock_level=register.max_stock_level,
        total_qty=register.total_qty,
        uom_id=register.uom_id,
        uom=register.uom.label if register.uom else None,
        exact_location=register.exact_location,
        override_product_name=register.override_product_name,
        storage_conditions=register.storage_conditions,
        placarding_required=bool(register.placarding_required),
        manifest_required=bool(register.manifest_required),
        fire_protection_required=bool(register.fire_protection_required),
        created_at=register.created_at,
    )

# ----------------- Build Filters for Site Registers -----------------


def build_site_register_filters(db: Session, params: SiteRegisterRequest):
    filters = []

    if params.location_id:
        filters.append(SiteRegister.location_id.in_(
            get_descendant_ids(db, params.location_id)))

    if params.product_id:
        filters.append(SiteRegister.product_id == params.product_id)

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(StatusLookup.status_name.in_(statuses))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Product.product_name.ilike(search_term),
                Product.product_code.ilike(search_term),
                SiteRegister.override_product_name.ilike(search_term),
                Location.full_path.ilike(search_term),
                SiteRegister.exact_location.ilike(search_term),
            )
        )
    return filters


def get_site_register_query(db: Session, params: SiteRegisterRequest):
    return (
        db.query(SiteRegister)
        .join(Product, SiteRegister.product_id == Product.id)
        .join(Location, SiteRegister.location_id == Location.id)
        .outerjoin(StatusLookup, SiteRegister.status_id == StatusLookup.id)
        .options(
            joinedload(SiteRegister.product).joinedload(Product.sds),
            joinedload(SiteRegister.location),
            joinedload(SiteRegister.status_lookup),
            joinedload(SiteRegister.uom),
        )
        .filter(*build_site_register_filters(db, params))
    )


def get_site_registers(db: Session, params: SiteRegisterRequest, is_export: bool = False) -> SiteRegisterListResponse:
    query = get_site_register_query(db, params).order_by(
        Location.full_path.asc(), Product.product_name.asc())
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return SiteRegisterListResponse(
        site_registers=[site_register_to_out(r) for r in rows], **meta)


def get_site_register_by_id(db: Session, register_id: UUID) -> Optional[SiteRegister]:
    return db.query(SiteRegister).filter(SiteRegister.id == register_id).first()


def get_site_register(db: Session, register_id: UUID) -> SiteRegisterOut:
    register = get_site_register_by_id(db, register_id)
    if not register:
        return not_found_response("Site register")
    return site_register_to_out(register)


def site_register_lookup(db: Session, search: Optional[str] = None) -> List[Lookup]:
    query = (
        db.query(SiteRegister.id, Product.product_name,
                 SiteRegister.override_product_name, Location.full_path)
        .join(Product, SiteRegister.product_id == Product.id)
        .join(Location, SiteRegister.location_id == Location.id)
    )
    if search:
        search_term = f"%{search}%"
        query = query.filter(or_(
            Product.product_name.ilike(search_term),
            SiteRegister.override_product_name.ilike(search_term),
            Location.full_path.ilike(search_term),
        ))
    rows = query.order_by(Product.product_name.asc()).all()
    return [
        Lookup(id=r.id, name=f"{r.override_product_name or r.product_name} @ {r.full_path}")
        for r in rows
    ]


def _validate_references(db: Session, data: dict):
    if data.get("location_id") and not get_location_by_id(db, data["location_id"]):
        return not_found_response("Location")
    if data.get("product_id") and not get_product_by_id(db, data["product_id"]):
        return not_found_response("Product")
    ensure_category(db, data.get("uom_id"), MasterDataCategory.UOM.value, "uom_id")


def create_site_register(db: Session, register: SiteRegisterCreate, user_id: Optional[UUID] = None) -> SiteRegisterOut:
    data = register.model_dump(exclude={"status"})
    _validate_references(db, data)
    data["status_id"] = get_status_id(
        db, register.status.value, StatusCategory.SITE_REGISTER.value)
    data["updated_by"] = user_id

    db_register = SiteRegister(**data)
    db.add(db_register)
    db.commit()
    db.refresh(db_register)
    logger.info(f"Created site register {db_register.id}")
    return site_register_to_out(db_register)


def update_site_register(db: Session, register_id: UUID, register: SiteRegisterUpdate,
                         user_id: Optional[UUID] = None) -> SiteRegisterOut:
    db_register = get_site_register_by_id(db, register_id)
    if not db_register:
        return not_found_response("Site register")

    update_data = register.model_dump(exclude_unset=True, exclude={"status"})
    _validate_references(db, update_data)
    if register.status is not None:
        update_data["status_id"] = get_status_id(
            db, register.status.value, StatusCategory.SITE_REGISTER.value)
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_register, key, value)

    db.commit()
    db.refresh(db_register)
    logger.info(f"Updated site register {register_id}")
    return site_register_to_out(db_register)


def delete_site_register(db: Session, register_id: UUID) -> SiteRegisterOut:
    db_register = get_site_register_by_id(db, register_id)
    if not db_register:
        return not_found_response("Site register")

    related = db.query(func.count(RiskAssessment.id)).filter(
        RiskAssessment.site_register_record_id == register_id).scalar()
    if related:
        return error_response(
            message="Cannot delete the site register as risk assessments reference it",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = site_register_to_out(db_register)
    db.delete(db_register)
    db.commit()
    logger.info(f"Deleted site register {register_id}")
    return deleted

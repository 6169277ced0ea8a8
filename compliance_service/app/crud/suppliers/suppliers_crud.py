# app/crud/suppliers/suppliers_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...enum.status_enum import StatusCategory
from ...models.master_data.status_lookup import StatusLookup
from ...models.sds.sds import SDS
from ...models.suppliers.suppliers import Supplier
from ...schemas.suppliers.suppliers_schemas import (
    SupplierCreate, SupplierListResponse, SupplierOut, SupplierRequest, SupplierUpdate)
from ..master_data.status_lookup_crud import get_status_id

logger = logging.getLogger(__name__)


def supplier_to_out(supplier: Supplier) -> SupplierOut:
    return SupplierOut(
        id=supplier.id,
        supplier_name=supplier.supplier_name,
        contact_person=supplier.contact_person,
        email=supplier.email,
        phone_number=supplier.phone_number or "",
        address=supplier.address,
        status=supplier.status_lookup.status_name if supplier.status_lookup else None,
        status_id=supplier.status_id,
        created_at=supplier.created_at,
    )

# ----------------- Build Filters for Suppliers -----------------


def build_supplier_filters(params: SupplierRequest):
    filters = []

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(StatusLookup.status_name.in_(statuses))

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Supplier.supplier_name.ilike(search_term),
                Supplier.contact_person.ilike(search_term),
                Supplier.email.ilike(search_term),
                Supplier.phone_number.ilike(search_term),
                Supplier.address.ilike(search_term),
            )
        )
    return filters


def get_supplier_query(db: Session, params: SupplierRequest):
    return (
        db.query(Supplier)
        .outerjoin(StatusLookup, Supplier.status_id == StatusLookup.id)
        .options(joinedload(Supplier.status_lookup))
        .filter(*build_supplier_filters(params))
    )


def get_suppliers(db: Session, params: SupplierRequest, is_export: bool = False) -> SupplierListResponse:
    query = get_supplier_query(db, params).order_by(Supplier.supplier_name.asc())
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return SupplierListResponse(suppliers=[supplier_to_out(s) for s in rows], **meta)


def get_supplier_by_id(db: Session, supplier_id: UUID) -> Optional[Supplier]:
    return db.query(Supplier).filter(Supplier.id == supplier_id).first()


def get_supplier_by_name(db: Session, supplier_name: str) -> Optional[Supplier]:
    return (
        db.query(Supplier)
        .filter(func.lower(Supplier.supplier_name) == supplier_name.strip().lower())
        .first()
    )


def get_supplier(db: Session, supplier_id: UUID) -> SupplierOut:
    supplier = get_supplier_by_id(db, supplier_id)
    if not supplier:
        return not_found_response("Supplier")
    return supplier_to_out(supplier)


def supplier_lookup(db: Session) -> List[Lookup]:
    rows = db.query(Supplier.id, Supplier.supplier_name).order_by(
        Supplier.supplier_name.asc()).all()
    return [Lookup(id=r.id, name=r.supplier_name) for r in rows]


def create_supplier(db: Session, supplier: SupplierCreate, user_id: Optional[UUID] = None) -> SupplierOut:
    data = supplier.model_dump(exclude={"status"})
    data["status_id"] = get_status_id(db, supplier.status.value, StatusCategory.SUPPLIER.value)
    data["updated_by"] = user_id

    db_supplier = Supplier(**data)
    db.add(db_supplier)
    db.commit()
    db.refresh(db_supplier)
    logger.info(f"Created supplier {db_supplier.id} ({db_supplier.supplier_name})")
    return supplier_to_out(db_supplier)


def update_supplier(db: Session, supplier_id: UUID, supplier: SupplierUpdate, user_id: Optional[UUID] = None) -> SupplierOut:
    db_supplier = get_supplier_by_id(db, supplier_id)
    if not db_supplier:
        return not_found_response("Supplier")

    # Build update object only with provided fields
    update_data = supplier.model_dump(exclude_unset=True, exclude={"status"})
    if supplier.status is not None:
        update_data["status_id"] = get_status_id(
            db, supplier.status.value, StatusCategory.SUPPLIER.value)
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_supplier, key, value)

    db.commit()
    db.refresh(db_supplier)
    logger.info(f"Updated supplier {supplier_id}")
    return supplier_to_out(db_supplier)


def delete_supplier(db: Session, supplier_id: UUID) -> SupplierOut:
    db_supplier = get_supplier_by_id(db, supplier_id)
    if not db_supplier:
        return not_found_response("Supplier")

    related_sds = db.query(func.count(SDS.id)).filter(
        SDS.supplier_id == supplier_id).scalar()
    if related_sds:
        logger.info(f"Refusing to delete supplier {supplier_id}: {related_sds} related SDS")
        return error_response(
            message="Cannot delete the supplier as it has related SDS records",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = supplier_to_out(db_supplier)
    db.delete(db_supplier)
    db.commit()
    logger.info(f"Deleted supplier {supplier_id}")
    return deleted

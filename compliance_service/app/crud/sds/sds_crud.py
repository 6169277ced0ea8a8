# app/crud/sds/sds_crud.py
import logging
from datetime import date, timedelta
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.config import settings
from shared.core.schemas import Lookup
from shared.helpers.date_helper import derive_expiry_date
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, parse_bool_filter, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.status_enum import RecordStatus, SDSStatus, StatusCategory
from ...models.master_data.status_lookup import StatusLookup
from ...models.products.products import Product
from ...models.sds.sds import SDS
from ...models.suppliers.suppliers import Supplier
from ...schemas.sds.sds_schemas import (
    ExpiryDateOut, SDSCreate, SDSListResponse, SDSOut, SDSOverview, SDSRequest,
    SDSRequestCreate, SDSUpdate)
from ..master_data.master_data_crud import ensure_category
from ..master_data.status_lookup_crud import get_status_id
from ..suppliers.suppliers_crud import get_supplier_by_id, get_supplier_by_name

logger = logging.getLogger(__name__)

REQUEST_SOURCE = "Global Library"


def sds_to_out(sds: SDS) -> SDSOut:
    return SDSOut(
        id=sds.id,
        product_name=sds.product_name,
        product_id=sds.product_id,
        supplier_id=sds.supplier_id,
        supplier_name=sds.supplier.supplier_name if sds.supplier else None,
        is_dg=bool(sds.is_dg),
        other_names=sds.other_names,
        emergency_phone=sds.emergency_phone,
        issue_date=sds.issue_date,
        revision_date=sds.revision_date,
        expiry_date=sds.expiry_date,
        status=sds.status_lookup.status_name if sds.status_lookup else None,
        status_id=sds.status_id,
        current_file_path=sds.current_file_path,
        current_file_name=sds.current_file_name,
        current_file_size=sds.current_file_size,
        current_content_type=sds.current_content_type,
        un_number=sds.un_number,
        un_proper_shipping_name=sds.un_proper_shipping_name,
        hazchem_code=sds.hazchem_code,
        dg_class_id=sds.dg_class_id,
        dg_class=sds.dg_class.label if sds.dg_class else None,
        subsidiary_dg_class_id=sds.subsidiary_dg_class_id,
        subsidiary_dg_class=sds.subsidiary_dg_class.label if sds.subsidiary_dg_class else None,
        packing_group_id=sds.packing_group_id,
        packing_group=sds.packing_group.label if sds.packing_group else None,
        dg_subdivision_id=sds.dg_subdivision_id,
        dg_subdivision=sds.dg_subdivision.label if sds.dg_subdivision else None,
        source=sds.source,
        request_supplier_name=sds.request_supplier_name,
        request_supplier_details=sds.request_supplier_details,
        request_information=sds.request_information,
        request_date=sds.request_date,
        requested_by=sds.requested_by,
        created_at=sds.created_at,
    )


def get_expiry_date(issue_date: date) -> ExpiryDateOut:
    return ExpiryDateOut(issue_date=issue_date, expiry_date=derive_expiry_date(issue_date))

# ----------------- Build Filters for SDS -----------------


def build_date_filter(params: SDSRequest):
    if not params.date_field or not params.date_type or not params.date_from:
        return None

    column = SDS.issue_date if params.date_field == "issue_date" else SDS.expiry_date
    if params.date_type == "on":
        return column == params.date_from
    if params.date_type == "after":
        return column > params.date_from
    if params.date_type == "before":
        return column < params.date_from
    # between is inclusive; without an upper bound it behaves like "on or after"
    if params.date_to:
        return column.between(params.date_from, params.date_to)
    return column >= params.date_from


def build_sds_filters(params: SDSRequest):
    filters = []

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(StatusLookup.status_name.in_(statuses))

    dg_classes = split_filter(params.dg_class_id)
    if dg_classes:
        filters.append(SDS.dg_class_id.in_([UUID(d) for d in dg_classes]))

    suppliers = split_filter(params.supplier_id)
    if suppliers:
        filters.append(SDS.supplier_id.in_([UUID(s) for s in suppliers]))

    is_dg = parse_bool_filter(params.is_dg)
    if is_dg is not None:
        filters.append(SDS.is_dg == is_dg)

    date_filter = build_date_filter(params)
    if date_filter is not None:
        filters.append(date_filter)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                SDS.product_name.ilike(search_term),
                SDS.product_id.ilike(search_term),
                SDS.other_names.ilike(search_term),
                SDS.un_number.ilike(search_term),
                Supplier.supplier_name.ilike(search_term),
            )
        )
    return filters


def get_sds_query(db: Session, params: SDSRequest):
    return (
        db.query(SDS)
        .outerjoin(Supplier, SDS.supplier_id == Supplier.id)
        .outerjoin(StatusLookup, SDS.status_id == StatusLookup.id)
        .options(
            joinedload(SDS.supplier),
            joinedload(SDS.status_lookup),
            joinedload(SDS.dg_class),
            joinedload(SDS.subsidiary_dg_class),
            joinedload(SDS.packing_group),
            joinedload(SDS.dg_subdivision),
        )
        .filter(*build_sds_filters(params))
    )


def get_sds_list(db: Session, params: SDSRequest, is_export: bool = False) -> SDSListResponse:
    query = get_sds_query(db, params).order_by(SDS.product_name.asc())
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return SDSListResponse(sds=[sds_to_out(s) for s in rows], **meta)


def get_sds_by_id(db: Session, sds_id: UUID) -> Optional[SDS]:
    return db.query(SDS).filter(SDS.id == sds_id).first()


def get_sds(db: Session, sds_id: UUID) -> SDSOut:
    sds = get_sds_by_id(db, sds_id)
    if not sds:
        return not_found_response("SDS")
    return sds_to_out(sds)


def sds_lookup(db: Session, active_only: bool = True) -> List[Lookup]:
    query = db.query(SDS.id, SDS.product_name, SDS.product_id)
    if active_only:
        query = query.join(StatusLookup, SDS.status_id == StatusLookup.id).filter(
            StatusLookup.status_name == SDSStatus.ACTIVE.value)
    rows = query.order_by(SDS.product_name.asc()).all()
    return [Lookup(id=r.id, name=f"{r.product_name} ({r.product_id})") for r in rows]


def _validate_references(db: Session, data: dict):
    if data.get("supplier_id") and not get_supplier_by_id(db, data["supplier_id"]):
        return not_found_response("Supplier")
    ensure_category(db, data.get("dg_class_id"), MasterDataCategory.DG_CLASS.value, "dg_class_id")
    ensure_category(db, data.get("subsidiary_dg_class_id"),
                    MasterDataCategory.DG_CLASS.value, "subsidiary_dg_class_id")
    ensure_category(db, data.get("packing_group_id"),
                    MasterDataCategory.PACKING_GROUP.value, "packing_group_id")
    ensure_category(db, data.get("dg_subdivision_id"),
                    MasterDataCategory.DG_SUBDIVISION.value, "dg_subdivision_id")


def create_sds(db: Session, sds: SDSCreate, user_id: Optional[UUID] = None) -> SDSOut:
    data = sds.model_dump(exclude={"status"})
    _validate_references(db, data)

    if data.get("issue_date") and not data.get("expiry_date"):
        data["expiry_date"] = derive_expiry_date(data["issue_date"])

    data["status_id"] = get_status_id(db, sds.status.value, StatusCategory.SDS.value)
    data["updated_by"] = user_id

    db_sds = SDS(**data)
    db.add(db_sds)
    db.commit()
    db.refresh(db_sds)
    logger.info(f"Created SDS {db_sds.id} ({db_sds.product_name})")
    return sds_to_out(db_sds)


def update_sds(db: Session, sds_id: UUID, sds: SDSUpdate, user_id: Optional[UUID] = None) -> SDSOut:
    db_sds = get_sds_by_id(db, sds_id)
    if not db_sds:
        return not_found_response("SDS")

    update_data = sds.model_dump(exclude_unset=True, exclude={"status"})
    _validate_references(db, update_data)

    # a new issue date moves the expiry along unless an expiry came with it
    if update_data.get("issue_date") and "expiry_date" not in update_data \
            and update_data["issue_date"] != db_sds.issue_date:
        update_data["expiry_date"] = derive_expiry_date(update_data["issue_date"])

    if sds.status is not None:
        update_data["status_id"] = get_status_id(db, sds.status.value, StatusCategory.SDS.value)
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_sds, key, value)

    db.commit()
    db.refresh(db_sds)
    logger.info(f"Updated SDS {sds_id}")
    return sds_to_out(db_sds)


def delete_sds(db: Session, sds_id: UUID) -> SDSOut:
    db_sds = get_sds_by_id(db, sds_id)
    if not db_sds:
        return not_found_response("SDS")

    related_products = db.query(func.count(Product.id)).filter(
        Product.sds_id == sds_id).scalar()
    if related_products:
        return error_response(
            message="Cannot delete the SDS as products are linked to it",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = sds_to_out(db_sds)
    db.delete(db_sds)
    db.commit()
    logger.info(f"Deleted SDS {sds_id} with its versions")
    return deleted


def get_or_create_request_supplier(db: Session) -> Supplier:
    supplier = get_supplier_by_name(db, settings.REQUEST_SUPPLIER_NAME)
    if supplier:
        return supplier

    supplier = Supplier(
        supplier_name=settings.REQUEST_SUPPLIER_NAME,
        contact_person=settings.REQUEST_SUPPLIER_CONTACT,
        email=settings.REQUEST_SUPPLIER_EMAIL,
        address=settings.REQUEST_SUPPLIER_ADDRESS,
        status_id=get_status_id(db, RecordStatus.ACTIVE.value, StatusCategory.SUPPLIER.value),
    )
    db.add(supplier)
    db.flush()
    logger.info(f"Created request supplier {supplier.supplier_name}")
    return supplier


def request_sds(db: Session, request: SDSRequestCreate, user_id: Optional[UUID] = None) -> SDSOut:
    status_id = get_status_id(db, SDSStatus.REQUESTED.value, StatusCategory.SDS.value)
    try:
        supplier = get_or_create_request_supplier(db)
        db_sds = SDS(
            product_name=request.product_name,
            product_id=request.product_code,
            other_names=request.other_product_name,
            request_supplier_name=request.supplier_name,
            request_supplier_details=request.other_supplier_details,
            request_information=request.request_info,
            request_date=date.today(),
            requested_by=user_id,
            status_id=status_id,
            supplier_id=supplier.id,
            source=REQUEST_SOURCE,
            updated_by=user_id,
        )
        db.add(db_sds)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception("Error submitting SDS request")
        raise

    db.refresh(db_sds)
    logger.info(f"SDS requested for {db_sds.product_name} ({db_sds.id})")
    return sds_to_out(db_sds)


def get_sds_overview(db: Session) -> SDSOverview:
    today = date.today()
    warning_end = today + timedelta(days=settings.SDS_EXPIRY_WARNING_DAYS)

    def count_status(status_name: str) -> int:
        return (
            db.query(func.count(SDS.id))
            .join(StatusLookup, SDS.status_id == StatusLookup.id)
            .filter(StatusLookup.status_name == status_name)
            .scalar()
        ) or 0

    total = db.query(func.count(SDS.id)).scalar() or 0
    expired = db.query(func.count(SDS.id)).filter(SDS.expiry_date < today).scalar() or 0
    expiring_soon = db.query(func.count(SDS.id)).filter(
        SDS.expiry_date >= today, SDS.expiry_date <= warning_end).scalar() or 0

    return SDSOverview(
        total=total,
        active=count_status(SDSStatus.ACTIVE.value),
        requested=count_status(SDSStatus.REQUESTED.value),
        expired=expired,
        expiring_soon=expiring_soon,
    )

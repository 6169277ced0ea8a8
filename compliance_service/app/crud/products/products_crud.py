# app/crud/products/products_crud.py
import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, aliased, joinedload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, parse_bool_filter, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.status_enum import StatusCategory
from ...models.master_data.status_lookup import StatusLookup
from ...models.products.hazards_and_controls import HazardAndControl
from ...models.products.products import Product
from ...models.sds.sds import SDS
from ...models.site_registers.site_registers import SiteRegister
from ...models.suppliers.suppliers import Supplier
from ...schemas.products.products_schemas import (
    ProductCreate, ProductDuplicate, ProductListResponse, ProductOut, ProductRequest, ProductUpdate)
from ..master_data.master_data_crud import ensure_category
from ..master_data.status_lookup_crud import get_status_id
from ..sds.sds_crud import get_sds_by_id

logger = logging.getLogger(__name__)

# copied by the duplicate action besides name, code and SDS
COPY_FIELDS = (
    "brand_name", "unit", "uom_id", "unit_size", "description", "product_set",
    "aerosol", "cryogenic_fluid", "other_names", "uses",
    "product_status_id", "approval_status_id",
)


def product_to_out(product: Product) -> ProductOut:
    sds = product.sds
    return ProductOut(
        id=product.id,
        product_name=product.product_name,
        product_code=product.product_code,
        brand_name=product.brand_name,
        uom_id=product.uom_id,
        uom=product.uom.label if product.uom else None,
        unit_size=product.unit_size,
        description=product.description,
        product_set=bool(product.product_set),
        aerosol=bool(product.aerosol),
        cryogenic_fluid=bool(product.cryogenic_fluid),
        other_names=product.other_names,
        uses=product.uses,
        sds_id=product.sds_id,
        sds_product_name=sds.product_name if sds else None,
        is_dg=bool(sds.is_dg) if sds else False,
        dg_class=sds.dg_class.label if sds and sds.dg_class else None,
        packing_group=sds.packing_group.label if sds and sds.packing_group else None,
        supplier_id=sds.supplier_id if sds else None,
        supplier_name=sds.supplier.supplier_name if sds and sds.supplier else None,
        status=product.product_status.status_name if product.product_status else None,
        product_status_id=product.product_status_id,
        approval_status=product.approval_status.status_name if product.approval_status else None,
        approval_status_id=product.approval_status_id,
        created_at=product.created_at,
    )

# ----------------- Build Filters for Products -----------------


def build_product_filters(params: ProductRequest, product_status):
    filters = []

    suppliers = split_filter(params.supplier_id)
    if suppliers:
        filters.append(SDS.supplier_id.in_([UUID(s) for s in suppliers]))

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(product_status.status_name.in_(statuses))

    dg_classes = split_filter(params.dg_class_id)
    if dg_classes:
        filters.append(SDS.dg_class_id.in_([UUID(d) for d in dg_classes]))

    is_dg = parse_bool_filter(params.is_dg)
    if is_dg is not None:
        filters.append(SDS.is_dg == is_dg)

    if params.sds_id:
        filters.append(Product.sds_id == params.sds_id)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Product.product_name.ilike(search_term),
                Product.product_code.ilike(search_term),
                Product.brand_name.ilike(search_term),
                Product.other_names.ilike(search_term),
                Supplier.supplier_name.ilike(search_term),
            )
        )
    return filters


def get_product_query(db: Session, params: ProductRequest):
    product_status = aliased(StatusLookup)
    return (
        db.query(Product)
        .outerjoin(SDS, Product.sds_id == SDS.id)
        .outerjoin(Supplier, SDS.supplier_id == Supplier.id)
        .outerjoin(product_status, Product.product_status_id == product_status.id)
        .options(
            joinedload(Product.uom),
            joinedload(Product.product_status),
            joinedload(Product.approval_status),
            joinedload(Product.sds).joinedload(SDS.supplier),
            joinedload(Product.sds).joinedload(SDS.dg_class),
            joinedload(Product.sds).joinedload(SDS.packing_group),
        )
        .filter(*build_product_filters(params, product_status))
    )


def get_products(db: Session, params: ProductRequest, is_export: bool = False) -> ProductListResponse:
    query = get_product_query(db, params).order_by(Product.product_name.asc())
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return ProductListResponse(products=[product_to_out(p) for p in rows], **meta)


def get_product_by_id(db: Session, product_id: UUID) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def get_product(db: Session, product_id: UUID) -> ProductOut:
    product = get_product_by_id(db, product_id)
    if not product:
        return not_found_response("Product")
    return product_to_out(product)


def product_lookup(db: Session) -> List[Lookup]:
    rows = db.query(Product.id, Product.product_name, Product.product_code).order_by(
        Product.product_name.asc()).all()
    return [Lookup(id=r.id, name=f"{r.product_name} ({r.product_code})") for r in rows]


def find_duplicate_product(db: Session, product_name: str, product_code: str, sds_id: UUID,
                           exclude_id: Optional[UUID] = None) -> Optional[Product]:
    query = db.query(Product).filter(
        Product.product_name == product_name,
        Product.product_code == product_code,
        Product.sds_id == sds_id,
    )
    if exclude_id:
        query = query.filter(Product.id != exclude_id)
    return query.first()


def check_duplicate_product(db: Session, product_name: str, product_code: str, sds_id: UUID,
                            exclude_id: Optional[UUID] = None):
    if find_duplicate_product(db, product_name, product_code, sds_id, exclude_id):
        logger.info(f"Duplicate product rejected: {product_name} / {product_code} / {sds_id}")
        return error_response(
            message="A product with the same name, code and SDS already exists",
            status_code=AppStatusCode.DUPLICATE_ADD_ERROR,
            http_status=409
        )


def _validate_references(db: Session, data: dict):
    if data.get("sds_id") and not get_sds_by_id(db, data["sds_id"]):
        return not_found_response("SDS")
    ensure_category(db, data.get("uom_id"), MasterDataCategory.UOM.value, "uom_id")


def create_product(db: Session, product: ProductCreate, user_id: Optional[UUID] = None) -> ProductOut:
    data = product.model_dump(exclude={"status", "approval_status"})
    _validate_references(db, data)
    check_duplicate_product(db, product.product_name, product.product_code, product.sds_id)

    data["product_status_id"] = get_status_id(
        db, product.status.value, StatusCategory.PRODUCT_STATUS.value)
    data["approval_status_id"] = get_status_id(
        db, product.approval_status.value, StatusCategory.PRODUCT_APPROVAL.value)
    data["updated_by"] = user_id

    db_product = Product(**data)
    db.add(db_product)
    db.commit()
    db.refresh(db_product)
    logger.info(f"Created product {db_product.id} ({db_product.product_name})")
    return product_to_out(db_product)


def update_product(db: Session, product_id: UUID, product: ProductUpdate, user_id: Optional[UUID] = None) -> ProductOut:
    db_product = get_product_by_id(db, product_id)
    if not db_product:
        return not_found_response("Product")

    update_data = product.model_dump(exclude_unset=True, exclude={"status", "approval_status"})
    _validate_references(db, update_data)

    # the guard runs against the values the record will hold after the update
    check_duplicate_product(
        db,
        update_data.get("product_name", db_product.product_name),
        update_data.get("product_code", db_product.product_code),
        update_data.get("sds_id", db_product.sds_id),
        exclude_id=product_id,
    )

    if product.status is not None:
        update_data["product_status_id"] = get_status_id(
            db, product.status.value, StatusCategory.PRODUCT_STATUS.value)
    if product.approval_status is not None:
        update_data["approval_status_id"] = get_status_id(
            db, product.approval_status.value, StatusCategory.PRODUCT_APPROVAL.value)
    update_data["updated_by"] = user_id

    for key, value in update_data.items():
        setattr(db_product, key, value)

    db.commit()
    db.refresh(db_product)
    logger.info(f"Updated product {product_id}")
    return product_to_out(db_product)


def delete_product(db: Session, product_id: UUID) -> ProductOut:
    db_product = get_product_by_id(db, product_id)
    if not db_product:
        return not_found_response("Product")

    related_registers = db.query(func.count(SiteRegister.id)).filter(
        SiteRegister.product_id == product_id).scalar()
    if related_registers:
        return error_response(
            message="Cannot delete the product as it is used in site registers",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = product_to_out(db_product)
    db.delete(db_product)
    db.commit()
    logger.info(f"Deleted product {product_id}")
    return deleted


def duplicate_product(db: Session, product_id: UUID, payload: ProductDuplicate, user_id: Optional[UUID] = None) -> ProductOut:
    source = get_product_by_id(db, product_id)
    if not source:
        return not_found_response("Product")

    product_name = payload.product_name or source.product_name
    product_code = payload.product_code or source.product_code
    sds_id = payload.sds_id or source.sds_id
    if payload.sds_id:
        _validate_references(db, {"sds_id": payload.sds_id})
    check_duplicate_product(db, product_name, product_code, sds_id)

    data = {field: getattr(source, field) for field in COPY_FIELDS}
    copy = Product(
        product_name=product_name,
        product_code=product_code,
        sds_id=sds_id,
        updated_by=user_id,
        **data
    )
    db.add(copy)
    db.flush()

    if payload.copy_hazards:
        for hazard in source.hazards:
            db.add(HazardAndControl(
                product_id=copy.id,
                hazard_type=hazard.hazard_type,
                hazard=hazard.hazard,
                control=hazard.control,
                source=hazard.source,
                updated_by=user_id,
            ))

    db.commit()
    db.refresh(copy)
    logger.info(f"Duplicated product {product_id} as {copy.id}")
    return product_to_out(copy)

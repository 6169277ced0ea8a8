# app/crud/common/import_crud.py
import logging
from typing import Any, Dict, List

from fastapi import HTTPException
from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import ImportResult, ImportRowError
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...models.locations.locations import Location
from ...models.master_data.master_data import MasterData
from ...schemas.common.import_schemas import LocationImportRow, MasterDataImportRow, SupplierImportRow
from ...schemas.locations.locations_schemas import LocationCreate, LocationUpdate
from ...schemas.master_data.master_data_schemas import MasterDataCreate, MasterDataUpdate
from ...schemas.suppliers.suppliers_schemas import SupplierCreate, SupplierUpdate
from ..locations import locations_crud
from ..master_data import master_data_crud
from ..suppliers import suppliers_crud

logger = logging.getLogger(__name__)

IMPORT_TYPES = ("suppliers", "master_data", "locations")


def _error_message(e: Exception) -> str:
    if isinstance(e, HTTPException):
        detail = e.detail
        return detail.get("message", str(detail)) if isinstance(detail, dict) else str(detail)
    if isinstance(e, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors())
    return str(e)


def _import_supplier(db: Session, row: Dict[str, Any]) -> bool:
    data = SupplierImportRow.model_validate(row)
    existing = suppliers_crud.get_supplier_by_name(db, data.supplier_name)
    if existing:
        suppliers_crud.update_supplier(db, existing.id, SupplierUpdate(**data.model_dump()))
        return False
    suppliers_crud.create_supplier(db, SupplierCreate(**data.model_dump()))
    return True


def _import_master_data(db: Session, row: Dict[str, Any]) -> bool:
    data = MasterDataImportRow.model_validate(row)
    category = data.category.upper()
    existing = master_data_crud.find_master_data_id(db, category, data.label)
    payload = data.model_dump()
    payload["category"] = category
    if existing:
        master_data_crud.update_master_data(db, existing, MasterDataUpdate(**payload))
        return False
    master_data_crud.create_master_data(db, MasterDataCreate(**payload))
    return True


def _master_data_id_by_label(db: Session, category: str, label: str):
    row = db.query(MasterData.id).filter(
        MasterData.category == category,
        func.lower(MasterData.label) == label.strip().lower(),
    ).first()
    if not row:
        return error_response(
            message=f"Unknown {category} '{label}'",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )
    return row.id


def _import_location(db: Session, row: Dict[str, Any]) -> bool:
    data = LocationImportRow.model_validate(row)

    parent = None
    if data.parent_path:
        parent = db.query(Location).filter(Location.full_path == data.parent_path.strip()).first()
        if not parent:
            return error_response(
                message=f"Parent location '{data.parent_path}' not found",
                status_code=AppStatusCode.NOT_FOUND,
                http_status=404
            )

    payload = {
        "name": data.name,
        "type_id": _master_data_id_by_label(db, MasterDataCategory.LOCATION_TYPE.value, data.location_type),
        "parent_location_id": parent.id if parent else None,
        "is_storage_location": data.is_storage_location,
        "storage_type_id": _master_data_id_by_label(
            db, MasterDataCategory.STORAGE_TYPE.value, data.storage_type) if data.storage_type else None,
        "coordinates": {"lat": data.lat, "lng": data.lng}
        if data.lat is not None and data.lng is not None else None,
        "status": data.status,
    }

    full_path = locations_crud.build_full_path(data.name, parent)
    existing = db.query(Location).filter(Location.full_path == full_path).first()
    if existing:
        locations_crud.update_location(db, existing.id, LocationUpdate(**payload))
        return False
    locations_crud.create_location(db, LocationCreate(**payload))
    return True


IMPORTERS = {
    "suppliers": _import_supplier,
    "master_data": _import_master_data,
    "locations": _import_location,
}


def import_rows(db: Session, type: str, rows: List[Dict[str, Any]]) -> ImportResult:
    """
    Insert or update rows one at a time.

    A failing row is rolled back, logged and reported; the remaining rows
    are still processed. Row numbers in the result are 1-based.
    """
    importer = IMPORTERS.get(type)
    if importer is None:
        return error_response(
            message=f"Unknown import type: {type}",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )

    result = ImportResult()
    for index, row in enumerate(rows, start=1):
        try:
            created = importer(db, row)
        except (HTTPException, ValidationError, ValueError) as e:
            db.rollback()
            message = _error_message(e)
            logger.error(f"Import {type} row {index} failed: {message}")
            result.failed += 1
            result.errors.append(ImportRowError(row=index, message=message))
            continue
        except Exception as e:
            db.rollback()
            logger.exception(f"Import {type} row {index} failed")
            result.failed += 1
            result.errors.append(ImportRowError(row=index, message=str(e)))
            continue

        if created:
            result.created += 1
        else:
            result.updated += 1

    logger.info(
        f"Imported {type}: {result.created} created, {result.updated} updated, {result.failed} failed")
    return result

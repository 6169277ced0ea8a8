# app/crud/locations/locations_crud.py
import logging
from collections import defaultdict
from typing import Dict, List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from shared.core.schemas import Lookup
from shared.helpers.json_response_helper import error_response, not_found_response
from shared.helpers.pagination_helper import paginate, parse_bool_filter, split_filter
from shared.utils.app_status_code import AppStatusCode
from ...enum.master_data_enum import MasterDataCategory
from ...enum.status_enum import StatusCategory
from ...models.locations.locations import Location
from ...models.master_data.status_lookup import StatusLookup
from ...models.site_registers.site_registers import SiteRegister
from ...schemas.locations.locations_schemas import (
    LocationCreate, LocationHierarchyOut, LocationListResponse, LocationOut,
    LocationRequest, LocationTreeNode, LocationUpdate)
from ..master_data.master_data_crud import ensure_category
from ..master_data.status_lookup_crud import get_status_id

logger = logging.getLogger(__name__)

PATH_SEPARATOR = " > "


def build_full_path(name: str, parent: Optional[Location]) -> str:
    if parent is None:
        return name
    return f"{parent.full_path or parent.name}{PATH_SEPARATOR}{name}"


def location_to_out(location: Location) -> LocationOut:
    return LocationOut(
        id=location.id,
        name=location.name,
        full_path=location.full_path,
        type_id=location.type_id,
        type_name=location.location_type.label if location.location_type else None,
        parent_location_id=location.parent_location_id,
        parent_name=location.parent.name if location.parent else None,
        coordinates=location.coordinates,
        is_storage_location=bool(location.is_storage_location),
        storage_type_id=location.storage_type_id,
        storage_type_name=location.storage_type.label if location.storage_type else None,
        status=location.status_lookup.status_name if location.status_lookup else None,
        status_id=location.status_id,
        created_at=location.created_at,
    )


def _children_map(db: Session) -> Dict[UUID, List[UUID]]:
    rows = db.query(Location.id, Location.parent_location_id).all()
    children = defaultdict(list)
    for row in rows:
        if row.parent_location_id:
            children[row.parent_location_id].append(row.id)
    return children


def get_descendant_ids(db: Session, location_id: UUID) -> List[UUID]:
    """The location itself followed by every location below it."""
    children = _children_map(db)
    result = []
    stack = [location_id]
    while stack:
        current = stack.pop()
        if current in result:
            continue
        result.append(current)
        stack.extend(children.get(current, []))
    return result


def refresh_subtree_paths(db: Session, location: Location):
    for child in location.children:
        child.full_path = build_full_path(child.name, location)
        refresh_subtree_paths(db, child)

# ----------------- Build Filters for Locations -----------------


def build_location_filters(params: LocationRequest):
    filters = []

    statuses = [s.upper() for s in split_filter(params.status)]
    if statuses:
        filters.append(StatusLookup.status_name.in_(statuses))

    type_ids = split_filter(params.type_id)
    if type_ids:
        filters.append(Location.type_id.in_([UUID(t) for t in type_ids]))

    if params.parent_location_id:
        filters.append(Location.parent_location_id == params.parent_location_id)

    is_storage = parse_bool_filter(params.is_storage_location)
    if is_storage is not None:
        filters.append(Location.is_storage_location == is_storage)

    if params.search:
        search_term = f"%{params.search}%"
        filters.append(
            or_(
                Location.name.ilike(search_term),
                Location.full_path.ilike(search_term),
            )
        )
    return filters


def get_locations(db: Session, params: LocationRequest, is_export: bool = False) -> LocationListResponse:
    query = (
        db.query(Location)
        .outerjoin(StatusLookup, Location.status_id == StatusLookup.id)
        .options(
            joinedload(Location.location_type),
            joinedload(Location.storage_type),
            joinedload(Location.parent),
            joinedload(Location.status_lookup),
        )
        .filter(*build_location_filters(params))
        .order_by(Location.full_path.asc())
    )
    rows, meta = paginate(query, params.page, params.page_size, is_export=is_export)
    return LocationListResponse(locations=[location_to_out(l) for l in rows], **meta)


def get_location_by_id(db: Session, location_id: UUID) -> Optional[Location]:
    return db.query(Location).filter(Location.id == location_id).first()


def get_location(db: Session, location_id: UUID) -> LocationOut:
    location = get_location_by_id(db, location_id)
    if not location:
        return not_found_response("Location")
    return location_to_out(location)


def get_location_hierarchy(db: Session, location_id: UUID) -> LocationHierarchyOut:
    if not get_location_by_id(db, location_id):
        return not_found_response("Location")
    return LocationHierarchyOut(
        location_id=location_id,
        location_ids=get_descendant_ids(db, location_id),
    )


def get_location_tree(db: Session) -> List[LocationTreeNode]:
    locations = db.query(Location).order_by(Location.name.asc()).all()
    nodes = {
        l.id: LocationTreeNode(
            id=l.id, name=l.name, full_path=l.full_path,
            is_storage_location=bool(l.is_storage_location), children=[])
        for l in locations
    }
    roots = []
    for l in locations:
        parent = nodes.get(l.parent_location_id) if l.parent_location_id else None
        if parent:
            parent.children.append(nodes[l.id])
        else:
            roots.append(nodes[l.id])
    return roots


def location_lookup(db: Session, storage_only: bool = False) -> List[Lookup]:
    query = db.query(Location.id, Location.name, Location.full_path)
    if storage_only:
        query = query.filter(Location.is_storage_location.is_(True))
    rows = query.order_by(Location.full_path.asc()).all()
    return [Lookup(id=r.id, name=r.full_path or r.name) for r in rows]


def _validate_references(db: Session, data: dict):
    ensure_category(db, data.get("type_id"),
                    MasterDataCategory.LOCATION_TYPE.value, "type_id")
    ensure_category(db, data.get("storage_type_id"),
                    MasterDataCategory.STORAGE_TYPE.value, "storage_type_id")


def _resolve_parent(db: Session, parent_id: Optional[UUID]) -> Optional[Location]:
    if not parent_id:
        return None
    parent = get_location_by_id(db, parent_id)
    if not parent:
        return not_found_response("Parent location")
    return parent


def create_location(db: Session, location: LocationCreate) -> LocationOut:
    data = location.model_dump(exclude={"status"})
    _validate_references(db, data)
    parent = _resolve_parent(db, location.parent_location_id)

    data["status_id"] = get_status_id(db, location.status.value, StatusCategory.LOCATION.value)
    data["full_path"] = build_full_path(location.name, parent)

    db_location = Location(**data)
    db.add(db_location)
    db.commit()
    db.refresh(db_location)
    logger.info(f"Created location {db_location.id} ({db_location.full_path})")
    return location_to_out(db_location)


def update_location(db: Session, location_id: UUID, location: LocationUpdate) -> LocationOut:
    db_location = get_location_by_id(db, location_id)
    if not db_location:
        return not_found_response("Location")

    update_data = location.model_dump(exclude_unset=True, exclude={"status"})
    _validate_references(db, update_data)

    if "parent_location_id" in update_data:
        new_parent_id = update_data["parent_location_id"]
        if new_parent_id and new_parent_id in get_descendant_ids(db, location_id):
            return error_response(
                message="A location cannot be moved under itself or one of its children",
                status_code=AppStatusCode.INVALID_INPUT,
                http_status=400
            )
        _resolve_parent(db, new_parent_id)

    if location.status is not None:
        update_data["status_id"] = get_status_id(
            db, location.status.value, StatusCategory.LOCATION.value)

    for key, value in update_data.items():
        setattr(db_location, key, value)
    db.flush()

    if "name" in update_data or "parent_location_id" in update_data:
        db.refresh(db_location)
        db_location.full_path = build_full_path(db_location.name, db_location.parent)
        refresh_subtree_paths(db, db_location)

    db.commit()
    db.refresh(db_location)
    logger.info(f"Updated location {location_id}")
    return location_to_out(db_location)


def delete_location(db: Session, location_id: UUID) -> LocationOut:
    db_location = get_location_by_id(db, location_id)
    if not db_location:
        return not_found_response("Location")

    has_children = db.query(func.count(Location.id)).filter(
        Location.parent_location_id == location_id).scalar()
    has_registers = db.query(func.count(SiteRegister.id)).filter(
        SiteRegister.location_id == location_id).scalar()
    if has_children or has_registers:
        return error_response(
            message="Cannot delete the location as it has child locations or site registers",
            status_code=AppStatusCode.RELATED_RECORDS_EXIST,
            http_status=409
        )

    deleted = location_to_out(db_location)
    db.delete(db_location)
    db.commit()
    logger.info(f"Deleted location {location_id}")
    return deleted

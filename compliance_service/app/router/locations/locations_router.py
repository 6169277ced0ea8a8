# app/router/locations/locations_router.py
from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_db
from shared.core.schemas import Lookup
from ...crud.locations import locations_crud as crud
from ...schemas.locations.locations_schemas import (
    LocationCreate, LocationHierarchyOut, LocationListResponse, LocationOut,
    LocationRequest, LocationTreeNode, LocationUpdate)

router = APIRouter(prefix="/api/locations", tags=["locations"])


@router.get("/all", response_model=LocationListResponse)
def get_locations(params: LocationRequest = Depends(), db: Session = Depends(get_db)):
    return crud.get_locations(db, params)


@router.get("/lookup", response_model=List[Lookup])
def location_lookup(storage_only: bool = Query(False), db: Session = Depends(get_db)):
    return crud.location_lookup(db, storage_only)


@router.get("/tree", response_model=List[LocationTreeNode])
def location_tree(db: Session = Depends(get_db)):
    return crud.get_location_tree(db)


@router.get("/{location_id}/hierarchy", response_model=LocationHierarchyOut)
def location_hierarchy(location_id: UUID, db: Session = Depends(get_db)):
    return crud.get_location_hierarchy(db, location_id)


@router.get("/{location_id}", response_model=LocationOut)
def get_location(location_id: UUID, db: Session = Depends(get_db)):
    return crud.get_location(db, location_id)


@router.post("/", response_model=LocationOut)
def create_location(location: LocationCreate, db: Session = Depends(get_db)):
    return crud.create_location(db, location)


@router.put("/{location_id}", response_model=LocationOut)
def update_location(location_id: UUID, location: LocationUpdate, db: Session = Depends(get_db)):
    return crud.update_location(db, location_id, location)


@router.delete("/{location_id}", response_model=LocationOut)
def delete_location(location_id: UUID, db: Session = Depends(get_db)):
    return crud.delete_location(db, location_id)

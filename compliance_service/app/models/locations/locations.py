# app/models/locations/locations.py
import uuid
from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    # materialized "Region > District > School" path, maintained by locations_crud
    full_path = Column(String(2000), index=True)
    type_id = Column(Uuid, ForeignKey("master_data.id"), nullable=False)
    parent_location_id = Column(Uuid, ForeignKey(
        "locations.id", ondelete="RESTRICT"), index=True)
    status_id = Column(Integer, ForeignKey("status_lookup.id"), nullable=False)
    coordinates = Column(JSON().with_variant(JSONB, "postgresql"))
    is_storage_location = Column(Boolean, default=False)
    storage_type_id = Column(Uuid, ForeignKey("master_data.id"))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    parent = relationship("Location", remote_side=[id], back_populates="children")
    children = relationship("Location", back_populates="parent")
    location_type = relationship("MasterData", foreign_keys=[type_id])
    storage_type = relationship("MasterData", foreign_keys=[storage_type_id])
    status_lookup = relationship("StatusLookup")
    site_registers = relationship("SiteRegister", back_populates="location")

# app/models/suppliers/suppliers.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    supplier_name = Column(String(200), nullable=False, index=True)
    contact_person = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False)
    phone_number = Column(String(64))
    address = Column(String(500), nullable=False)
    status_id = Column(Integer, ForeignKey("status_lookup.id"))
    updated_by = Column(Uuid)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    status_lookup = relationship("StatusLookup")
    sds = relationship("SDS", back_populates="supplier")

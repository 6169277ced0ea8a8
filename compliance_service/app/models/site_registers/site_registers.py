# app/models/site_registers/site_registers.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class SiteRegister(Base):
    __tablename__ = "site_registers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    location_id = Column(Uuid, ForeignKey("locations.id"), nullable=False, index=True)
    product_id = Column(Uuid, ForeignKey("products.id"), nullable=False, index=True)
    status_id = Column(Integer, ForeignKey("status_lookup.id"), nullable=False)
    current_stock_level = Column(Numeric(14, 3), default=0)
    max_stock_level = Column(Numeric(14, 3))
    total_qty = Column(Numeric(14, 3))
    uom_id = Column(Uuid, ForeignKey("master_data.id"))
    exact_location = Column(String(300))
    override_product_name = Column(String(300))
    storage_conditions = Column(Text)
    placarding_required = Column(Boolean, default=False)
    manifest_required = Column(Boolean, default=False)
    fire_protection_required = Column(Boolean, default=False)

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    location = relationship("Location", back_populates="site_registers")
    product = relationship("Product", back_populates="site_registers")
    status_lookup = relationship("StatusLookup")
    uom = relationship("MasterData")
    stock_movements = relationship("StockMovement", back_populates="site_register",
                                   cascade="all, delete-orphan",
                                   order_by="StockMovement.movement_date.desc()")
    risk_assessments = relationship("RiskAssessment", back_populates="site_register")

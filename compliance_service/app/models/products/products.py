# app/models/products/products.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        UniqueConstraint("product_name", "product_code", "sds_id",
                         name="uq_products_name_code_sds"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_name = Column(String(300), nullable=False, index=True)
    product_code = Column(String(100), nullable=False)
    brand_name = Column(String(200))
    unit = Column(String(32))
    uom_id = Column(Uuid, ForeignKey("master_data.id"))
    unit_size = Column(Numeric(14, 3))
    description = Column(Text)
    product_set = Column(Boolean, default=False)
    aerosol = Column(Boolean, default=False)
    cryogenic_fluid = Column(Boolean, default=False)
    other_names = Column(String(500))
    uses = Column(Text)
    product_status_id = Column(Integer, ForeignKey("status_lookup.id"))
    approval_status_id = Column(Integer, ForeignKey("status_lookup.id"))
    sds_id = Column(Uuid, ForeignKey("sds.id"), index=True)

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    uom = relationship("MasterData", foreign_keys=[uom_id])
    sds = relationship("SDS", back_populates="products")
    product_status = relationship("StatusLookup", foreign_keys=[product_status_id])
    approval_status = relationship("StatusLookup", foreign_keys=[approval_status_id])
    hazards = relationship("HazardAndControl", back_populates="product",
                           cascade="all, delete-orphan")
    site_registers = relationship("SiteRegister", back_populates="product")

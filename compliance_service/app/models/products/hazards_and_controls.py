# app/models/products/hazards_and_controls.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class HazardAndControl(Base):
    """Hazard and control measure recorded against a product."""
    __tablename__ = "hazards_and_controls"

    hazard_control_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_id = Column(Uuid, ForeignKey(
        "products.id", ondelete="CASCADE"), nullable=False, index=True)
    hazard_type = Column(Uuid, ForeignKey("master_data.id"), nullable=False)
    hazard = Column(Text, nullable=False)
    control = Column(Text, nullable=False)
    source = Column(String(64))

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    product = relationship("Product", back_populates="hazards")
    hazard_type_ref = relationship("MasterData")

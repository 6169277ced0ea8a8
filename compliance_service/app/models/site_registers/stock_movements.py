# app/models/site_registers/stock_movements.py
import uuid
from sqlalchemy import Column, DateTime, Enum, ForeignKey, Numeric, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base
from ...enum.site_register_enum import StockAction


class StockMovement(Base):
    __tablename__ = "stock_movements"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    site_register_id = Column(Uuid, ForeignKey(
        "site_registers.id", ondelete="CASCADE"), nullable=False, index=True)
    movement_date = Column(DateTime(timezone=True), nullable=False)
    action = Column(Enum(StockAction, name="stock_action"), nullable=False)
    reason_id = Column(Uuid, ForeignKey("master_data.id"), nullable=False)
    quantity = Column(Numeric(14, 3), nullable=False)
    comments = Column(Text)

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    site_register = relationship("SiteRegister", back_populates="stock_movements")
    reason = relationship("MasterData")

# app/models/sds/sds_ghs_classifications.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class SDSGHSClassification(Base):
    __tablename__ = "sds_ghs_classifications"
    __table_args__ = (
        UniqueConstraint("sds_id", "hazard_classification_id",
                         name="uq_sds_ghs_classification"),
    )

    sds_ghs_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    sds_id = Column(Uuid, ForeignKey(
        "sds.id", ondelete="CASCADE"), nullable=False, index=True)
    hazard_classification_id = Column(Uuid, ForeignKey(
        "ghs_hazard_classifications.hazard_classification_id"), nullable=False)
    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    sds = relationship("SDS", back_populates="ghs_classifications")
    hazard_classification = relationship("GHSHazardClassification")

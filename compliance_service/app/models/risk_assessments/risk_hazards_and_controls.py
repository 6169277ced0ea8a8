# app/models/risk_assessments/risk_hazards_and_controls.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class RiskHazardAndControl(Base):
    __tablename__ = "risk_hazards_and_controls"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    risk_assessment_id = Column(Uuid, ForeignKey(
        "risk_assessments.id", ondelete="CASCADE"), nullable=False, index=True)
    hazard_type_id = Column(Uuid, ForeignKey("master_data.id"))
    hazard = Column(Text)
    control = Column(Text)
    control_in_place = Column(Boolean, default=False)
    source = Column(String(32), default="Manual")
    # set when the row was copied from a product hazard
    hazard_control_id = Column(Uuid, ForeignKey(
        "hazards_and_controls.hazard_control_id", ondelete="SET NULL"))

    likelihood_id = Column(Integer, ForeignKey("likelihood.id"))
    consequence_id = Column(Integer, ForeignKey("consequence.id"))
    risk_score_id = Column(Integer, ForeignKey("risk_matrix.id"))
    likelihood_text = Column(String(64))
    consequence_text = Column(String(64))
    risk_level_text = Column(String(64))
    risk_score_int = Column(Integer)

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    risk_assessment = relationship("RiskAssessment", back_populates="hazards")
    hazard_type = relationship("MasterData")
    product_hazard = relationship("HazardAndControl")
    likelihood = relationship("Likelihood")
    consequence = relationship("Consequence")
    risk_matrix = relationship("RiskMatrix")

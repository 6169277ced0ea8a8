# app/models/risk_assessments/risk_assessments.py
import uuid
from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class RiskAssessment(Base):
    __tablename__ = "risk_assessments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    site_register_record_id = Column(Uuid, ForeignKey(
        "site_registers.id"), nullable=False, index=True)
    risk_assessment_date = Column(Date)
    date_of_next_review = Column(Date)
    conducted_by = Column(Uuid, ForeignKey("users.id"))
    approver = Column(Uuid, ForeignKey("users.id"))
    product_usage = Column(Text)

    overall_likelihood_id = Column(Integer, ForeignKey("likelihood.id"))
    overall_consequence_id = Column(Integer, ForeignKey("consequence.id"))
    overall_risk_score_id = Column(Integer, ForeignKey("risk_matrix.id"))
    overall_likelihood_text = Column(String(64))
    overall_consequence_text = Column(String(64))
    overall_risk_level_text = Column(String(64))
    overall_risk_score_int = Column(Integer)
    overall_evaluation = Column(Text)
    overall_evaluation_status_id = Column(Uuid, ForeignKey("master_data.id"))
    approval_status_id = Column(Uuid, ForeignKey("master_data.id"))

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    site_register = relationship("SiteRegister", back_populates="risk_assessments")
    assessor = relationship("User", foreign_keys=[conducted_by])
    approver_user = relationship("User", foreign_keys=[approver])
    likelihood = relationship("Likelihood")
    consequence = relationship("Consequence")
    risk_matrix = relationship("RiskMatrix")
    evaluation_status = relationship(
        "MasterData", foreign_keys=[overall_evaluation_status_id])
    approval_status = relationship("MasterData", foreign_keys=[approval_status_id])
    hazards = relationship("RiskHazardAndControl", back_populates="risk_assessment",
                           cascade="all, delete-orphan",
                           order_by="RiskHazardAndControl.created_at")

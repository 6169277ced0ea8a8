# app/models/ghs/ghs_hazard_classifications.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class GHSHazardClassification(Base):
    __tablename__ = "ghs_hazard_classifications"

    hazard_classification_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    hazard_class = Column(String(200), nullable=False, index=True)
    hazard_category = Column(String(64), nullable=False)
    ghs_code_id = Column(Uuid, ForeignKey("ghs_codes.ghs_code_id"))
    hazard_statement_id = Column(Uuid, ForeignKey(
        "hazard_statements.hazard_statement_id"))
    signal_word = Column(String(32))
    notes = Column(Text)
    source = Column(String(100))

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    ghs_code = relationship("GHSCode")
    hazard_statement = relationship("HazardStatement")

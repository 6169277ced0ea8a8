# app/models/sds/sds_precautionary_statements.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class SDSPrecautionaryStatement(Base):
    __tablename__ = "sds_precautionary_statements"
    __table_args__ = (
        UniqueConstraint("sds_id", "precautionary_statement_id",
                         name="uq_sds_precautionary_statement"),
    )

    sds_precautionary_statement_id = Column(
        Uuid, primary_key=True, default=uuid.uuid4)
    sds_id = Column(Uuid, ForeignKey(
        "sds.id", ondelete="CASCADE"), nullable=False, index=True)
    precautionary_statement_id = Column(Uuid, ForeignKey(
        "precautionary_statements.precautionary_statement_id"), nullable=False)
    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    sds = relationship("SDS", back_populates="precautionary_statements")
    precautionary_statement = relationship("PrecautionaryStatement")

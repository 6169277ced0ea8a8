# app/models/ghs/statements.py
import uuid
from sqlalchemy import Column, DateTime, String, Text, Uuid, func
from shared.core.database import Base


class HazardStatement(Base):
    __tablename__ = "hazard_statements"

    hazard_statement_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    hazard_statement_code = Column(String(32), nullable=False, unique=True)
    hazard_statement_text = Column(Text, nullable=False)
    updated_by = Column(Uuid)
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())


class PrecautionaryStatement(Base):
    __tablename__ = "precautionary_statements"

    precautionary_statement_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    code = Column(String(32), nullable=False, unique=True)
    statement = Column(Text, nullable=False)
    # Prevention / Response / Storage / Disposal / General
    type = Column(String(32), nullable=False)
    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

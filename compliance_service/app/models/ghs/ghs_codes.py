# app/models/ghs/ghs_codes.py
import uuid
from sqlalchemy import Column, DateTime, String, Uuid, func
from shared.core.database import Base


class GHSCode(Base):
    """GHS pictogram code, e.g. GHS02 (flame)."""
    __tablename__ = "ghs_codes"

    ghs_code_id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    ghs_code = Column(String(16), nullable=False, unique=True)
    pictogram_url = Column(String(500))
    updated_by = Column(Uuid)
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

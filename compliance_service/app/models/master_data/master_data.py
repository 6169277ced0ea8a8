# app/models/master_data/master_data.py
import uuid
from sqlalchemy import Column, DateTime, Integer, String, Uuid, func
from shared.core.database import Base


class MasterData(Base):
    __tablename__ = "master_data"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    category = Column(String(64), nullable=False, index=True)
    label = Column(String(200), nullable=False)
    value = Column(String(200))
    status = Column(String(16), nullable=False, default="ACTIVE")
    sort_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

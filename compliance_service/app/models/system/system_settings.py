# app/models/system/system_settings.py
import uuid
from sqlalchemy import Boolean, Column, DateTime, String, Uuid, func
from shared.core.database import Base


class SystemSettings(Base):
    __tablename__ = "system_settings"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_name = Column(String(200), nullable=False)
    customer_email = Column(String(200), nullable=False)
    logo_path = Column(String(500))
    auto_update_sds = Column(Boolean, default=False)
    primary_color = Column(String(16))
    secondary_color = Column(String(16))
    accent_color = Column(String(16))

    updated_by = Column(Uuid)
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

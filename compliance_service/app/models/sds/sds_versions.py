# app/models/sds/sds_versions.py
import uuid
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class SDSVersion(Base):
    __tablename__ = "sds_versions"
    __table_args__ = (
        UniqueConstraint("sds_id", "version_number",
                         name="uq_sds_versions_sds_version"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    sds_id = Column(Uuid, ForeignKey(
        "sds.id", ondelete="CASCADE"), nullable=False, index=True)
    version_number = Column(Integer, nullable=False)
    file_path = Column(String(500), nullable=False)
    file_name = Column(String(300))
    file_size = Column(Integer)
    content_type = Column(String(100))
    notes = Column(Text)
    uploaded_by = Column(Uuid)
    uploaded_at = Column(DateTime(timezone=True), server_default=func.now())

    sds = relationship("SDS", back_populates="versions")

# app/models/master_data/status_lookup.py
from sqlalchemy import Column, Integer, String, UniqueConstraint
from shared.core.database import Base


class StatusLookup(Base):
    __tablename__ = "status_lookup"
    __table_args__ = (
        UniqueConstraint("category", "status_name",
                         name="uq_status_lookup_category_name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(String(64), nullable=False, index=True)
    status_name = Column(String(64), nullable=False)

# app/models/sds/sds.py
import uuid
from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base


class SDS(Base):
    __tablename__ = "sds"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    product_name = Column(String(300), nullable=False, index=True)
    product_id = Column(String(100), nullable=False)
    other_names = Column(String(500))
    emergency_phone = Column(String(64))
    supplier_id = Column(Uuid, ForeignKey("suppliers.id"), nullable=False)
    is_dg = Column(Boolean, default=False)

    issue_date = Column(Date)
    revision_date = Column(Date)
    expiry_date = Column(Date)
    status_id = Column(Integer, ForeignKey("status_lookup.id"), nullable=False)

    # file metadata only, the document itself lives in object storage
    current_file_path = Column(String(500))
    current_file_name = Column(String(300))
    current_file_size = Column(Integer)
    current_content_type = Column(String(100))

    un_number = Column(String(16))
    un_proper_shipping_name = Column(String(300))
    hazchem_code = Column(String(16))
    dg_class_id = Column(Uuid, ForeignKey("master_data.id"))
    subsidiary_dg_class_id = Column(Uuid, ForeignKey("master_data.id"))
    packing_group_id = Column(Uuid, ForeignKey("master_data.id"))
    dg_subdivision_id = Column(Uuid, ForeignKey("master_data.id"))
    source = Column(String(100))

    request_supplier_name = Column(String(200))
    request_supplier_details = Column(Text)
    request_information = Column(Text)
    request_date = Column(Date)
    requested_by = Column(Uuid)

    updated_by = Column(Uuid)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    supplier = relationship("Supplier", back_populates="sds")
    status_lookup = relationship("StatusLookup")
    dg_class = relationship("MasterData", foreign_keys=[dg_class_id])
    subsidiary_dg_class = relationship(
        "MasterData", foreign_keys=[subsidiary_dg_class_id])
    packing_group = relationship("MasterData", foreign_keys=[packing_group_id])
    dg_subdivision = relationship("MasterData", foreign_keys=[dg_subdivision_id])

    products = relationship("Product", back_populates="sds")
    versions = relationship("SDSVersion", back_populates="sds",
                            cascade="all, delete-orphan",
                            order_by="SDSVersion.version_number")
    ghs_classifications = relationship(
        "SDSGHSClassification", back_populates="sds", cascade="all, delete-orphan")
    precautionary_statements = relationship(
        "SDSPrecautionaryStatement", back_populates="sds", cascade="all, delete-orphan")

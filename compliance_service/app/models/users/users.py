# app/models/users/users.py
import uuid
from sqlalchemy import Column, DateTime, Enum, ForeignKey, String, Table, Uuid, func
from sqlalchemy.orm import relationship
from shared.core.database import Base
from ...enum.users_enum import UserStatus

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Uuid, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)


class Role(Base):
    __tablename__ = "roles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    role_name = Column(String(64), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())


class User(Base):
    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(200), nullable=False, unique=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(64))
    active = Column(Enum(UserStatus, name="user_status"), default=UserStatus.active)
    manager_id = Column(Uuid, ForeignKey("users.id"))
    location_id = Column(Uuid, ForeignKey("locations.id"))
    last_login_date = Column(DateTime(timezone=True))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True),
                        server_default=func.now(), onupdate=func.now())

    manager = relationship("User", remote_side=[id])
    location = relationship("Location")
    roles = relationship("Role", secondary=user_roles, order_by="Role.role_name")

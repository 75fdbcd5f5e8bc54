from enum import IntEnum

from sqlalchemy import Column, Integer, String, DateTime, func

from app.config import Config
from app.db.database import Base


class Role(IntEnum):
    ADMIN = 1
    CUSTOMER = 2


class Status(IntEnum):
    ACTIVE = 1
    DEACTIVATED = 2


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    status_id = Column(Integer, nullable=False, default=Status.ACTIVE.value)
    role_id = Column(Integer, nullable=False, default=Role.CUSTOMER.value)
    profile_image = Column(String(500), nullable=False, default=Config.DEFAULT_USER_IMAGE)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

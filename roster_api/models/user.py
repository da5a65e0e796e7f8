"""User ORM model — admins log in with a password, carers by name only."""
import enum
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Enum as SAEnum
from roster_api.database import Base


class UserRole(str, enum.Enum):
    admin = "admin"
    carer = "carer"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(150), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=True)  # carers have none
    role = Column(SAEnum(UserRole), nullable=False, default=UserRole.carer)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

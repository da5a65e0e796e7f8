"""Roster ORM model — one row per saved version of the weekly schedule."""
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from roster_api.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Roster(Base):
    __tablename__ = "rosters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    data = Column(JSON, nullable=False)          # {monday: {morning, evening, instructions}, ...}
    active_days = Column(JSON, nullable=False)   # {monday: bool, ...}
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True)
    # Assigned in Python so sequential writes get distinct, sub-second timestamps.
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

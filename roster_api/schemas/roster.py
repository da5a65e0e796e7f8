"""Pydantic schemas for Rosters."""
from __future__ import annotations
from datetime import datetime
from typing import Any, Optional

from roster_api.schemas.base import CamelModel


class RosterWrite(CamelModel):
    """Body of create and update. Documents are opaque; only presence is checked."""
    name: Optional[str] = None
    data: Any = None
    active_days: Any = None


class RosterOut(CamelModel):
    id: int
    name: str
    data: Any
    active_days: Any
    created_at: datetime
    updated_at: datetime


class RosterEnvelope(CamelModel):
    roster: Optional[RosterOut] = None


class RosterSummary(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class RosterList(CamelModel):
    rosters: list[RosterSummary]


class RosterCreated(CamelModel):
    message: str
    roster_id: int


class RosterRef(CamelModel):
    id: int
    name: str


class RosterTemplate(CamelModel):
    data: dict[str, Any]
    active_days: dict[str, bool]


class TodayShiftOut(CamelModel):
    day: str
    active: bool
    roster: Optional[RosterRef] = None
    shift: Optional[dict[str, Any]] = None


class RosterValidateRequest(CamelModel):
    data: dict[str, Any] = {}
    active_days: dict[str, Any] = {}


class RosterValidation(CamelModel):
    valid: bool
    errors: list[str]
    data: dict[str, Any]

"""Roster service — versioned weekly schedules stored one row per save.

- create always inserts (no dedup, history is unbounded)
- update targets an explicit id and is a 404 when no row matches
- "current" is the most recently updated row
"""
import logging
from datetime import datetime, timezone
from typing import Any, Optional

import pytz
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from roster_api.config import settings
from roster_api.models.roster import Roster
from roster_api.services import roster_document

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, data, and activeDays are required"


def _check_payload(name: Optional[str], data: Any, active_days: Any) -> None:
    # Documents are stored as given; only presence is required.
    if not name or not data or not active_days:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=REQUIRED_FIELDS_MESSAGE)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Roster not found")


def create_roster(
    db: Session,
    name: Optional[str],
    data: Any,
    active_days: Any,
    created_by: Optional[int],
) -> Roster:
    _check_payload(name, data, active_days)
    roster = Roster(name=name, data=data, active_days=active_days, created_by=created_by)
    db.add(roster)
    db.commit()
    db.refresh(roster)
    logger.info("Created roster %s ('%s') by user %s", roster.id, roster.name, created_by)
    return roster


def update_roster(
    db: Session,
    roster_id: int,
    name: Optional[str],
    data: Any,
    active_days: Any,
) -> Roster:
    _check_payload(name, data, active_days)
    roster = db.query(Roster).filter(Roster.id == roster_id).first()
    if not roster:
        raise _not_found()

    roster.name = name
    roster.data = data
    roster.active_days = active_days
    roster.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(roster)
    logger.info("Updated roster %s", roster_id)
    return roster


def get_roster(db: Session, roster_id: int) -> Roster:
    roster = db.query(Roster).filter(Roster.id == roster_id).first()
    if not roster:
        raise _not_found()
    return roster


def get_current_roster(db: Session) -> Optional[Roster]:
    return (
        db.query(Roster)
        .order_by(Roster.updated_at.desc(), Roster.id.desc())
        .first()
    )


def list_rosters(db: Session) -> list[Roster]:
    return db.query(Roster).order_by(Roster.updated_at.desc(), Roster.id.desc()).all()


def today(now: Optional[datetime] = None) -> str:
    """Weekday key for the current date in the roster's home timezone."""
    tz = pytz.timezone(settings.ROSTER_TIMEZONE)
    moment = now or datetime.now(timezone.utc)
    return roster_document.weekday_for(moment.astimezone(tz))


def shift_for_day(db: Session, day: Optional[str] = None) -> dict[str, Any]:
    """Resolve one weekday of the current roster for the carer dashboard."""
    if day is None:
        day = today()
    day = day.lower()
    if day not in roster_document.WEEKDAYS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown day '{day}'")

    roster = get_current_roster(db)
    if not roster:
        return {"day": day, "active": False, "roster": None, "shift": None}

    active_days = roster.active_days if isinstance(roster.active_days, dict) else {}
    return {
        "day": day,
        "active": bool(active_days.get(day)),
        "roster": {"id": roster.id, "name": roster.name},
        "shift": roster_document.day_shift(roster.data, day),
    }

"""Roster API routes — delegates to roster_service for persistence rules."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse
from sqlalchemy.orm import Session

from roster_api.config import settings
from roster_api.database import get_db
from roster_api.schemas.base import MessageOut
from roster_api.schemas.roster import (
    RosterCreated,
    RosterEnvelope,
    RosterList,
    RosterTemplate,
    RosterValidateRequest,
    RosterValidation,
    RosterWrite,
    TodayShiftOut,
)
from roster_api.security import TokenClaims, get_current_user, require_admin
from roster_api.services import roster_document, roster_service
from roster_api.services.heartbeat import heartbeat_stream

logger = logging.getLogger(__name__)
router = APIRouter()

# Fixed paths are declared before /roster/{roster_id} so they are not shadowed.


@router.get("/roster/current", response_model=RosterEnvelope)
def current_roster(
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """The most recently updated roster, or null when none exists."""
    return {"roster": roster_service.get_current_roster(db)}


@router.get("/roster/today", response_model=TodayShiftOut)
def todays_shift(
    day: Optional[str] = Query(None, description="Weekday to show instead of today"),
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Today's entry from the current roster, as shown on the carer dashboard."""
    return roster_service.shift_for_day(db, day)


@router.get("/roster/updates")
async def roster_updates(current_user: TokenClaims = Depends(get_current_user)):
    """Server-Sent Events stream. Only heartbeats are sent."""
    return StreamingResponse(
        heartbeat_stream(settings.SSE_HEARTBEAT_SECONDS, current_user.username),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@router.get("/roster/template", response_model=RosterTemplate)
def roster_template(current_user: TokenClaims = Depends(require_admin)):
    """A blank week for the roster editor to start from."""
    return {
        "data": roster_document.initial_roster_data(),
        "active_days": roster_document.initial_active_days(),
    }


@router.post("/roster/validate", response_model=RosterValidation)
def validate_roster(
    payload: RosterValidateRequest,
    current_user: TokenClaims = Depends(require_admin),
):
    """Check a draft document without saving it.

    Also returns the draft trimmed to its active days with blank carer slots removed.
    """
    errors = roster_document.validate_roster(payload.data, payload.active_days)
    return {
        "valid": not errors,
        "errors": errors,
        "data": roster_document.filter_active_days(payload.data, payload.active_days),
    }


@router.get("/roster/{roster_id}", response_model=RosterEnvelope)
def get_roster(
    roster_id: int,
    current_user: TokenClaims = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return {"roster": roster_service.get_roster(db, roster_id)}


@router.post("/roster", response_model=RosterCreated)
def create_roster(
    payload: Optional[RosterWrite] = None,
    current_user: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Save a new roster version. Every call inserts a row."""
    payload = payload or RosterWrite()
    roster = roster_service.create_roster(
        db,
        name=payload.name,
        data=payload.data,
        active_days=payload.active_days,
        created_by=current_user.id,
    )
    return {"message": "Roster created successfully", "roster_id": roster.id}


@router.put("/roster/{roster_id}", response_model=MessageOut)
def update_roster(
    roster_id: int,
    payload: Optional[RosterWrite] = None,
    current_user: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
):
    payload = payload or RosterWrite()
    roster_service.update_roster(
        db,
        roster_id,
        name=payload.name,
        data=payload.data,
        active_days=payload.active_days,
    )
    return {"message": "Roster updated successfully"}


@router.get("/rosters", response_model=RosterList)
def list_rosters(
    current_user: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """All roster versions, newest first, without their documents."""
    return {"rosters": roster_service.list_rosters(db)}

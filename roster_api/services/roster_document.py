"""Helpers for the weekly roster document.

A document maps weekday keys to ``{"morning": [{"name": ...}], "evening": [...],
"instructions": str}``; a parallel ``active_days`` map flags which days are in
use. The server stores documents as-is. These helpers are best-effort and are
never applied as a gate on saving.
"""
from datetime import datetime
from typing import Any, Optional

WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")
SHIFTS = ("morning", "evening")


def default_day() -> dict[str, Any]:
    """Two blank carer slots per shift and no instructions."""
    return {
        "morning": [{"name": ""}, {"name": ""}],
        "evening": [{"name": ""}, {"name": ""}],
        "instructions": "",
    }


def initial_roster_data() -> dict[str, Any]:
    return {day: default_day() for day in WEEKDAYS}


def initial_active_days() -> dict[str, bool]:
    return {day: True for day in WEEKDAYS}


def _carer_name(carer: Any) -> str:
    if isinstance(carer, dict):
        name = carer.get("name")
        return name if isinstance(name, str) else ""
    return ""


def validate_roster(data: dict[str, Any], active_days: dict[str, Any]) -> list[str]:
    """Return human-readable problems with the active days of a document."""
    errors = []
    for day in WEEKDAYS:
        if not active_days.get(day):
            continue

        day_data = data.get(day)
        if (
            not isinstance(day_data, dict)
            or not isinstance(day_data.get("morning"), list)
            or not isinstance(day_data.get("evening"), list)
        ):
            errors.append(f"{day} is missing required shift data")
            continue

        for shift in SHIFTS:
            if any(not _carer_name(carer).strip() for carer in day_data[shift]):
                errors.append(f"{day} {shift} shift has empty carer names")
        for shift in SHIFTS:
            if not day_data[shift]:
                errors.append(f"{day} {shift} shift needs at least one carer")
    return errors


def filter_active_days(data: dict[str, Any], active_days: dict[str, Any]) -> dict[str, Any]:
    """Keep active days only, dropping blank carer slots.

    A shift left with no named carer keeps one blank slot so the day still has
    the full shape.
    """
    filtered = {}
    for day in WEEKDAYS:
        if not active_days.get(day):
            continue
        day_data = data.get(day) or {}
        entry = {}
        for shift in SHIFTS:
            named = [c for c in day_data.get(shift) or [] if _carer_name(c).strip()]
            entry[shift] = named or [{"name": ""}]
        entry["instructions"] = day_data.get("instructions", "")
        filtered[day] = entry
    return filtered


def weekday_for(moment: datetime) -> str:
    return WEEKDAYS[moment.weekday()]


def day_shift(data: dict[str, Any], day: str) -> Optional[dict[str, Any]]:
    """The entry for ``day``, or None when the document has nothing usable for it."""
    entry = data.get(day) if isinstance(data, dict) else None
    return entry if isinstance(entry, dict) else None

"""Health check and session debugging routes."""
from datetime import datetime, timezone
from dataclasses import asdict
from fastapi import APIRouter, Request
from jose import JWTError

from roster_api.config import settings
from roster_api.security import COOKIE_NAME, decode_access_token

router = APIRouter()


@router.get("/health")
def health_check():
    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.SERVICE_NAME,
    }


@router.get("/api/debug/session")
def debug_session(request: Request):
    """Report whether the request carries a usable session cookie."""
    token = request.cookies.get(COOKIE_NAME)
    user = None
    if token:
        try:
            user = asdict(decode_access_token(token))
        except JWTError:
            user = None
    return {
        "hasToken": bool(token),
        "user": user,
        "environment": settings.ENVIRONMENT,
    }

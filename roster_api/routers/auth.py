"""Auth API routes: admin login, passwordless carer login, logout, password change."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from roster_api.database import get_db
from roster_api.schemas.base import MessageOut
from roster_api.schemas.user import (
    CarerLoginRequest,
    CarerLoginResponse,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
)
from roster_api.security import (
    TokenClaims,
    clear_session_cookie,
    create_access_token,
    require_admin,
    set_session_cookie,
)
from roster_api.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(response: Response, payload: Optional[LoginRequest] = None, db: Session = Depends(get_db)):
    """Log in by username. Admin accounts must also present their password."""
    payload = payload or LoginRequest()
    user = user_service.authenticate(db, payload.username, payload.password)
    set_session_cookie(response, create_access_token(user))
    return {"user": user}


@router.post("/carer-login", response_model=CarerLoginResponse)
def carer_login(
    response: Response,
    payload: Optional[CarerLoginRequest] = None,
    db: Session = Depends(get_db),
):
    """Log a carer in by name, creating the carer on first use."""
    payload = payload or CarerLoginRequest()
    user = user_service.get_or_create_carer(db, payload.name)
    set_session_cookie(response, create_access_token(user))
    return {
        "user": {
            "id": user.id,
            "username": user.username,
            "role": user.role,
            "display_name": payload.name.strip(),
        }
    }


@router.post("/logout", response_model=MessageOut)
def logout(response: Response):
    clear_session_cookie(response)
    return {"message": "Logged out successfully"}


@router.post("/change-password", response_model=MessageOut)
def change_password(
    payload: Optional[ChangePasswordRequest] = None,
    current_user: TokenClaims = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Change the signed-in admin's password after checking the current one."""
    payload = payload or ChangePasswordRequest()
    user_service.change_password(db, current_user.id, payload.current_password, payload.new_password)
    return {"message": "Password changed successfully"}

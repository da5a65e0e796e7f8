"""Pydantic schemas for authentication and users."""
from __future__ import annotations
from typing import Optional

from roster_api.models.user import UserRole
from roster_api.schemas.base import CamelModel


class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class CarerLoginRequest(CamelModel):
    name: Optional[str] = None


class ChangePasswordRequest(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class UserOut(CamelModel):
    id: int
    username: str
    role: UserRole


class CarerUserOut(UserOut):
    display_name: str


class LoginResponse(CamelModel):
    user: UserOut


class CarerLoginResponse(CamelModel):
    user: CarerUserOut

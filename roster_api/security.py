"""
Session security: bcrypt password hashing, signed JWT session tokens carried in
an httpOnly cookie, and the FastAPI dependencies that guard roster routes.

A missing cookie is a 401; a cookie that fails verification (forged, expired,
malformed) is a 400. Admin-only routes stack `require_admin` on top of
`get_current_user` and answer 403 for any other role.
"""
import logging
import time
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from jose import JWTError, jwt
from passlib.context import CryptContext

from roster_api.config import settings

logger = logging.getLogger(__name__)

COOKIE_NAME = "token"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


@dataclass
class TokenClaims:
    """Decoded session claims attached to each authenticated request."""
    id: int
    username: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def token_lifetime_seconds() -> int:
    return settings.TOKEN_EXPIRE_HOURS * 3600


def create_access_token(user) -> str:
    """Create a signed JWT for the given User model instance."""
    role = getattr(user.role, "value", user.role)
    payload = {
        "id": user.id,
        "username": user.username,
        "role": role,
        "exp": int(time.time()) + token_lifetime_seconds(),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """Verify a token and return its claims. Raises JWTError if it is not acceptable."""
    payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    try:
        return TokenClaims(
            id=int(payload["id"]),
            username=str(payload["username"]),
            role=str(payload["role"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise JWTError("Token is missing required claims") from exc


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        max_age=token_lifetime_seconds(),
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
    )


def get_current_user(request: Request) -> TokenClaims:
    """FastAPI dependency. Resolves the session cookie into claims."""
    token = request.cookies.get(COOKIE_NAME)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )
    try:
        claims = decode_access_token(token)
    except JWTError:
        logger.info("Rejected invalid session token on %s", request.url.path)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid token.")
    request.state.user = claims
    return claims


def require_admin(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required.",
        )
    return current_user

"""User service — login rules, carer provisioning, admin seeding, password changes.

Admins always authenticate with a password. Carers never do: a carer name is
normalized into a username and the matching row is created on first use.
"""
import logging
import re
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster_api.models.user import User, UserRole
from roster_api.security import hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

_WHITESPACE = re.compile(r"\s+")


def normalize_carer_name(name: str) -> str:
    """'  Jane  Doe ' -> 'jane_doe'."""
    return _WHITESPACE.sub("_", name.strip().lower())


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def seed_admin(db: Session, username: str, password: str) -> User:
    """Insert the admin account if it does not exist yet. Never resets a password."""
    existing = get_by_username(db, username)
    if existing:
        return existing
    admin = User(username=username, password_hash=hash_password(password), role=UserRole.admin)
    db.add(admin)
    db.commit()
    db.refresh(admin)
    logger.info("Seeded admin user '%s'", username)
    return admin


def authenticate(db: Session, username: Optional[str], password: Optional[str]) -> User:
    """Resolve a login attempt to a user or raise the matching HTTP error."""
    if not username or not username.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username is required")

    user = get_by_username(db, username)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if user.role == UserRole.admin:
        if not password:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Password is required for admin",
            )
        if not verify_password(password, user.password_hash):
            logger.warning("Failed admin login for '%s'", username)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    logger.info("User '%s' logged in (%s)", user.username, user.role.value)
    return user


def _carer_only(user: User) -> User:
    if user.role != UserRole.carer:
        logger.warning("Refused carer login for non-carer account '%s'", user.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return user


def get_or_create_carer(db: Session, name: Optional[str]) -> User:
    """Insert-or-ignore a carer by normalized name, then return the row.

    A name that normalizes onto an admin account is refused.
    """
    if not name or not name.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Carer name is required")

    username = normalize_carer_name(name)
    user = get_by_username(db, username)
    if user:
        return _carer_only(user)

    user = User(username=username, role=UserRole.carer)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Another request created the same username first.
        db.rollback()
        return _carer_only(get_by_username(db, username))
    db.refresh(user)
    logger.info("Created carer user '%s'", username)
    return user


def change_password(
    db: Session,
    user_id: int,
    current_password: Optional[str],
    new_password: Optional[str],
) -> None:
    """Replace the stored hash after checking the current password."""
    if not current_password or not new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password and new password are required",
        )
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"New password must be at least {MIN_PASSWORD_LENGTH} characters",
        )

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    if not verify_password(current_password, user.password_hash):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Current password is incorrect",
        )

    user.password_hash = hash_password(new_password)
    db.commit()
    logger.info("Password changed for user %s", user.username)

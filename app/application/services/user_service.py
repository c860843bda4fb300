"""User service — registration, login and profile management."""

from typing import List, Optional

import structlog
from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.application.services.auth_service import (
    Identity,
    create_access_token,
    hash_password,
    verify_password,
)
from app.application.services.media_service import MediaManager
from app.core.exceptions import (
    ConflictException,
    EntityNotFoundException,
    UnauthorizedException,
    ValidationException,
)
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    return email.strip().lower()


def register(repo: UserRepository, fullname: Optional[str], email: Optional[str], password: Optional[str]) -> User:
    new_email = normalize_email(email or "")
    if not fullname or not new_email or not password:
        raise ValidationException("Fill in all fields.")

    if repo.get_by_email(new_email):
        raise ConflictException("Email already exists.")

    if len(password.strip()) < MIN_PASSWORD_LENGTH:
        raise ValidationException(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

    user = repo.create({
        "name": fullname,
        "email": new_email,
        "password_hash": hash_password(password),
    })
    logger.info("User registered", user_id=user.id, email=user.email)
    return user


def login(repo: UserRepository, email: Optional[str], password: Optional[str]) -> dict:
    if not email or not password:
        raise ValidationException("Fill all the fields.")

    new_email = normalize_email(email)
    user = repo.get_by_email(new_email)
    if not user:
        raise EntityNotFoundException("We couldn't find an account linked to this email address.")

    if not verify_password(password, user.password_hash):
        raise UnauthorizedException("The password you've entered is incorrect.")

    token = create_access_token(user.id, user.name)
    logger.info("User logged in", user_id=user.id)
    return {"token": token, "id": user.id, "name": user.name, "email": user.email}


def get_profile(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if not user:
        raise EntityNotFoundException("User not found.")
    return user


async def change_avatar(
    repo: UserRepository,
    media: MediaManager,
    identity: Identity,
    avatar: Optional[UploadFile],
) -> User:
    """Replace the caller's avatar.

    The new file is written before the user row changes; the previous file
    is only removed once the row points at the new one.
    """
    if avatar is None or not avatar.filename:
        raise ValidationException("Please choose an image.")

    user = repo.get_by_id(identity.id)
    previous_avatar = user.avatar if user else None

    new_filename = await media.store(
        avatar,
        settings.AVATAR_MAX_BYTES,
        "Profile picture too big. Should be less than 500kb",
    )

    try:
        updated = repo.update_by_id(identity.id, {"avatar": new_filename})
    except SQLAlchemyError:
        media.discard(new_filename)
        raise
    if not updated:
        media.discard(new_filename)
        raise ValidationException("Avatar couldn't be changed.")

    if previous_avatar and previous_avatar != new_filename:
        media.discard(previous_avatar)

    logger.info("Avatar changed", user_id=identity.id, avatar=new_filename)
    return updated


def edit_profile(
    repo: UserRepository,
    identity: Identity,
    name: Optional[str],
    email: Optional[str],
    current_password: Optional[str],
    new_password: Optional[str],
    confirm_new_password: Optional[str],
) -> User:
    new_email = normalize_email(email or "")
    if not name or not new_email or not current_password or not new_password:
        raise ValidationException("Fill in all fields.")

    user = repo.get_by_id(identity.id)
    if not user:
        raise EntityNotFoundException("User not found.")

    email_owner = repo.get_by_email(new_email)
    if email_owner and email_owner.id != identity.id:
        raise ConflictException("Email already exists.")

    if not verify_password(current_password, user.password_hash):
        raise UnauthorizedException("Current password do not match.")

    if new_password != confirm_new_password:
        raise ValidationException("New passwords do not match.")

    if current_password == new_password:
        raise ValidationException("New password must be different from the current password.")

    updated = repo.update(user, {
        "name": name,
        "email": new_email,
        "password_hash": hash_password(new_password),
    })
    logger.info("Profile updated", user_id=updated.id)
    return updated


def list_authors(repo: UserRepository) -> List[User]:
    authors = repo.list_all()
    if not authors:
        raise EntityNotFoundException("No authors have registered in the database.")
    return authors

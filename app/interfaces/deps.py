"""
API Dependencies.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import get_settings
from app.application.services.media_service import MediaManager
from app.domain.models.post import Post
from app.domain.models.user import User
from app.domain.repositories.post_repository import PostRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories.post_repository import SQLAlchemyPostRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    """Get post repository instance."""
    return SQLAlchemyPostRepository(db, Post)


@lru_cache
def get_media_manager() -> MediaManager:
    """Process-wide media manager rooted at UPLOAD_DIR."""
    return MediaManager(get_settings().UPLOAD_DIR)

"""Post service — post CRUD, ownership checks and author post counters."""

from typing import List, Optional

import structlog
from fastapi import UploadFile
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.application.services.auth_service import Identity
from app.application.services.media_service import MediaManager
from app.core.exceptions import (
    BadRequestException,
    EntityNotFoundException,
    UnauthorizedException,
    ValidationException,
)
from app.domain.models.post import Post, PostCategory
from app.domain.repositories.post_repository import PostRepository
from app.domain.repositories.user_repository import UserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)

# Rich-text editors emit "<p><br></p>" (11 chars) for an empty body
MIN_DESCRIPTION_LENGTH = 12
THUMBNAIL_TOO_BIG = "Thumbnail too big. File should be less than 2mb."


def _has_file(upload: Optional[UploadFile]) -> bool:
    return upload is not None and bool(upload.filename)


async def create_post(
    posts: PostRepository,
    users: UserRepository,
    media: MediaManager,
    identity: Identity,
    title: Optional[str],
    category: Optional[str],
    description: Optional[str],
    thumbnail: Optional[UploadFile],
) -> Post:
    if not title or not category or not description or not _has_file(thumbnail):
        raise ValidationException("Fill in all fields and choose thumbnail.")

    if not PostCategory.is_valid(category):
        raise ValidationException("Invalid category.")

    filename = await media.store(thumbnail, settings.THUMBNAIL_MAX_BYTES, THUMBNAIL_TOO_BIG)

    try:
        post = posts.create({
            "title": title,
            "category": category,
            "description": description,
            "thumbnail": filename,
            "creator_id": identity.id,
        })
    except SQLAlchemyError:
        logger.exception("Post creation failed", user_id=identity.id)
        media.discard(filename)
        raise ValidationException("Post couldn't be created.")

    users.adjust_post_count(identity.id, 1)
    logger.info("Post created", post_id=post.id, user_id=identity.id, category=category)
    return post


def list_posts(posts: PostRepository) -> List[Post]:
    result = posts.list_recent()
    if not result:
        raise EntityNotFoundException("Database has empty post.")
    return result


def get_post(posts: PostRepository, post_id: int) -> Post:
    post = posts.get_with_creator(post_id)
    if not post:
        raise EntityNotFoundException("Post not found")
    return post


def list_by_category(posts: PostRepository, category: str) -> List[Post]:
    result = posts.list_by_category(category)
    if not result:
        raise EntityNotFoundException("Database has empty post.")
    return result


def list_by_author(posts: PostRepository, user_id: int) -> List[Post]:
    result = posts.list_by_creator(user_id)
    if not result:
        raise EntityNotFoundException("Database has empty post.")
    return result


async def edit_post(
    posts: PostRepository,
    media: MediaManager,
    identity: Identity,
    post_id: int,
    title: Optional[str],
    category: Optional[str],
    description: Optional[str],
    thumbnail: Optional[UploadFile] = None,
) -> Post:
    if not title or not category or len(description or "") < MIN_DESCRIPTION_LENGTH:
        raise ValidationException("Fill in all fields.")

    if not PostCategory.is_valid(category):
        raise ValidationException("Invalid category.")

    old_post = posts.get_by_id(post_id)
    if not old_post:
        raise EntityNotFoundException("Post not found.")

    if old_post.creator_id != identity.id:
        raise UnauthorizedException("You are not allowed to edit this post")

    values = {"title": title, "category": category, "description": description}
    old_thumbnail = old_post.thumbnail
    new_thumbnail = None
    if _has_file(thumbnail):
        new_thumbnail = await media.store(
            thumbnail, settings.THUMBNAIL_MAX_BYTES, THUMBNAIL_TOO_BIG, keep_basename=True
        )
        values["thumbnail"] = new_thumbnail

    try:
        updated = posts.update_by_id(post_id, values)
    except SQLAlchemyError:
        logger.exception("Post update failed", post_id=post_id)
        updated = None
    if not updated:
        media.discard(new_thumbnail)
        raise BadRequestException("Couldn't update post.")

    if new_thumbnail:
        media.discard(old_thumbnail)

    logger.info("Post updated", post_id=post_id, user_id=identity.id)
    return updated


def delete_post(
    posts: PostRepository,
    users: UserRepository,
    media: MediaManager,
    identity: Identity,
    post_id: int,
) -> dict:
    post = posts.get_by_id(post_id)
    if not post:
        raise EntityNotFoundException("Post unavailable")

    if post.creator_id != identity.id:
        raise UnauthorizedException("You are not allowed to delete this post")

    thumbnail = post.thumbnail
    posts.delete(post_id)
    users.adjust_post_count(identity.id, -1)
    media.discard(thumbnail)

    logger.info("Post deleted", post_id=post_id, user_id=identity.id)
    return {"message": f"Post {post_id} deleted successfully"}

"""Post API routes — create, list, filter, edit and delete posts."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from app.application.services import post_service
from app.application.services.auth_service import Identity
from app.application.services.media_service import MediaManager
from app.domain.repositories.post_repository import PostRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import MessageResponse
from app.domain.schemas.post import PostRead, PostWithAuthorStats, PostWithCreator
from app.interfaces.api.deps import get_current_identity
from app.interfaces.deps import get_media_manager, get_post_repository, get_user_repository

router = APIRouter(prefix="/api/posts", tags=["Posts"])


@router.post("/create-post", response_model=PostRead)
async def create_post(
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
    media: MediaManager = Depends(get_media_manager),
    identity: Identity = Depends(get_current_identity),
):
    post = await post_service.create_post(
        posts, users, media, identity, title, category, description, thumbnail
    )
    return PostRead.model_validate(post)


@router.get("", response_model=List[PostWithAuthorStats])
def list_posts(posts: PostRepository = Depends(get_post_repository)):
    return [PostWithAuthorStats.model_validate(p) for p in post_service.list_posts(posts)]


@router.get("/categories/{category}", response_model=List[PostWithCreator])
def list_category_posts(category: str, posts: PostRepository = Depends(get_post_repository)):
    return [PostWithCreator.model_validate(p) for p in post_service.list_by_category(posts, category)]


@router.get("/users/{user_id}", response_model=List[PostWithCreator])
def list_user_posts(user_id: int, posts: PostRepository = Depends(get_post_repository)):
    return [PostWithCreator.model_validate(p) for p in post_service.list_by_author(posts, user_id)]


@router.get("/{post_id}", response_model=PostWithCreator)
def get_post(post_id: int, posts: PostRepository = Depends(get_post_repository)):
    return PostWithCreator.model_validate(post_service.get_post(posts, post_id))


@router.patch("/{post_id}", response_model=PostRead)
async def edit_post(
    post_id: int,
    title: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    posts: PostRepository = Depends(get_post_repository),
    media: MediaManager = Depends(get_media_manager),
    identity: Identity = Depends(get_current_identity),
):
    post = await post_service.edit_post(
        posts, media, identity, post_id, title, category, description, thumbnail
    )
    return PostRead.model_validate(post)


@router.delete("/{post_id}", response_model=MessageResponse)
def delete_post(
    post_id: int,
    posts: PostRepository = Depends(get_post_repository),
    users: UserRepository = Depends(get_user_repository),
    media: MediaManager = Depends(get_media_manager),
    identity: Identity = Depends(get_current_identity),
):
    return post_service.delete_post(posts, users, media, identity, post_id)

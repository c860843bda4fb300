"""User API routes — register, login, profile, avatar, authors."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, UploadFile, status

from app.application.services import user_service
from app.application.services.auth_service import Identity
from app.application.services.media_service import MediaManager
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import (
    AvatarRead,
    EditUserRequest,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    TokenResponse,
    UserRead,
)
from app.interfaces.api.deps import get_current_identity
from app.interfaces.deps import get_media_manager, get_user_repository

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    user = user_service.register(repo, body.fullname, body.email, body.password)
    return MessageResponse(message=f"New user {user.email} registered.")


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    return TokenResponse(**user_service.login(repo, body.email, body.password))


@router.get("/authors", response_model=List[UserRead])
def list_authors(repo: UserRepository = Depends(get_user_repository)):
    return [UserRead.model_validate(u) for u in user_service.list_authors(repo)]


@router.post("/change-avatar", response_model=AvatarRead)
async def change_avatar(
    avatar: Optional[UploadFile] = File(None),
    repo: UserRepository = Depends(get_user_repository),
    media: MediaManager = Depends(get_media_manager),
    identity: Identity = Depends(get_current_identity),
):
    user = await user_service.change_avatar(repo, media, identity, avatar)
    return AvatarRead.model_validate(user)


@router.patch("/edit-user", response_model=UserRead)
def edit_user(
    body: EditUserRequest,
    repo: UserRepository = Depends(get_user_repository),
    identity: Identity = Depends(get_current_identity),
):
    user = user_service.edit_profile(
        repo,
        identity,
        name=body.name,
        email=body.email,
        current_password=body.currentPassword,
        new_password=body.newPassword,
        confirm_new_password=body.confirmNewPassword,
    )
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    repo: UserRepository = Depends(get_user_repository),
    identity: Identity = Depends(get_current_identity),
):
    return UserRead.model_validate(user_service.get_profile(repo, user_id))

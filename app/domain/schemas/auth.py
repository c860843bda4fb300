"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class RegisterRequest(BaseModel):
    fullname: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class EditUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    currentPassword: Optional[str] = None
    newPassword: Optional[str] = None
    confirmNewPassword: Optional[str] = None


class UserRead(BaseModel):
    id: int
    name: str
    email: str
    avatar: Optional[str] = None
    posts: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class AvatarRead(BaseModel):
    id: int
    avatar: Optional[str] = None

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    token: str
    id: int
    name: str
    email: str


class MessageResponse(BaseModel):
    message: str

"""Pydantic schemas for Post and its populated creator."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class CreatorBrief(BaseModel):
    id: int
    name: str
    avatar: Optional[str] = None

    model_config = {"from_attributes": True}


class CreatorRead(CreatorBrief):
    posts: int = 0


class PostBase(BaseModel):
    id: int
    title: str
    category: str
    description: str
    thumbnail: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PostRead(PostBase):
    """Post with the creator as a bare user id."""

    creator: int = Field(validation_alias="creator_id")


class PostWithCreator(PostBase):
    """Post with the creator's public profile joined in."""

    creator: CreatorBrief


class PostWithAuthorStats(PostBase):
    creator: CreatorRead

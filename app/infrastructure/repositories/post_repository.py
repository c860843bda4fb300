"""
SQLAlchemy Implementation of Post Repository.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import joinedload

from app.domain.models.post import Post
from app.domain.repositories.post_repository import PostRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyPostRepository(SQLAlchemyRepository[Post], PostRepository):
    """Post repository implementation using SQLAlchemy."""

    def _recent_query(self):
        return (
            self.db.query(Post)
            .options(joinedload(Post.creator))
            .order_by(Post.updated_at.desc(), Post.id.desc())
        )

    def list_recent(self) -> List[Post]:
        return self._recent_query().all()

    def list_by_category(self, category: str) -> List[Post]:
        return self._recent_query().filter(func.lower(Post.category) == category.lower()).all()

    def list_by_creator(self, creator_id: int) -> List[Post]:
        return self._recent_query().filter(Post.creator_id == creator_id).all()

    def get_with_creator(self, id: int) -> Optional[Post]:
        return (
            self.db.query(Post)
            .options(joinedload(Post.creator))
            .filter(Post.id == id)
            .first()
        )

"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from sqlalchemy import update

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> List[User]:
        return self.list()

    def adjust_post_count(self, id: int, delta: int) -> None:
        """Single UPDATE statement, so concurrent requests cannot lose a change."""
        self.db.execute(
            update(User)
            .where(User.id == id)
            .values(posts=User.posts + delta)
            .execution_options(synchronize_session=False)
        )
        self._commit()
        self.db.expire_all()

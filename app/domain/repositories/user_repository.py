"""
User Repository Interface.
Defines data access operations for User credentials and counters.
"""

from typing import List, Optional
from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by (already normalized) email."""
        ...

    def list_all(self) -> List[User]:
        """Get every registered user."""
        ...

    def adjust_post_count(self, id: int, delta: int) -> None:
        """Atomically add delta to the user's post counter."""
        ...

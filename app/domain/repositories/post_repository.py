"""
Post Repository Interface.
Defines data access operations for Posts.
"""

from typing import List, Optional
from app.domain.repositories.base import BaseRepository
from app.domain.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Interface for Post-specific operations."""

    def list_recent(self) -> List[Post]:
        """Get all posts, most recently updated first, with creators loaded."""
        ...

    def list_by_category(self, category: str) -> List[Post]:
        """Get posts whose category matches case-insensitively."""
        ...

    def list_by_creator(self, creator_id: int) -> List[Post]:
        """Get posts written by a user."""
        ...

    def get_with_creator(self, id: int) -> Optional[Post]:
        """Get a post with its creator loaded."""
        ...

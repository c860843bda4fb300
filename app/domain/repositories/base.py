"""
Shared store contract for users and posts.

Every write commits immediately; there is no unit of work spanning calls,
so callers that pair a row write with a file write order the two themselves.
"""

from typing import TypeVar, List, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Single-row reads and committed writes keyed by integer id."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Row with this id, or None."""
        ...

    def list(self) -> List[T]:
        """Every row, oldest id first."""
        ...

    def create(self, values: dict) -> T:
        """Insert a row from column values and return it refreshed."""
        ...

    def update(self, db_obj: T, values: dict) -> T:
        """Set the given columns on a loaded row, commit and refresh it."""
        ...

    def update_by_id(self, id: int, values: dict) -> Optional[T]:
        """Like update, but loads the row first; None when it no longer exists."""
        ...

    def delete(self, id: int) -> Optional[T]:
        """Remove the row and return it, or None when it was already gone."""
        ...

"""
User Repository implementation with user-specific operations.
"""
from typing import Optional
from .base_repository import BaseRepository
from ..models import User


class UserRepository(BaseRepository[User]):
    """Repository for User-specific operations."""

    def __init__(self, session=None):
        super().__init__(User, session)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username."""
        return self.find_one_by(username=username)

"""
User service - existence checks against the external user store.
"""
from __future__ import annotations

from typing import Optional

from ..models import User
from ..repositories import UserRepository
from .base_service import BaseService


class UserService(BaseService):
    logger_name = "services.user"

    def __init__(self, user_repo: Optional[UserRepository] = None, session=None):
        super().__init__(session)
        self.user_repo = user_repo or UserRepository(self.session)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.user_repo.get_by_id(user_id)

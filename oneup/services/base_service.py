"""
Base Service class providing common business operations.
"""

from typing import Optional

from sqlalchemy.orm import Session

from ..extensions import db
from ..utils.logging_utils import get_logger


class BaseService:
    """Base service holding the session and a per-service logger."""

    logger_name: str = "services"

    def __init__(self, session: Optional[Session] = None):
        self.session = session or db.session
        self.logger = get_logger(self.logger_name)

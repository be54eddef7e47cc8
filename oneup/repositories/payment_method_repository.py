"""
PaymentMethod Repository implementation.
"""
from .base_repository import BaseRepository
from ..models import PaymentMethod


class PaymentMethodRepository(BaseRepository[PaymentMethod]):
    """Repository for PaymentMethod records."""

    def __init__(self, session=None):
        super().__init__(PaymentMethod, session)

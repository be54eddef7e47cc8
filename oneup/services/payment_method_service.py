"""
PaymentMethod service - plain CRUD over stored billing records.
"""
from __future__ import annotations

from typing import List, Optional

from ..models import PaymentMethod
from ..repositories import PaymentMethodRepository
from .base_service import BaseService


class PaymentMethodService(BaseService):
    logger_name = "services.payment_method"

    def __init__(self, payment_method_repo: Optional[PaymentMethodRepository] = None, session=None):
        super().__init__(session)
        self.payment_method_repo = payment_method_repo or PaymentMethodRepository(self.session)

    def get_all_payment_methods(self) -> List[PaymentMethod]:
        return self.payment_method_repo.get_all()

    def get_payment_method_by_id(self, payment_method_id: int) -> Optional[PaymentMethod]:
        """Absence is a valid result, not an error."""
        return self.payment_method_repo.get_by_id(payment_method_id)

    def save_payment_method(self, payment_method: PaymentMethod) -> PaymentMethod:
        payment_method = self.payment_method_repo.save(payment_method)
        self.logger.info(f"Saved payment method {payment_method.id}")
        return payment_method

    def update_payment_method(self, payment_method_id: int, payment_method: PaymentMethod) -> PaymentMethod:
        """Replace the stored record with ``payment_method_id`` entirely."""
        payment_method.id = payment_method_id
        payment_method = self.payment_method_repo.save(payment_method)
        self.logger.info(f"Replaced payment method {payment_method_id}")
        return payment_method

    def delete_payment_method(self, payment_method_id: int) -> None:
        if not self.payment_method_repo.delete_by_id(payment_method_id):
            self.logger.debug(f"Delete requested for missing payment method {payment_method_id}")

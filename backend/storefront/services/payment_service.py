"""
Payment Service

Validation and orchestration for payments recorded against orders, plus the
payment summary aggregates. order_id is a numeric reference only.
"""

import logging
from typing import Any, Dict, List, Optional

from storefront.models.payment import Payment, PaymentMethod, PaymentStatus
from storefront.repositories.payments import PaymentRepository
from storefront.services.errors import StoreError, service_operation
from storefront.services.validation import (
    check_choice,
    require_fields,
    require_id,
    require_value,
    to_date,
    to_int,
    to_positive_amount,
    today,
)

logger = logging.getLogger(__name__)

PAYMENT_METHODS = [m.value for m in PaymentMethod]
PAYMENT_STATUSES = [s.value for s in PaymentStatus]


def _check_method(method: Any) -> str:
    return check_choice(method, PAYMENT_METHODS, "Invalid payment method")


def _check_status(status: Any) -> str:
    return check_choice(status, PAYMENT_STATUSES, "Invalid payment status")


class PaymentService:
    def __init__(self, repository: PaymentRepository):
        self.repository = repository

    @service_operation("Error fetching payments")
    def list_payments(self) -> List[Payment]:
        return self.repository.find_all()

    @service_operation("Error fetching payment")
    def get_payment_by_id(self, payment_id: Any) -> Optional[Payment]:
        require_id(payment_id, "Payment ID is required")
        return self.repository.find_by_id(payment_id) or None

    @service_operation("Error fetching payments by order")
    def get_payments_by_order(self, order_id: Any) -> List[Payment]:
        require_id(order_id, "Order ID is required")
        return self.repository.find_by_order_id(to_int(order_id, "Order ID"))

    @service_operation("Error fetching payments by status")
    def get_payments_by_status(self, status: Any) -> List[Payment]:
        require_value(status, "Status is required")
        return self.repository.find_by_status(_check_status(status))

    @service_operation("Error fetching payments by date range")
    def get_payments_by_date_range(self, start_date: Any, end_date: Any) -> List[Payment]:
        require_value(start_date and end_date, "Start date and end date are required")
        return self.repository.find_by_date_range(to_date(start_date, "Start date"), to_date(end_date, "End date"))

    @service_operation("Error creating payment")
    def create_payment(self, fields: Dict[str, Any]) -> Payment:
        require_fields(fields, ("order_id", "method", "amount"), "Order ID, method, and amount are required fields")
        order_id = to_int(fields["order_id"], "Order ID")
        amount = to_positive_amount(fields["amount"], "Amount")
        method = _check_method(fields["method"])

        status = fields.get("status")
        if status:
            _check_status(status)

        payment_date = fields.get("payment_date")
        payment_data = {
            "order_id": order_id,
            "method": method,
            "amount": amount,
            "payment_date": to_date(payment_date, "Payment date") if payment_date else today(),
            "status": status or PaymentStatus.pending.value,
        }
        payment = self.repository.create(payment_data)
        logger.info(f"Created payment {payment.id_payment} for order {order_id}")
        return payment

    @service_operation("Error updating payment")
    def update_payment(self, payment_id: Any, fields: Dict[str, Any]) -> Optional[Payment]:
        require_id(payment_id, "Payment ID is required for update")

        existing = self.repository.find_by_id(payment_id)
        if not existing:
            return None

        update_data: Dict[str, Any] = {}
        if "amount" in fields:
            update_data["amount"] = to_positive_amount(fields["amount"], "Amount")
        if "order_id" in fields:
            update_data["order_id"] = to_int(fields["order_id"], "Order ID")
        if "method" in fields:
            update_data["method"] = _check_method(fields["method"])
        if "status" in fields:
            update_data["status"] = _check_status(fields["status"])
        if "payment_date" in fields:
            update_data["payment_date"] = to_date(fields["payment_date"], "Payment date")

        if not update_data:
            return existing

        if not self.repository.update(payment_id, update_data):
            raise StoreError("Failed to update payment")
        return self.repository.find_by_id(payment_id)

    @service_operation("Error deleting payment")
    def delete_payment(self, payment_id: Any) -> Optional[Payment]:
        """Soft delete. Payments have no hard-delete path."""
        require_id(payment_id, "Payment ID is required for delete")

        existing = self.repository.find_by_id(payment_id)
        if not existing:
            return None

        if not self.repository.soft_delete(payment_id):
            raise StoreError("Failed to delete payment")
        logger.info(f"Soft-deleted payment {payment_id}")
        return existing

    @service_operation("Error getting payment summary")
    def get_payment_summary(self) -> List[Dict[str, Any]]:
        return self.repository.summary()

    @service_operation("Error getting total by status")
    def get_total_by_status(self, status: Any) -> float:
        require_value(status, "Status is required")
        return self.repository.total_by_status(_check_status(status))

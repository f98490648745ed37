"""
Order Service

Validation and orchestration for order headers, plus the read-only reporting
aggregates (totals by status, per-customer totals, monthly statistics).

customer_id is a numeric reference only; the service does not verify that
the customer exists.
"""

import logging
from typing import Any, Dict, List, Optional

from storefront.models.order_header import OrderHeader, OrderStatus
from storefront.repositories.orders import OrderRepository
from storefront.services.errors import StoreError, service_operation
from storefront.services.validation import (
    check_choice,
    require_fields,
    require_id,
    require_value,
    to_date,
    to_int,
    to_positive_amount,
    to_year,
    today,
)

logger = logging.getLogger(__name__)

ORDER_STATUSES = [s.value for s in OrderStatus]


def _check_status(status: Any) -> str:
    return check_choice(status, ORDER_STATUSES, "Invalid order status")


class OrderService:
    def __init__(self, repository: OrderRepository):
        self.repository = repository

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @service_operation("Error fetching orders")
    def list_orders(self) -> List[OrderHeader]:
        return self.repository.find_all()

    @service_operation("Error fetching order")
    def get_order_by_id(self, order_id: Any) -> Optional[OrderHeader]:
        require_id(order_id, "Order ID is required")
        return self.repository.find_by_id(order_id) or None

    @service_operation("Error fetching orders by customer")
    def get_orders_by_customer(self, customer_id: Any) -> List[OrderHeader]:
        require_id(customer_id, "Customer ID is required")
        return self.repository.find_by_customer_id(to_int(customer_id, "Customer ID"))

    @service_operation("Error fetching orders by status")
    def get_orders_by_status(self, status: Any) -> List[OrderHeader]:
        require_value(status, "Status is required")
        return self.repository.find_by_status(_check_status(status))

    @service_operation("Error fetching orders by date range")
    def get_orders_by_date_range(self, start_date: Any, end_date: Any) -> List[OrderHeader]:
        require_value(start_date and end_date, "Start date and end date are required")
        return self.repository.find_by_date_range(to_date(start_date, "Start date"), to_date(end_date, "End date"))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    @service_operation("Error creating order")
    def create_order(self, fields: Dict[str, Any]) -> OrderHeader:
        require_fields(fields, ("customer_id", "total"), "Customer ID and total are required fields")
        customer_id = to_int(fields["customer_id"], "Customer ID")
        total = to_positive_amount(fields["total"], "Total")

        status = fields.get("status")
        if status:
            _check_status(status)

        order_date = fields.get("order_date")
        order_data = {
            "customer_id": customer_id,
            "total": total,
            "order_date": to_date(order_date, "Order date") if order_date else today(),
            "status": status or OrderStatus.pending.value,
            "notes": fields.get("notes") or None,
        }
        order = self.repository.create(order_data)
        logger.info(f"Created order {order.id_order_header} for customer {customer_id}")
        return order

    @service_operation("Error updating order")
    def update_order(self, order_id: Any, fields: Dict[str, Any]) -> Optional[OrderHeader]:
        require_id(order_id, "Order ID is required for update")

        existing = self.repository.find_by_id(order_id)
        if not existing:
            return None

        update_data: Dict[str, Any] = {}
        if "total" in fields:
            update_data["total"] = to_positive_amount(fields["total"], "Total")
        if "customer_id" in fields:
            update_data["customer_id"] = to_int(fields["customer_id"], "Customer ID")
        if "status" in fields:
            update_data["status"] = _check_status(fields["status"])
        if "order_date" in fields:
            update_data["order_date"] = to_date(fields["order_date"], "Order date")
        if "notes" in fields:
            update_data["notes"] = fields["notes"]

        if not update_data:
            return existing

        if not self.repository.update(order_id, update_data):
            raise StoreError("Failed to update order")
        return self.repository.find_by_id(order_id)

    @service_operation("Error deleting order")
    def delete_order(self, order_id: Any) -> Optional[OrderHeader]:
        """Soft delete. Orders have no hard-delete path."""
        require_id(order_id, "Order ID is required for delete")

        existing = self.repository.find_by_id(order_id)
        if not existing:
            return None

        if not self.repository.soft_delete(order_id):
            raise StoreError("Failed to delete order")
        logger.info(f"Soft-deleted order {order_id}")
        return existing

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    @service_operation("Error getting order statistics")
    def get_order_stats(self) -> List[Dict[str, Any]]:
        return self.repository.totals_by_status()

    @service_operation("Error getting customer totals")
    def get_customer_totals(self, customer_id: Any) -> Dict[str, Any]:
        require_id(customer_id, "Customer ID is required")
        return self.repository.totals_by_customer(to_int(customer_id, "Customer ID"))

    @service_operation("Error getting monthly statistics")
    def get_monthly_stats(self, year: Any) -> List[Dict[str, Any]]:
        return self.repository.monthly_stats(to_year(year))

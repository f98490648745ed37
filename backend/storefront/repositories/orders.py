from datetime import date
from typing import Any, Dict, List

from sqlalchemy import extract
from sqlmodel import func, select

from storefront.models.order_header import OrderHeader
from storefront.repositories.base import SoftDeleteRepository


class OrderRepository(SoftDeleteRepository[OrderHeader]):
    """Persistence gateway for the order_header table."""

    model = OrderHeader
    pk_name = "id_order_header"

    def find_all(self) -> List[OrderHeader]:
        stmt = self._live().order_by(OrderHeader.created_at.desc(), OrderHeader.id_order_header.desc())
        return list(self.session.exec(stmt).all())

    def _newest_first(self, stmt):
        return stmt.order_by(OrderHeader.order_date.desc(), OrderHeader.id_order_header.desc())

    def find_by_customer_id(self, customer_id: int) -> List[OrderHeader]:
        stmt = self._newest_first(self._live().where(OrderHeader.customer_id == customer_id))
        return list(self.session.exec(stmt).all())

    def find_by_status(self, status: str) -> List[OrderHeader]:
        stmt = self._newest_first(self._live().where(OrderHeader.status == status))
        return list(self.session.exec(stmt).all())

    def find_by_date_range(self, start_date: date, end_date: date) -> List[OrderHeader]:
        stmt = self._newest_first(self._live().where(OrderHeader.order_date.between(start_date, end_date)))
        return list(self.session.exec(stmt).all())

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def totals_by_status(self) -> List[Dict[str, Any]]:
        stmt = (
            select(OrderHeader.status, func.count(), func.coalesce(func.sum(OrderHeader.total), 0))
            .where(OrderHeader.deleted_at.is_(None))
            .group_by(OrderHeader.status)
            .order_by(OrderHeader.status)
        )
        return [
            {"status": status, "count": int(count), "total_amount": float(total)}
            for status, count, total in self.session.exec(stmt).all()
        ]

    def totals_by_customer(self, customer_id: int) -> Dict[str, Any]:
        stmt = select(func.coalesce(func.sum(OrderHeader.total), 0), func.count()).where(
            OrderHeader.customer_id == customer_id, OrderHeader.deleted_at.is_(None)
        )
        total, count = self.session.exec(stmt).one()
        return {
            "customer_id": customer_id,
            "total_amount": float(total or 0),
            "order_count": int(count or 0),
        }

    def monthly_stats(self, year: int) -> List[Dict[str, Any]]:
        month = extract("month", OrderHeader.order_date)
        stmt = (
            select(month, func.count(), func.coalesce(func.sum(OrderHeader.total), 0))
            .where(OrderHeader.deleted_at.is_(None), extract("year", OrderHeader.order_date) == year)
            .group_by(month)
            .order_by(month)
        )
        return [
            {"month": int(m), "order_count": int(count), "total_amount": float(total)}
            for m, count, total in self.session.exec(stmt).all()
        ]

from datetime import date
from typing import Any, Dict, List

from sqlmodel import func, select

from storefront.models.payment import Payment
from storefront.repositories.base import SoftDeleteRepository


class PaymentRepository(SoftDeleteRepository[Payment]):
    """Persistence gateway for the payment table."""

    model = Payment
    pk_name = "id_payment"

    def find_by_order_id(self, order_id: int) -> List[Payment]:
        stmt = self._live().where(Payment.order_id == order_id).order_by(Payment.id_payment)
        return list(self.session.exec(stmt).all())

    def find_by_status(self, status: str) -> List[Payment]:
        stmt = self._live().where(Payment.status == status).order_by(Payment.id_payment)
        return list(self.session.exec(stmt).all())

    def find_by_date_range(self, start_date: date, end_date: date) -> List[Payment]:
        stmt = (
            self._live()
            .where(Payment.payment_date.between(start_date, end_date))
            .order_by(Payment.payment_date.desc(), Payment.id_payment.desc())
        )
        return list(self.session.exec(stmt).all())

    def summary(self) -> List[Dict[str, Any]]:
        stmt = (
            select(Payment.status, func.count(), func.coalesce(func.sum(Payment.amount), 0))
            .where(Payment.deleted_at.is_(None))
            .group_by(Payment.status)
            .order_by(Payment.status)
        )
        return [
            {"status": status, "count": int(count), "total": float(total)}
            for status, count, total in self.session.exec(stmt).all()
        ]

    def total_by_status(self, status: str) -> float:
        stmt = select(func.coalesce(func.sum(Payment.amount), 0)).where(
            Payment.status == status, Payment.deleted_at.is_(None)
        )
        return float(self.session.exec(stmt).one() or 0)

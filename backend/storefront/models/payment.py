from datetime import date, datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from storefront.models.timestamps import utcnow


class PaymentMethod(str, Enum):
    credit_card = "credit_card"
    debit_card = "debit_card"
    paypal = "paypal"
    bank_transfer = "bank_transfer"
    cash = "cash"
    check = "check"


class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"
    refunded = "refunded"
    cancelled = "cancelled"


class Payment(SQLModel, table=True):
    __tablename__ = "payment"

    id_payment: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(index=True)
    method: str
    amount: float
    payment_date: date
    status: str = Field(default=PaymentStatus.pending.value, index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow})
    deleted_at: Optional[datetime] = Field(default=None, index=True)

from datetime import date, datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel

from storefront.models.timestamps import utcnow


class OrderStatus(str, Enum):
    pending = "pending"
    processing = "processing"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"


class OrderHeader(SQLModel, table=True):
    __tablename__ = "order_header"

    id_order_header: Optional[int] = Field(default=None, primary_key=True)
    customer_id: int = Field(index=True)
    total: float
    order_date: date
    status: str = Field(default=OrderStatus.pending.value, index=True)
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow, sa_column_kwargs={"onupdate": utcnow})
    deleted_at: Optional[datetime] = Field(default=None, index=True)

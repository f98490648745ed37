"""
Shared response models.

Every endpoint answers with the same envelope:
    {"success": true, "message": "...", "data": ...}
Errors use the same shape with success=false and no data.
"""

from datetime import date, datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None


def envelope(data: Any = None, message: Optional[str] = None) -> dict:
    return {"success": True, "message": message, "data": data}


class UserResponse(BaseModel):
    """Public user profile. The password hash is never serialized."""

    model_config = ConfigDict(from_attributes=True)

    id_user: int
    name: str
    last_name: str
    phone: Optional[str] = None
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_product: int
    name: str
    artist: str
    genre_id: int
    price: float
    publication_date: Optional[date] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_order_header: int
    customer_id: int
    total: float
    order_date: date
    status: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaymentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id_payment: int
    order_id: int
    method: str
    amount: float
    payment_date: date
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

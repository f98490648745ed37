"""
Payment API Routes
Payment CRUD, finders and summaries (protected).

A missing payment is a plain 404, like every other entity.
"""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from storefront.dependencies import get_payment_service
from storefront.schemas import ApiResponse, PaymentResponse, envelope
from storefront.services.payment_service import PaymentService

router = APIRouter()


class PaymentCreateRequest(BaseModel):
    order_id: Optional[Union[int, str]] = None
    method: Optional[str] = None
    amount: Optional[Union[float, str]] = None
    payment_date: Optional[str] = None
    status: Optional[str] = None


class PaymentUpdateRequest(PaymentCreateRequest):
    pass


def _not_found():
    return HTTPException(status_code=404, detail="Payment not found")


def _payments(rows) -> List[PaymentResponse]:
    return [PaymentResponse.model_validate(p) for p in rows]


@router.get("/payments/stats/summary", response_model=ApiResponse[List[Dict[str, Any]]])
def get_payment_summary(service: PaymentService = Depends(get_payment_service)):
    """Payment count and total amount per status"""
    return envelope(service.get_payment_summary())


@router.get("/payments/stats/status/{status}", response_model=ApiResponse[Dict[str, Any]])
def get_total_by_status(status: str, service: PaymentService = Depends(get_payment_service)):
    total = service.get_total_by_status(status)
    return envelope({"status": status, "total": total})


@router.get("/payments/order/{order_id}", response_model=ApiResponse[List[PaymentResponse]])
def get_payments_by_order(order_id: str, service: PaymentService = Depends(get_payment_service)):
    return envelope(_payments(service.get_payments_by_order(order_id)))


@router.get("/payments/status/{status}", response_model=ApiResponse[List[PaymentResponse]])
def get_payments_by_status(status: str, service: PaymentService = Depends(get_payment_service)):
    return envelope(_payments(service.get_payments_by_status(status)))


@router.get("/payments/date-range", response_model=ApiResponse[List[PaymentResponse]])
def get_payments_by_date_range(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    service: PaymentService = Depends(get_payment_service),
):
    return envelope(_payments(service.get_payments_by_date_range(start_date, end_date)))


@router.get("/payments", response_model=ApiResponse[List[PaymentResponse]])
def list_payments(service: PaymentService = Depends(get_payment_service)):
    return envelope(_payments(service.list_payments()))


@router.get("/payments/{payment_id}", response_model=ApiResponse[PaymentResponse])
def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    payment = service.get_payment_by_id(payment_id)
    if not payment:
        raise _not_found()
    return envelope(PaymentResponse.model_validate(payment))


@router.post("/payments", response_model=ApiResponse[PaymentResponse], status_code=201)
def create_payment(request: PaymentCreateRequest, service: PaymentService = Depends(get_payment_service)):
    payment = service.create_payment(request.model_dump(exclude_unset=True))
    return envelope(PaymentResponse.model_validate(payment), "Payment created successfully")


@router.put("/payments/{payment_id}", response_model=ApiResponse[PaymentResponse])
def update_payment(
    payment_id: int, request: PaymentUpdateRequest, service: PaymentService = Depends(get_payment_service)
):
    payment = service.update_payment(payment_id, request.model_dump(exclude_unset=True))
    if not payment:
        raise _not_found()
    return envelope(PaymentResponse.model_validate(payment), "Payment updated successfully")


@router.delete("/payments/{payment_id}", response_model=ApiResponse[PaymentResponse])
def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    payment = service.delete_payment(payment_id)
    if not payment:
        raise _not_found()
    return envelope(PaymentResponse.model_validate(payment), "Payment deleted successfully (soft delete)")

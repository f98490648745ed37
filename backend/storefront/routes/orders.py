"""
Order API Routes
Order header CRUD, finders, and reporting endpoints (protected).

Static paths are registered before /orders/{order_id} so they are not
captured by the id parameter.
"""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from storefront.dependencies import get_order_service
from storefront.schemas import ApiResponse, OrderResponse, envelope
from storefront.services.order_service import OrderService

router = APIRouter()


class OrderCreateRequest(BaseModel):
    customer_id: Optional[Union[int, str]] = None
    total: Optional[Union[float, str]] = None
    order_date: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None


class OrderUpdateRequest(OrderCreateRequest):
    pass


def _not_found():
    return HTTPException(status_code=404, detail="Order not found")


def _orders(rows) -> List[OrderResponse]:
    return [OrderResponse.model_validate(o) for o in rows]


# ============================================================================
# Reporting
# ============================================================================


@router.get("/orders/stats/overview", response_model=ApiResponse[List[Dict[str, Any]]])
def get_order_stats(service: OrderService = Depends(get_order_service)):
    """Order count and total amount per status"""
    return envelope(service.get_order_stats())


@router.get("/orders/stats/customer/{customer_id}", response_model=ApiResponse[Dict[str, Any]])
def get_customer_totals(customer_id: str, service: OrderService = Depends(get_order_service)):
    return envelope(service.get_customer_totals(customer_id))


@router.get("/orders/stats/monthly/{year}", response_model=ApiResponse[List[Dict[str, Any]]])
def get_monthly_stats(year: str, service: OrderService = Depends(get_order_service)):
    return envelope(service.get_monthly_stats(year))


# ============================================================================
# Finders
# ============================================================================


@router.get("/orders/customer/{customer_id}", response_model=ApiResponse[List[OrderResponse]])
def get_orders_by_customer(customer_id: str, service: OrderService = Depends(get_order_service)):
    return envelope(_orders(service.get_orders_by_customer(customer_id)))


@router.get("/orders/status/{status}", response_model=ApiResponse[List[OrderResponse]])
def get_orders_by_status(status: str, service: OrderService = Depends(get_order_service)):
    return envelope(_orders(service.get_orders_by_status(status)))


@router.get("/orders/date-range", response_model=ApiResponse[List[OrderResponse]])
def get_orders_by_date_range(
    start_date: Optional[str] = Query(default=None, alias="startDate"),
    end_date: Optional[str] = Query(default=None, alias="endDate"),
    service: OrderService = Depends(get_order_service),
):
    return envelope(_orders(service.get_orders_by_date_range(start_date, end_date)))


# ============================================================================
# CRUD
# ============================================================================


@router.get("/orders", response_model=ApiResponse[List[OrderResponse]])
def list_orders(service: OrderService = Depends(get_order_service)):
    return envelope(_orders(service.list_orders()))


@router.get("/orders/{order_id}", response_model=ApiResponse[OrderResponse])
def get_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = service.get_order_by_id(order_id)
    if not order:
        raise _not_found()
    return envelope(OrderResponse.model_validate(order))


@router.post("/orders", response_model=ApiResponse[OrderResponse], status_code=201)
def create_order(request: OrderCreateRequest, service: OrderService = Depends(get_order_service)):
    order = service.create_order(request.model_dump(exclude_unset=True))
    return envelope(OrderResponse.model_validate(order), "Order created successfully")


@router.put("/orders/{order_id}", response_model=ApiResponse[OrderResponse])
def update_order(order_id: int, request: OrderUpdateRequest, service: OrderService = Depends(get_order_service)):
    order = service.update_order(order_id, request.model_dump(exclude_unset=True))
    if not order:
        raise _not_found()
    return envelope(OrderResponse.model_validate(order), "Order updated successfully")


@router.delete("/orders/{order_id}", response_model=ApiResponse[OrderResponse])
def delete_order(order_id: int, service: OrderService = Depends(get_order_service)):
    order = service.delete_order(order_id)
    if not order:
        raise _not_found()
    return envelope(OrderResponse.model_validate(order), "Order deleted successfully (soft delete)")

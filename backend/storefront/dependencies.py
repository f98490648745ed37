"""
FastAPI dependencies: per-request service construction and cookie auth.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Cookie, Depends, HTTPException
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories import OrderRepository, PaymentRepository, ProductRepository, UserRepository
from storefront.security import decode_access_token
from storefront.services.auth_service import AuthService
from storefront.services.errors import AuthenticationError
from storefront.services.order_service import OrderService
from storefront.services.payment_service import PaymentService
from storefront.services.product_service import ProductService
from storefront.services.user_service import UserService

logger = logging.getLogger(__name__)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session))


def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(ProductRepository(session))


def get_order_service(session: Session = Depends(get_session)) -> OrderService:
    return OrderService(OrderRepository(session))


def get_payment_service(session: Session = Depends(get_session)) -> PaymentService:
    return PaymentService(PaymentRepository(session))


def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(UserRepository(session))


def require_auth(token: Optional[str] = Cookie(default=None)) -> Dict[str, Any]:
    """
    Guard for protected routers. Reads the "token" cookie.

    Raises:
        HTTPException 403: no token cookie
        HTTPException 401: token invalid or expired
    """
    if not token:
        raise HTTPException(status_code=403, detail="Token not provided")
    try:
        return decode_access_token(token)
    except AuthenticationError as e:
        logger.warning(f"Rejected request: {e.message}")
        raise HTTPException(status_code=401, detail="Invalid or expired token")

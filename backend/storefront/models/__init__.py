from storefront.models.order_header import OrderHeader, OrderStatus
from storefront.models.payment import Payment, PaymentMethod, PaymentStatus
from storefront.models.product import Product
from storefront.models.user import User

__all__ = [
    "User",
    "Product",
    "OrderHeader",
    "OrderStatus",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
]

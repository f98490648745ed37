"""
Persistence gateways, one per table.

Each gateway wraps a SQLModel Session and is injected into its entity service.
"""

from storefront.repositories.orders import OrderRepository
from storefront.repositories.payments import PaymentRepository
from storefront.repositories.products import ProductRepository
from storefront.repositories.users import UserRepository

__all__ = ["UserRepository", "ProductRepository", "OrderRepository", "PaymentRepository"]

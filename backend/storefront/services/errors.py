"""
Service Error Taxonomy

Every failure leaving an entity service is a ServiceError tagged with a kind:

- validation:     missing/invalid input, detected locally, never retried
- conflict:       uniqueness violation (duplicate email, duplicate product name)
- store:          anything raised by the persistence layer
- authentication: bad credentials or an unusable token

"Not found" is not an error: lookups and mutations return None instead.

Message text is part of the contract. Each service operation wraps failures
exactly once as "<operation prefix>: <original message>".
"""

import functools
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    validation = "validation"
    conflict = "conflict"
    store = "store"
    authentication = "authentication"


class ServiceError(Exception):
    """Base class for all service-layer failures"""

    kind: ErrorKind = ErrorKind.store

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    kind = ErrorKind.validation


class ConflictError(ServiceError):
    kind = ErrorKind.conflict


class StoreError(ServiceError):
    kind = ErrorKind.store


class AuthenticationError(ServiceError):
    kind = ErrorKind.authentication


def service_operation(prefix: str):
    """
    Wrap a service method so any failure is re-raised with a fixed prefix.

    ServiceErrors keep their kind. Anything else (SQLAlchemy errors, driver
    errors, a broken gateway) becomes a StoreError.

    Usage:
        @service_operation("Error creating order")
        def create_order(self, fields): ...
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ServiceError as exc:
                raise type(exc)(f"{prefix}: {exc.message}") from exc
            except Exception as exc:
                logger.error(f"{prefix}: store failure in {func.__qualname__}: {exc}")
                raise StoreError(f"{prefix}: {exc}") from exc

        return wrapper

    return decorator

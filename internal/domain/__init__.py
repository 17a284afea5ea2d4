"""
Domain package for Product Registry Service.

Contains the product entity and domain errors.
"""
from .product import (
    MUTABLE_FIELDS,
    REQUIRED_FIELDS,
    Product,
    missing_required_fields,
)
from .errors import (
    DomainError,
    DomainValidationError,
    ProductNotFoundError,
)

__all__ = [
    "MUTABLE_FIELDS",
    "REQUIRED_FIELDS",
    "Product",
    "missing_required_fields",
    "DomainError",
    "DomainValidationError",
    "ProductNotFoundError",
]

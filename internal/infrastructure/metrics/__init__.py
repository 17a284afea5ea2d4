"""
Prometheus metrics package.
"""
from .prometheus import (
    HTTP_REQUESTS_TOTAL,
    HTTP_REQUEST_DURATION,
    PRODUCTS_TOTAL,
    PRODUCT_MUTATIONS,
)

__all__ = [
    "HTTP_REQUESTS_TOTAL",
    "HTTP_REQUEST_DURATION",
    "PRODUCTS_TOTAL",
    "PRODUCT_MUTATIONS",
]

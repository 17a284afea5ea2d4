"""
In-memory storage for the product registry.
"""
from .repository import InMemoryProductRepository, create_repository, seed_products

__all__ = [
    "InMemoryProductRepository",
    "create_repository",
    "seed_products",
]

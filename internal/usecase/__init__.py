"""
Use case package for Product Registry Service.

Contains one use case per registry operation.
"""
from .create_product import (
    CreateProductUseCase,
    CreateProductInput,
    CreateProductOutput,
    ProductRepository,
)
from .delete_product import DeleteProductUseCase
from .get_product import GetProductUseCase
from .list_products import (
    ListProductsUseCase,
    ListProductsInput,
    ListProductsOutput,
)
from .update_product import UpdateProductUseCase, UpdateProductInput

__all__ = [
    "CreateProductUseCase",
    "CreateProductInput",
    "CreateProductOutput",
    "ProductRepository",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
    "ListProductsInput",
    "ListProductsOutput",
    "UpdateProductUseCase",
    "UpdateProductInput",
]

"""
Create Product Use Case.

Appends a new product with a freshly generated ID to the registry.
"""
from typing import Any, List, Mapping, Optional, Protocol, Tuple

from internal.domain.product import Product
from internal.infrastructure.metrics import PRODUCT_MUTATIONS, PRODUCTS_TOTAL
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class ProductRepository(Protocol):
    """Protocol for product repository operations."""

    async def count(self) -> int:
        """Number of live products."""
        ...

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """Get product by ID."""
        ...

    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 5,
    ) -> Tuple[List[Product], int]:
        """List filtered products and the filtered total."""
        ...

    async def add(self, product: Product) -> Product:
        """Append a product."""
        ...

    async def update(
        self,
        product_id: str,
        changes: Mapping[str, Any],
    ) -> Optional[Product]:
        """Merge changes into a product in place."""
        ...

    async def delete(self, product_id: str) -> bool:
        """Remove a product."""
        ...


class CreateProductInput:
    """Input DTO for creating a product."""

    def __init__(
        self,
        name: str,
        price: Any,
        category: str,
        in_stock: Any,
        description: Optional[str] = None,
    ) -> None:
        """
        Initialize create product input.

        Args:
            name: Product name.
            price: Price as supplied by the client.
            category: Category name.
            in_stock: Stock flag.
            description: Optional description.
        """
        self.name = name
        self.price = price
        self.category = category
        self.in_stock = in_stock
        self.description = description


class CreateProductOutput:
    """Output DTO for created product."""

    def __init__(self, product: Product) -> None:
        self.product = product


class CreateProductUseCase:
    """
    Use case for creating a new product.

    No deduplication by name or category is performed.
    """

    def __init__(self, repository: ProductRepository) -> None:
        """
        Initialize the use case.

        Args:
            repository: Product repository for persistence.
        """
        self._repository = repository

    async def execute(self, input_dto: CreateProductInput) -> CreateProductOutput:
        """
        Execute the create product use case.

        Args:
            input_dto: Input data for creating the product.

        Returns:
            CreateProductOutput with the created product.

        Raises:
            DomainValidationError: If name or category is empty.
        """
        product = Product(
            name=input_dto.name,
            description=input_dto.description,
            price=input_dto.price,
            category=input_dto.category,
            in_stock=input_dto.in_stock,
        )

        created = await self._repository.add(product)

        PRODUCT_MUTATIONS.labels(operation="create").inc()
        PRODUCTS_TOTAL.set(await self._repository.count())

        logger.info(
            "Product created",
            product_id=created.id,
            category=created.category,
        )

        return CreateProductOutput(product=created)

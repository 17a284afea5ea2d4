"""
List Products Use Case.

Category filter, name search and offset pagination over the registry.
"""
from dataclasses import dataclass
from typing import Optional

from internal.domain.product import Product
from internal.usecase.create_product import ProductRepository
from pkg.logger.logger import get_logger


logger = get_logger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


@dataclass
class ListProductsInput:
    """Input for ListProductsUseCase."""

    category: Optional[str] = None
    search: Optional[str] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT


@dataclass
class ListProductsOutput:
    """Output for ListProductsUseCase."""

    products: list[Product]
    total: int
    page: int
    limit: int


class ListProductsUseCase:
    """
    Use case for listing products.

    ``total`` counts the filtered set before pagination. A page past the end
    yields an empty list, never an error.
    """

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def execute(self, input_data: ListProductsInput) -> ListProductsOutput:
        """
        Execute the list use case.

        Args:
            input_data: Filters and pagination.

        Returns:
            Page of products with pagination metadata.
        """
        offset = (input_data.page - 1) * input_data.limit

        products, total = await self._repository.list_products(
            category=input_data.category,
            search=input_data.search,
            offset=offset,
            limit=input_data.limit,
        )

        logger.debug(
            "Products listed",
            category=input_data.category,
            search=input_data.search,
            page=input_data.page,
            total=total,
            returned=len(products),
        )

        return ListProductsOutput(
            products=products,
            total=total,
            page=input_data.page,
            limit=input_data.limit,
        )

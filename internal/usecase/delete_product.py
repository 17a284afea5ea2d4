"""
Delete Product Use Case.
"""
from internal.domain.errors import ProductNotFoundError
from internal.infrastructure.metrics import PRODUCT_MUTATIONS, PRODUCTS_TOTAL
from internal.usecase.create_product import ProductRepository
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


class DeleteProductUseCase:
    """Use case for removing a product from the registry."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, product_id: str) -> None:
        """
        Remove a product; the order of the remaining products is preserved.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        if not await self._repository.delete(product_id):
            raise ProductNotFoundError(product_id)

        PRODUCT_MUTATIONS.labels(operation="delete").inc()
        PRODUCTS_TOTAL.set(await self._repository.count())

        logger.info("Product deleted", product_id=product_id)

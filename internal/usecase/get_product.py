"""
Get Product Use Case.
"""
from internal.domain.errors import ProductNotFoundError
from internal.domain.product import Product
from internal.usecase.create_product import ProductRepository


class GetProductUseCase:
    """Use case for fetching a single product by ID."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, product_id: str) -> Product:
        """
        Get a product by exact ID match.

        Raises:
            ProductNotFoundError: If no product has this ID.
        """
        product = await self._repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

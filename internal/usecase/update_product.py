"""
Update Product Use Case.

Applies an allow-listed shallow merge to an existing product.
"""
from dataclasses import dataclass, field
from typing import Any, Dict

from internal.domain.errors import ProductNotFoundError
from internal.domain.product import Product
from internal.infrastructure.metrics import PRODUCT_MUTATIONS
from internal.usecase.create_product import ProductRepository
from pkg.logger.logger import get_logger


logger = get_logger(__name__)


@dataclass
class UpdateProductInput:
    """Input for UpdateProductUseCase."""

    product_id: str
    changes: Dict[str, Any] = field(default_factory=dict)


class UpdateProductUseCase:
    """
    Use case for updating a product in place.

    Fields absent from ``changes`` keep their previous values. The product ID
    is never overwritten. Applying the same changes twice gives the same
    stored record.
    """

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    async def execute(self, input_dto: UpdateProductInput) -> Product:
        """
        Execute the update use case.

        Returns:
            The updated product.

        Raises:
            ProductNotFoundError: If no product has this ID.
            DomainValidationError: If the merged record is invalid.
        """
        updated = await self._repository.update(
            input_dto.product_id,
            input_dto.changes,
        )
        if updated is None:
            raise ProductNotFoundError(input_dto.product_id)

        PRODUCT_MUTATIONS.labels(operation="update").inc()

        logger.info(
            "Product updated",
            product_id=updated.id,
            fields=sorted(input_dto.changes),
        )

        return updated

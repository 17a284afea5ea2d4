"""
In-memory Product Repository.

Holds the registry as one ordered list of products owned by a single
repository instance. Every read-modify-write of the list runs under an
``asyncio.Lock``.
"""

import asyncio
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from internal.domain.product import Product


class InMemoryProductRepository:
    """
    Ordered, process-local product store.

    Insertion order is preserved; deletes shift later records down.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        """
        Initialize the repository.

        Args:
            products: Initial records, kept in the given order.
        """
        self._products: List[Product] = list(products or [])
        self._lock = asyncio.Lock()

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    async def count(self) -> int:
        """Number of live products."""
        return len(self._products)

    async def get_by_id(self, product_id: str) -> Optional[Product]:
        """
        Get a product by exact ID match.

        Returns:
            Product if found, None otherwise.
        """
        index = self._index_of(product_id)
        return self._products[index] if index != -1 else None

    async def list_products(
        self,
        category: Optional[str] = None,
        search: Optional[str] = None,
        offset: int = 0,
        limit: int = 5,
    ) -> Tuple[List[Product], int]:
        """
        List products with filters and pagination.

        The category filter (case-insensitive exact match) runs before the
        search filter (case-insensitive substring of the name). Stored values
        are compared by their string form, since writes do not check types.

        Args:
            category: Category to match.
            search: Substring to look for in product names.
            offset: Index of the first record to return.
            limit: Maximum number of records to return.

        Returns:
            Tuple of (page of products, total count after filtering).
        """
        result = list(self._products)

        if category:
            wanted = category.lower()
            result = [p for p in result if str(p.category).lower() == wanted]

        if search:
            needle = search.lower()
            result = [p for p in result if needle in str(p.name).lower()]

        return result[offset:offset + limit], len(result)

    async def add(self, product: Product) -> Product:
        """
        Append a product to the end of the registry.

        Returns:
            The stored product.
        """
        async with self._lock:
            self._products.append(product)
        return product

    async def update(
        self,
        product_id: str,
        changes: Mapping[str, Any],
    ) -> Optional[Product]:
        """
        Merge ``changes`` into a product, keeping its position.

        Args:
            product_id: ID of the product to update.
            changes: Attribute names mapped to new values.

        Returns:
            The updated product, or None if no product has this ID.

        Raises:
            DomainValidationError: If the merged record is invalid; the
                stored record is left untouched.
        """
        async with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return None
            updated = self._products[index].merge(changes)
            self._products[index] = updated
            return updated

    async def delete(self, product_id: str) -> bool:
        """
        Remove a product.

        Returns:
            True if a product was removed, False if none matched.
        """
        async with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                return False
            del self._products[index]
            return True


def seed_products() -> List[Product]:
    """Records the registry starts with."""
    return [
        Product(
            id="1",
            name="Laptop",
            description="High-performance laptop with 16GB RAM",
            price=1200,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="2",
            name="Smartphone",
            description="Latest model with 128GB storage",
            price=800,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="3",
            name="Coffee Maker",
            description="Programmable coffee maker with timer",
            price=50,
            category="kitchen",
            in_stock=False,
        ),
    ]


def create_repository(seed: bool = True) -> InMemoryProductRepository:
    """
    Create a repository, optionally pre-filled with the seed records.

    Args:
        seed: Whether to load the seed records.
    """
    return InMemoryProductRepository(seed_products() if seed else None)

"""
Unit tests for the in-memory product repository.
"""
import pytest

from internal.domain.errors import DomainValidationError
from internal.domain.product import Product
from internal.infrastructure.memory.repository import (
    InMemoryProductRepository,
    create_repository,
)


def _ids(products):
    return [p.id for p in products]


class TestInMemoryProductRepository:
    """Tests for InMemoryProductRepository."""

    @pytest.fixture
    def repository(self):
        return create_repository(seed=True)

    @pytest.mark.asyncio
    async def test_seed_data(self, repository):
        """Test the registry starts with three records in order."""
        products, total = await repository.list_products(limit=10)

        assert total == 3
        assert _ids(products) == ["1", "2", "3"]

    @pytest.mark.asyncio
    async def test_empty_repository(self):
        repository = create_repository(seed=False)

        assert await repository.count() == 0
        assert await repository.list_products() == ([], 0)

    @pytest.mark.asyncio
    async def test_get_by_id(self, repository):
        product = await repository.get_by_id("3")

        assert product.name == "Coffee Maker"
        assert await repository.get_by_id("99") is None

    @pytest.mark.asyncio
    async def test_category_filter_is_case_insensitive_exact(self, repository):
        products, total = await repository.list_products(category="ELECTRONICS")

        assert total == 2
        assert _ids(products) == ["1", "2"]

        _, total = await repository.list_products(category="electro")
        assert total == 0

    @pytest.mark.asyncio
    async def test_search_is_case_insensitive_substring(self, repository):
        products, total = await repository.list_products(search="COFFEE")

        assert total == 1
        assert _ids(products) == ["3"]

    @pytest.mark.asyncio
    async def test_filters_combine_as_and(self, repository):
        products, total = await repository.list_products(category="electronics", search="phone")
        assert _ids(products) == ["2"]
        assert total == 1

        _, total = await repository.list_products(category="kitchen", search="laptop")
        assert total == 0

    @pytest.mark.asyncio
    async def test_filters_compare_non_string_values_as_text(self, repository):
        await repository.add(Product(name=5, price=1, category=7, in_stock=True))

        _, by_category = await repository.list_products(category="electronics")
        products, by_number = await repository.list_products(category="7", search="5")

        assert by_category == 2
        assert by_number == 1
        assert products[0].name == 5

    @pytest.mark.asyncio
    async def test_pagination_slices_after_filtering(self, repository):
        products, total = await repository.list_products(offset=1, limit=1)
        assert total == 3
        assert _ids(products) == ["2"]

        products, total = await repository.list_products(offset=30, limit=5)
        assert total == 3
        assert products == []

    @pytest.mark.asyncio
    async def test_add_appends(self, repository):
        product = Product(name="Kettle", price=20, category="kitchen", in_stock=True)

        await repository.add(product)

        products, total = await repository.list_products(limit=10)
        assert total == 4
        assert products[-1].id == product.id

    @pytest.mark.asyncio
    async def test_update_keeps_position(self, repository):
        updated = await repository.update("2", {"name": "Phone", "id": "9"})

        assert updated.id == "2"
        assert updated.name == "Phone"
        products, _ = await repository.list_products(limit=10)
        assert _ids(products) == ["1", "2", "3"]
        assert products[1].name == "Phone"

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, repository):
        assert await repository.update("404", {"name": "X"}) is None

    @pytest.mark.asyncio
    async def test_invalid_update_leaves_record_untouched(self, repository):
        with pytest.raises(DomainValidationError):
            await repository.update("1", {"category": ""})

        product = await repository.get_by_id("1")
        assert product.category == "electronics"

    @pytest.mark.asyncio
    async def test_delete_shifts_remaining(self, repository):
        assert await repository.delete("2") is True

        products, total = await repository.list_products(limit=10)
        assert total == 2
        assert _ids(products) == ["1", "3"]

    @pytest.mark.asyncio
    async def test_delete_missing(self, repository):
        assert await repository.delete("404") is False
        assert await repository.count() == 3

    def test_initial_products_are_copied(self):
        """Test the repository owns its own list."""
        initial = [Product(id="a", name="A", price=1, category="c", in_stock=True)]
        repository = InMemoryProductRepository(initial)

        initial.clear()

        assert repository._products[0].id == "a"

# tests/test_query_service.py
import asyncio
from decimal import Decimal

import pytest

from catalog.core import ProductFilters
from catalog.database import Store
from catalog.errors import CatalogUnavailable, ProductNotFound
from catalog.service import CatalogService


def run_with_service(url, fn):
    async def _go():
        store = Store(url)
        try:
            return await fn(CatalogService(store))
        finally:
            await store.dispose()
    return asyncio.run(_go())


def test_filters_keep_only_known_fields():
    f = ProductFilters.model_validate({"category": "Books", "isActive": "false", "page": "3", "sort": "price"})
    assert f.model_dump() == {"category": "Books", "search": None, "is_active": False}


def test_filters_treat_empty_strings_as_missing():
    f = ProductFilters(category="", search="")
    assert f.category is None and f.search is None


def test_list_defaults_to_active(seeded_url):
    products = run_with_service(seeded_url, lambda s: s.list_products(ProductFilters()))
    assert len(products) == 16
    assert all(p.is_active for p in products)
    created = [(p.created_at, p.id) for p in products]
    assert created == sorted(created, reverse=True)


def test_list_inactive(seeded_url):
    products = run_with_service(seeded_url, lambda s: s.list_products(ProductFilters(is_active=False)))
    assert [p.name for p in products] == ["Old Model Phone Case"]


def test_get_product_and_missing(seeded_url):
    product = run_with_service(seeded_url, lambda s: s.get_product(1))
    assert product.id == 1
    assert str(product.price) == "89.99"

    with pytest.raises(ProductNotFound) as exc:
        run_with_service(seeded_url, lambda s: s.get_product(424242))
    assert exc.value.product_id == 424242


def test_categories_skip_inactive_and_uncategorized(db_url):
    from catalog.seed import seed_products

    rows = [
        {"name": "Loose item", "price": Decimal("5.00"), "stock": 1, "category": None},
        {"name": "Archived", "price": Decimal("5.00"), "stock": 1, "category": "Archive", "is_active": False},
        {"name": "Mug", "price": Decimal("7.50"), "stock": 0, "category": "Kitchen"},
        {"name": "Book", "price": Decimal("12.00"), "stock": 3, "category": "Books"},
        {"name": "Other book", "price": Decimal("13.00"), "stock": 3, "category": "Books"},
    ]

    async def _go(service):
        await seed_products(service.store, rows)
        return await service.list_categories()

    assert run_with_service(db_url, _go) == ["Books", "Kitchen"]


def test_missing_table_is_unavailable(db_url):
    with pytest.raises(CatalogUnavailable):
        run_with_service(db_url, lambda s: s.list_products(ProductFilters()))
    with pytest.raises(CatalogUnavailable):
        run_with_service(db_url, lambda s: s.get_product(1))
    with pytest.raises(CatalogUnavailable):
        run_with_service(db_url, lambda s: s.list_categories())

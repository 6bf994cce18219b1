# tests/test_client_sdk.py
import asyncio

import httpx
import pytest

from catalog.database import Store
from catalog.main import create_app
from catalog.service import CatalogService
from sdk.catalogclient import CatalogApiError, CatalogClient


@pytest.fixture
def sdk(client):
    return CatalogClient(base_url="http://testserver", session=client)


def test_list_and_filter(sdk):
    assert len(sdk.list_products()) == 16
    assert [p["name"] for p in sdk.list_products(is_active=False)] == ["Old Model Phone Case"]
    names = {p["name"] for p in sdk.list_products(category="Electronics", search="wireless")}
    assert names == {"Wireless Bluetooth Headphones", "Wireless Gaming Mouse"}


def test_categories_and_get(sdk):
    assert "Books" in sdk.list_categories()
    first = sdk.list_products()[0]
    assert sdk.get_product(first["id"]) == first


def test_errors_carry_status(sdk):
    with pytest.raises(CatalogApiError) as exc:
        sdk.get_product(999999)
    assert exc.value.status_code == 404
    assert exc.value.message == "Product with ID 999999 not found"


def test_async_listing(seeded_url):
    async def _go():
        app = create_app(seeded_url)
        store = Store(seeded_url)
        app.state.catalog = CatalogService(store)
        try:
            c = CatalogClient(base_url="http://testserver")
            return await c.list_products_async(search="bluetooth", transport=httpx.ASGITransport(app=app))
        finally:
            await store.dispose()

    names = {p["name"] for p in asyncio.run(_go())}
    assert names == {"Wireless Bluetooth Headphones", "Portable Bluetooth Speaker"}

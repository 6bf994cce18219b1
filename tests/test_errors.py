# tests/test_errors.py
from fastapi.testclient import TestClient

from catalog.main import create_app, get_catalog


def test_store_failure_is_500_without_detail(db_url):
    # no seed, so the products table does not exist
    with TestClient(create_app(db_url)) as client:
        for path in ("/products", "/products/categories", "/products/1"):
            r = client.get(path)
            assert r.status_code == 500
            assert r.json() == {"detail": "Internal server error"}


class _Exploding:
    async def list_products(self, filters):
        raise RuntimeError("secret connection string")


def test_unexpected_error_is_500_without_detail(seeded_url):
    app = create_app(seeded_url)
    app.dependency_overrides[get_catalog] = lambda: _Exploding()
    with TestClient(app, raise_server_exceptions=False) as client:
        r = client.get("/products")
    assert r.status_code == 500
    assert "secret" not in r.text

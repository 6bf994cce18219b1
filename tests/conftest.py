# tests/conftest.py
import asyncio

import pytest
from fastapi.testclient import TestClient

from catalog.database import Store
from catalog.main import create_app
from catalog.seed import seed_products


async def _seed(url):
    store = Store(url)
    try:
        await seed_products(store)
    finally:
        await store.dispose()


@pytest.fixture
def db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}"


@pytest.fixture
def seeded_url(db_url):
    asyncio.run(_seed(db_url))
    return db_url


@pytest.fixture
def client(seeded_url):
    with TestClient(create_app(seeded_url)) as c:
        yield c

# tests/test_seed.py
import asyncio

from catalog.database import Store
from catalog.seed import SEED_PRODUCTS, active_counts_by_category, seed_products


def test_seed_replaces_rows(db_url):
    async def _go():
        store = Store(db_url)
        try:
            await seed_products(store)
            await seed_products(store)
            return await active_counts_by_category(store)
        finally:
            await store.dispose()

    counts = asyncio.run(_go())
    assert len(SEED_PRODUCTS) == 17
    assert counts == {"Books": 2, "Electronics": 4, "Fashion": 4, "Home & Living": 3, "Sports": 3}

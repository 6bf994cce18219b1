import asyncio
import json
from sdk.catalogclient import CatalogClient, CatalogApiError, DEFAULT_BASE_URL

async def fetch_listing(client, n, **filters):
    try:
        products = await client.list_products_async(**filters)
        print(f"✅ request {n}: {len(products)} products")
        return json.dumps(products, sort_keys=True)
    except CatalogApiError as e:
        print(f"❌ request {n} failed with HTTP {e.status_code}: {e.message}")
        return None

async def main():
    c = CatalogClient(base_url=DEFAULT_BASE_URL)

    print("\n⚡ Firing concurrent reads...")
    bodies = await asyncio.gather(*[
        fetch_listing(c, i, search="bluetooth") for i in range(10)
    ])

    answered = [b for b in bodies if b is not None]
    if answered and all(b == answered[0] for b in answered):
        print(f"\n🟰 All {len(answered)} responses are identical")
    else:
        print("\n⚠️  Responses differ between requests")

if __name__ == "__main__":
    asyncio.run(main())

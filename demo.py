#!/usr/bin/env python
from sdk.catalogclient import CatalogClient, CatalogApiError, DEFAULT_BASE_URL

def main():
    c = CatalogClient(base_url=DEFAULT_BASE_URL)

    # -----------------------------
    # Categories
    # -----------------------------
    print("Listing categories...")
    print(c.list_categories())

    # -----------------------------
    # Default listing (active only, newest first)
    # -----------------------------
    print("\nListing products...")
    products = c.list_products()
    for p in products:
        print(f"  #{p['id']:<3} {p['name']:<32} {p['price']:>8}  stock={p['stock']}")

    # -----------------------------
    # Filters
    # -----------------------------
    print("\nElectronics only...")
    print([p["name"] for p in c.list_products(category="Electronics")])

    print("\nSearching for 'phone'...")
    print([p["name"] for p in c.list_products(search="phone")])

    print("\nSearching for 'phone' among inactive products...")
    inactive = c.list_products(search="phone", is_active=False)
    print([p["name"] for p in inactive])

    # -----------------------------
    # Single product, including an inactive one
    # -----------------------------
    if products:
        print(f"\nGetting product {products[0]['id']}...")
        print(c.get_product(products[0]["id"]))
    if inactive:
        print(f"\nGetting inactive product {inactive[0]['id']}...")
        print(c.get_product(inactive[0]["id"]))

    # -----------------------------
    # Unknown id
    # -----------------------------
    print("\nGetting product 999999...")
    try:
        c.get_product(999999)
    except CatalogApiError as e:
        print(f"HTTP {e.status_code}: {e.message}")

if __name__ == "__main__":
    main()

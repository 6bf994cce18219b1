# sdk/catalogclient.py
import os
from typing import Any, Dict, List, Optional

import httpx
import requests

DEFAULT_BASE_URL = os.getenv("CATALOG_API_URL", "http://localhost:4000")


class CatalogApiError(Exception):
    """Non-2xx answer from the catalog API. ``status_code`` is 0 for network errors."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _filter_params(category: Optional[str] = None, search: Optional[str] = None,
                   is_active: Optional[bool] = None) -> Dict[str, str]:
    params = {}
    if category:
        params["category"] = category
    if search:
        params["search"] = search
    if is_active is not None:
        params["isActive"] = "true" if is_active else "false"
    return params


def _unwrap(r) -> Any:
    # works for requests.Response and httpx.Response alike
    if r.status_code >= 400:
        try:
            message = r.json().get("detail", "Request failed")
        except ValueError:
            message = r.text or "Unknown error"
        raise CatalogApiError(r.status_code, str(message))
    return r.json()


class CatalogClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def _get(self, path: str, params: Optional[Dict[str, str]] = None) -> Any:
        try:
            r = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except (requests.exceptions.RequestException, httpx.TransportError) as e:
            raise CatalogApiError(0, str(e)) from e
        return _unwrap(r)

    def list_products(self, category: Optional[str] = None, search: Optional[str] = None,
                      is_active: Optional[bool] = None) -> List[Dict[str, Any]]:
        return self._get("/products", params=_filter_params(category, search, is_active))

    def get_product(self, product_id: int) -> Dict[str, Any]:
        return self._get(f"/products/{product_id}")

    def list_categories(self) -> List[str]:
        return self._get("/products/categories")

    # Async variant (used by demo_concurrent.py)
    async def list_products_async(self, category: Optional[str] = None, search: Optional[str] = None,
                                  is_active: Optional[bool] = None, transport=None) -> List[Dict[str, Any]]:
        params = _filter_params(category, search, is_active)
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport) as client:
            try:
                r = await client.get("/products", params=params)
            except httpx.TransportError as e:
                raise CatalogApiError(0, str(e)) from e
            return _unwrap(r)


if __name__ == "__main__":
    import argparse
    import json

    parser = argparse.ArgumentParser(description="Product catalog client")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL, help="Catalog API base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Exact category")
    lp.add_argument("--search", help="Substring of name or description")
    visibility = lp.add_mutually_exclusive_group()
    visibility.add_argument("--inactive", action="store_true", help="Only inactive products")
    visibility.add_argument("--active", action="store_true", help="Only active products (the default)")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    subparsers.add_parser("list-categories", help="List categories of active products")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url)

    try:
        if args.command == "list-products":
            is_active = False if args.inactive else (True if args.active else None)
            out = c.list_products(args.category, args.search, is_active)
        elif args.command == "get-product":
            out = c.get_product(args.product_id)
        else:
            out = c.list_categories()
    except CatalogApiError as e:
        raise SystemExit(f"HTTP {e.status_code}: {e.message}")
    print(json.dumps(out, indent=2))

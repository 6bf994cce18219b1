# catalog/service.py
import logging
from typing import List

from sqlalchemy import Select, String, and_, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from .core import ProductFilters, ProductOut
from .database import Store
from .errors import CatalogUnavailable, ProductNotFound
from .models import Product

# This file contains the read-side logic behind the catalog endpoints.

logger = logging.getLogger(__name__)


def _contains_folded(column, term: str):
    # casefold() is registered on SQLite connections by Store
    return func.casefold(column, type_=String).contains(term.casefold(), autoescape=True)


def build_product_query(filters: ProductFilters, unicode_fold: bool = False) -> Select:
    """Compose the listing query for ``filters``.

    All conditions are ANDed together:

    * ``category`` matches exactly (case-sensitive);
    * ``is_active`` defaults to ``True`` when the caller leaves it out;
    * ``search`` matches a case-insensitive substring of the name OR the
      description.

    With ``unicode_fold`` the search compares Unicode case-folded text, for
    stores whose own ILIKE only folds ASCII.

    Newest products come first, with ``id`` as a tie-breaker so equal
    timestamps still sort the same way on every call.
    """
    conditions = []
    if filters.category:
        conditions.append(Product.category == filters.category)

    is_active = True if filters.is_active is None else filters.is_active
    conditions.append(Product.is_active == is_active)

    if filters.search and unicode_fold:
        conditions.append(
            or_(
                _contains_folded(Product.name, filters.search),
                _contains_folded(Product.description, filters.search),
            )
        )
    elif filters.search:
        conditions.append(
            or_(
                Product.name.icontains(filters.search, autoescape=True),
                Product.description.icontains(filters.search, autoescape=True),
            )
        )

    return (
        select(Product)
        .where(and_(*conditions))
        .order_by(Product.created_at.desc(), Product.id.desc())
    )


def build_categories_query() -> Select:
    return (
        select(Product.category)
        .where(Product.is_active == True, Product.category.is_not(None))  # noqa: E712
        .distinct()
        .order_by(Product.category)
    )


class CatalogService:
    def __init__(self, store: Store):
        self.store = store

    async def list_products(self, filters: ProductFilters) -> List[ProductOut]:
        query = build_product_query(filters, unicode_fold=self.store.unicode_fold)
        try:
            async with self.store.session() as session:
                result = await session.execute(query)
                products = result.scalars().all()
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Listing products failed (filters=%s)", filters.model_dump())
            raise CatalogUnavailable("product listing failed") from exc
        return [ProductOut.model_validate(p) for p in products]

    async def get_product(self, product_id: int) -> ProductOut:
        try:
            async with self.store.session() as session:
                product = await session.get(Product, product_id)
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Loading product %s failed", product_id)
            raise CatalogUnavailable("product lookup failed") from exc
        if product is None:
            raise ProductNotFound(product_id)
        return ProductOut.model_validate(product)

    async def list_categories(self) -> List[str]:
        try:
            async with self.store.session() as session:
                result = await session.execute(build_categories_query())
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Listing categories failed")
            raise CatalogUnavailable("category listing failed") from exc

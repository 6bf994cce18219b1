# catalog/main.py
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Path, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import settings
from .core import ProductFilters, ProductOut
from .database import Store
from .errors import CatalogUnavailable, ProductNotFound
from .service import CatalogService

logger = logging.getLogger(__name__)

MAX_PRODUCT_ID = 2_147_483_647

router = APIRouter(prefix="/products", tags=["products"])


# ---------------------------
# Dependencies
# ---------------------------
def get_catalog(request: Request) -> CatalogService:
    return request.app.state.catalog


def product_filters(
    category: Optional[str] = Query(default=None, description="Exact category, e.g. Electronics"),
    search: Optional[str] = Query(default=None, description="Substring of name or description"),
    is_active: Optional[str] = Query(
        default=None, alias="isActive", description="true or false; active only when left out"
    ),
) -> ProductFilters:
    # parsed by ProductFilters so an empty isActive counts as omitted, like the others
    try:
        return ProductFilters.model_validate(
            {"category": category, "search": search, "isActive": is_active}
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


# ---------------------------
# Product endpoints
# ---------------------------
@router.get("", response_model=List[ProductOut])
async def list_products(
    filters: ProductFilters = Depends(product_filters),
    catalog: CatalogService = Depends(get_catalog),
):
    return await catalog.list_products(filters)


# must stay above /{product_id} so "categories" is not parsed as an id
@router.get("/categories", response_model=List[str])
async def list_categories(catalog: CatalogService = Depends(get_catalog)):
    return await catalog.list_categories()


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(
    product_id: int = Path(..., ge=1, le=MAX_PRODUCT_ID),
    catalog: CatalogService = Depends(get_catalog),
):
    return await catalog.get_product(product_id)


# ---------------------------
# Error translation
# ---------------------------
def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = [str(item) for item in err.get("loc", ()) if item not in ("query", "path", "body")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": _describe_validation_errors(exc)})


async def not_found_handler(request: Request, exc: ProductNotFound):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def unavailable_handler(request: Request, exc: CatalogUnavailable):
    # already logged with traceback by the service
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ---------------------------
# Application
# ---------------------------
def create_app(database_url: Optional[str] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store = Store(database_url)
        await store.connect()
        app.state.store = store
        app.state.catalog = CatalogService(store)
        try:
            yield
        finally:
            await store.dispose()

    app = FastAPI(title="product-catalog", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ProductNotFound, not_found_handler)
    app.add_exception_handler(CatalogUnavailable, unavailable_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
    return app


app = create_app()


if __name__ == "__main__":
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("catalog.main:app", host=settings.host, port=settings.port, reload=False)

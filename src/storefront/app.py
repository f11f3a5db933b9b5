"""Storefront FastAPI application.

The lifespan hook is the startup barrier: the schema is created, sample
orders are seeded into an empty ledger and missing statuses are backfilled
before the first request is served.

Usage:
    uvicorn storefront.app:create_app --factory --host 0.0.0.0 --port 3000
"""

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.catalogue.api import product_router
from storefront.catalogue.product.provider import CatalogueProvider, StaticCatalogue
from storefront.ordering.api import order_router
from storefront.ordering.domain import ordering
from storefront.ordering.order.maintenance import normalize_statuses
from storefront.ordering.order.numbering import generator_for
from storefront.ordering.order.seeding import seed_orders_if_empty
from storefront.ordering.storage.store import OrderStore
from storefront.shared.config import Settings, get_settings
from storefront.shared.logging import add_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/api/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


async def prepare_store(store: OrderStore, settings: Settings, numbers) -> None:
    """Create the schema, seed sample orders, then backfill missing statuses."""
    await store.create_schema()
    if settings.seed_sample_orders:
        await seed_orders_if_empty(store, numbers)
    await normalize_statuses(store)


def create_app(settings: Settings | None = None, catalogue: CatalogueProvider | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ordering.init(traverse=False)
        store = OrderStore(settings.database_url, echo=settings.sql_echo)
        numbers = generator_for(settings.order_number_strategy)
        await prepare_store(store, settings, numbers)

        app.state.order_store = store
        app.state.order_numbers = numbers
        app.state.catalogue = catalogue or StaticCatalogue()
        logger.info("storefront_started", env=settings.env, database_url=settings.database_url)
        try:
            yield
        finally:
            await store.dispose()

    app = FastAPI(
        title="Storefront API",
        description="Product catalogue, checkout intake and order ledger",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Bind a request id to every log line and push the Protean domain context."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        clear_context()
        add_context(request_id=request_id, path=request.url.path)
        try:
            domain = _resolve_domain(request.url.path)
            if domain is not None:
                with domain.domain_context():
                    response = await call_next(request)
            else:
                response = await call_next(request)
        finally:
            clear_context()
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    app.include_router(order_router)
    app.include_router(product_router)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "env": settings.env})

    return app

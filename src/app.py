"""Shopdesk FastAPI application.

Backend for the embedded admin screens. Cart and checkout requests run
inside the ordering domain context; product, customer and order screens
read through the commerce gateway.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied.
import structlog
from commerce.config import load_settings
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.domain import ordering
from ordering.utils.logging import add_context, clear_context, configure_logging
from protean.integrations.fastapi import register_exception_handlers

configure_logging()
ordering.init()

logger = structlog.get_logger(__name__)
settings = load_settings()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/carts": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shopdesk API",
    description="Embedded commerce admin: orders, customers and products",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

if settings.allowed_origins == ["*"]:
    logger.warning("CORS allows all origins with credentials; set ALLOWED_ORIGINS to explicit values")


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Tag log lines with the request and push the ordering domain context for cart requests."""
    clear_context()
    add_context(method=request.method, path=request.url.path)

    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match, pass through (gateway-backed screens, health, docs)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import product_router  # noqa: E402
from commerce.api import commerce_router  # noqa: E402
from identity.api import customer_router  # noqa: E402
from ordering.api.routes import cart_router, order_router  # noqa: E402

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(product_router)
app.include_router(customer_router)
app.include_router(commerce_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    from commerce.gateway import get_gateway

    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"ordering": {"name": ordering.name}},
            "gateway": type(get_gateway()).__name__,
        }
    )

"""
Screen Producer - Main FastAPI Application.

Hosts the purchase order workflow engine: the lifespan starts the queue
processing driver on boot and stops it on shutdown.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import time

from api import dependencies
from api.routes import health, logistics, purchase_orders, queue
from core.domain.exceptions import (
    BusinessException,
    InvalidOrderStateError,
    InvalidPurchaseOrderError,
    InvalidRequestError,
    PurchaseOrderNotFoundError,
)
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.logging import configure_logging, get_logger


configure_logging()
logger = get_logger(__name__)


# =============================================================================
# LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open storage and run the queue driver for the lifetime of the app."""
    logger.info("🚀 Screen Producer API starting up...")

    try:
        session_factory = await init_database()
    except Exception as e:
        logger.error(f"Database initialization failed: {e}", exc_info=True)
        raise
    dependencies.use_database(session_factory)
    await dependencies.seed_equipment_parameters()

    driver = dependencies.get_queue_driver()
    driver.start()

    yield

    logger.info("👋 Screen Producer API shutting down...")
    await driver.stop()
    await close_database()
    dependencies.reset_dependencies()


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Screen Producer - Purchase Order API",
    description="""
    Purchase order workflow for a screen manufacturer.

    Orders placed with suppliers are driven through supplier payment,
    pickup request and logistics payment by a background queue.
    """,
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

_STATUS_CODES = {
    PurchaseOrderNotFoundError: 404,
    InvalidOrderStateError: 409,
    InvalidRequestError: 400,
    InvalidPurchaseOrderError: 422,
}


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    status_code = next(
        (code for exc_type, code in _STATUS_CODES.items() if isinstance(exc, exc_type)),
        502,
    )
    logger.warning(f"{request.method} {request.url.path} failed [{exc.error_code}]: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.error_code, "detail": str(exc), "path": request.url.path},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc), "path": request.url.path},
    )


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(health.router, tags=["Health"])
app.include_router(queue.router, prefix="/queue", tags=["Queue"])
app.include_router(purchase_orders.router, prefix="/purchase-orders", tags=["Purchase Orders"])
app.include_router(logistics.router, prefix="/logistics", tags=["Logistics"])


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Screen Producer - Purchase Order API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

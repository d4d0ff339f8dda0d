"""Main FastAPI application instance"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.shared.config.settings import Settings, get_settings, is_production
from backend.shared.config.logging_config import configure_logging, get_logger
from backend.shared.database.session import init_db
from backend.shared.errors import MarketplaceError, RequestValidationFailed
from backend.services.api.src.middleware.logging import setup_request_logging
from backend.services.api.src.middleware.metrics import setup_metrics
from backend.services.api.src.routers import health, materials, users, vehicles
from backend.services.api.src.schemas.common import format_validation_errors

logger = get_logger("api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup."""
    logger.info("API service starting")
    init_db()
    yield
    logger.info("API service shutting down")


def register_exception_handlers(app: FastAPI) -> None:
    """Map every error to the ``{success: false, message, errors?}`` envelope."""

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        error = RequestValidationFailed(format_validation_errors(exc.errors()))
        return JSONResponse(status_code=error.status_code, content=error.to_payload())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions"""
        logger.error(
            f"Unhandled exception: {exc}",
            extra={"path": request.url.path, "method": request.method},
            exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "message": "Internal server error"}
        )


def create_app(settings: Settings = None) -> FastAPI:
    """
    Create and configure the FastAPI application

    Args:
        settings: Application settings, if None the cached settings are used

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()

    configure_logging(
        service_name=settings.service_name,
        log_level=settings.observability.log_level,
        use_json=settings.observability.json_logs or is_production(),
        log_file=settings.observability.log_file,
    )

    app = FastAPI(
        title="Construction Marketplace API",
        description="Rentable construction equipment and building materials",
        version=settings.version,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.observability.metrics_enabled:
        setup_metrics(app)
    setup_request_logging(app)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(vehicles.router, prefix=settings.api.api_prefix)
    app.include_router(materials.router, prefix=settings.api.api_prefix)
    app.include_router(users.router, prefix=settings.api.api_prefix)

    @app.get("/", include_in_schema=False)
    def root():
        return {
            "success": True,
            "name": "Construction Marketplace API",
            "version": settings.version,
            "docs": "/docs",
        }

    return app


# Create the FastAPI application instance
app = create_app()

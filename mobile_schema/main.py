"""
Main FastAPI application.

Serves the mobile schema compiler over HTTP:
1. Export endpoints for the web editor (/api/v1/mobile-schema/export)
2. Widget type catalog (/api/v1/components)
3. Structured request logging with correlation tracking
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uuid
import time

from mobile_schema.config import settings
from mobile_schema.core.logger import setup_logging
from mobile_schema.models.schemas.core import MOBILE_SCHEMA_VERSION
from mobile_schema.utils.logging import get_logger, log_context

# Import routers
from mobile_schema.api.v1 import components, export, health

logger = get_logger(__name__)


# ============================================================================
# APPLICATION LIFESPAN
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan with structured logging"""

    setup_logging()

    with log_context(correlation_id=str(uuid.uuid4())):
        logger.info(
            "app.startup.completed",
            extra={
                "service": settings.app_name,
                "version": settings.app_version,
                "schema_version": MOBILE_SCHEMA_VERSION,
                "environment": settings.environment,
                "debug": settings.debug
            }
        )

        yield

        logger.info("app.shutdown.completed")


# ============================================================================
# FASTAPI APP
# ============================================================================

app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description="Compiles web page-builder documents into mobile app schemas",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# REQUEST/RESPONSE LOGGING MIDDLEWARE
# ============================================================================

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    """Log all HTTP requests with correlation tracking"""

    correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())

    start_time = time.time()

    with log_context(correlation_id=correlation_id, path=request.url.path):
        logger.info(
            "http.request.received",
            extra={
                "path": request.url.path,
                "method": request.method,
                "client_ip": request.client.host if request.client else None,
                "user_agent": request.headers.get("user-agent")
            }
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "http.request.failed",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "duration_ms": (time.time() - start_time) * 1000
                },
                exc_info=e
            )
            raise

        logger.performance(
            "http.request.completed",
            duration_ms=(time.time() - start_time) * 1000,
            extra={
                "status_code": response.status_code,
                "path": request.url.path,
                "method": request.method
            }
        )

        response.headers["X-Correlation-ID"] = correlation_id
        return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler with structured logging"""

    logger.error(
        "app.exception.unhandled",
        extra={
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__
        },
        exc_info=exc
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again later.",
            "correlation_id": request.headers.get("X-Correlation-ID", "unknown")
        }
    )


# ============================================================================
# ROUTERS
# ============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    components.router,
    prefix="/api/v1",
    tags=["Components"]
)

app.include_router(
    export.router,
    prefix="/api/v1",
    tags=["Export"]
)


# ============================================================================
# ROOT ENDPOINT
# ============================================================================

@app.get("/")
async def root():
    """Root endpoint with service info"""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "schema_version": MOBILE_SCHEMA_VERSION,
        "status": "running",
        "docs": "/docs",
        "health": "/health",
        "api": {
            "components": "GET /api/v1/components",
            "export": "POST /api/v1/mobile-schema/export",
            "download": "POST /api/v1/mobile-schema/export/download"
        }
    }


# ============================================================================
# DEVELOPMENT SERVER
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    logger.info(
        "app.dev_server.starting",
        extra={
            "host": "0.0.0.0",
            "port": 8000,
            "reload": settings.debug
        }
    )

    uvicorn.run(
        "mobile_schema.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )

"""
Reviews Service - Main Application
Read-only gateway serving the latest Google Business Profile reviews
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from reviews_service.routes import reviews
from reviews_service.utils.config import get_app_config, validate_configuration


app_config = get_app_config()

logging.basicConfig(level=app_config.log_level, format="%(message)s")

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger(__name__)


def cors_headers(allowed_origin: str) -> Dict[str, str]:
    """Headers attached to every response"""
    return {
        "Access-Control-Allow-Origin": allowed_origin or "*",
        "Access-Control-Allow-Methods": "GET,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type,Authorization",
        "Access-Control-Max-Age": "86400",
    }


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting Reviews Service", version=app_config.service_version)
    validate_configuration()

    yield

    logger.info("Reviews Service shutdown complete")


# Create FastAPI application; /reviews is the only reachable path
app = FastAPI(
    title="Reviews Service",
    description="Latest customer reviews for a Google Business Profile location",
    version=app_config.service_version,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    redirect_slashes=False,
    lifespan=lifespan
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests"""
    logger.info(
        "Request received",
        method=request.method,
        path=request.url.path,
        client_ip=request.client.host if request.client else "unknown"
    )

    response = await call_next(request)

    logger.info(
        "Request completed",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code
    )

    return response


@app.middleware("http")
async def apply_cors(request: Request, call_next):
    """Answer preflights directly and stamp CORS headers on everything else"""
    if request.method == "OPTIONS":
        response = Response(status_code=204)
    else:
        response = await call_next(request)

    response.headers.update(cors_headers(get_app_config().allowed_origin))
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown paths and unsupported methods are both plain 404s"""
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not found", status_code=404)
    return await http_exception_handler(request, exc)


# Register routes
app.include_router(reviews.router, tags=["Reviews"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "reviews_service.main:app",
        host=app_config.host,
        port=app_config.port,
        log_level=app_config.log_level.lower()
    )

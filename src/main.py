"""
EazyBank - Main Application Entry Point

Hosts the accounts, loans and cards services behind one FastAPI app
with shared validation, error payloads, logging and metrics.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.infrastructure.database import db_manager
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)

API_TITLE = "EazyBank microservices REST API Documentation"
API_DESCRIPTION = "EazyBank Accounts, Loans and Cards microservices REST API Documentation"
API_CONTACT = {
    "name": "EazyBank Developer Team",
    "email": "developers@eazybank.com",
    "url": "https://www.eazybank.com",
}
API_LICENSE = {
    "name": "Apache 2.0",
    "url": "https://www.apache.org/licenses/LICENSE-2.0",
}
API_EXTERNAL_DOCS = {
    "description": "EazyBank microservices REST API Documentation",
    "url": "http://localhost:8080/docs",
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize database connection pool (and tables if enabled)
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()
    if settings.db_create_tables:
        await db_manager.create_tables()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        build_version=settings.build_version,
    )

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=__version__,
    contact=API_CONTACT,
    license_info=API_LICENSE,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


def custom_openapi() -> Dict[str, Any]:
    """OpenAPI schema with the external documentation link attached."""
    if app.openapi_schema:
        return app.openapi_schema

    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        contact=app.contact,
        license_info=app.license_info,
        routes=app.routes,
    )
    schema["externalDocs"] = API_EXTERNAL_DOCS
    app.openapi_schema = schema
    return app.openapi_schema


app.openapi = custom_openapi

# Registered first so the fallback error middleware sits innermost
error_handler_middleware(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    uvicorn.run("src.main:app", host=settings.host, port=settings.port)

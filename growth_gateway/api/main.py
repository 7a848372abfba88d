"""FastAPI application factory"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from growth_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from growth_gateway.api.dependencies import get_request_id
from growth_gateway.api.v1 import banks, calculate, recommendations, scenarios
from growth_gateway.domain.exceptions import CatalogError
from growth_gateway.infrastructure.database.models import Base
from growth_gateway.infrastructure.database.session import engine
from growth_gateway.infrastructure.observability.logging import setup_logging
from growth_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Growth Gateway",
        description="Investment projection and recommendation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Catalog failures can surface from the get_catalog dependency itself
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        logging.error(f"Catalog unavailable: {exc}", extra={"request_id": get_request_id(request)})
        return JSONResponse(status_code=503, content={"detail": "Product catalog unavailable"})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(banks.router, prefix="/v1", tags=["catalog"])
    app.include_router(calculate.router, prefix="/v1", tags=["projections"])
    app.include_router(recommendations.router, prefix="/v1", tags=["recommendations"])
    app.include_router(scenarios.router, prefix="/v1", tags=["scenarios"])

    return app


app = create_app()

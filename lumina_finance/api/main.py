"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from lumina_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from lumina_finance.api.v1 import quotes, deals, reports
from lumina_finance.infrastructure.observability.logging import setup_logging
from lumina_finance.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Lumina Finance Engine",
        description="Finance quotation and deal profitability service",
        version="0.1.0",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(quotes.router, prefix="/v1", tags=["quotes"])
    app.include_router(deals.router, prefix="/v1", tags=["deals"])
    app.include_router(reports.router, prefix="/v1", tags=["reports"])

    return app


app = create_app()

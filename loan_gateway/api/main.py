"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_gateway.api.v1 import decision
from loan_gateway.infrastructure.observability.logging import setup_logging
from loan_gateway.config import Settings, settings

API_VERSION = "0.1.0"

setup_logging(settings.log_level)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the loan decision API: v1 decision router, health and metrics endpoints"""
    app_settings = app_settings or settings

    app = FastAPI(
        title="Loan Decision Gateway",
        description="Loan pre-approval: maximum approvable amount and period per applicant",
        version=API_VERSION,
    )
    app.state.settings = app_settings

    # Request ID must wrap metrics so both see every response
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": app_settings.service_name, "version": API_VERSION}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(decision.router, prefix="/v1", tags=["decisions"])

    return app


app = create_app()

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.exception_handlers import register_exception_handlers
from app.api.schemas import HealthOut
from app.core.logging import setup_logging
from app.core.metrics import PrometheusMetricsMiddleware, metrics_router
from app.core.middleware.http_logging import HttpLoggingMiddleware
from app.core.settings import get_settings
from app.symptoms.router import router as symptoms_router

setup_logging()

logger = logging.getLogger("app.startup")


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Settings are read at startup, not import time, so tests can set env first.
        settings = get_settings()
        logger.info(
            "Symptom analysis starting",
            extra={"mode": "live" if settings.live_mode else "mock"},
        )
        yield

    app = FastAPI(
        title="Symptom Information API",
        description=(
            "Educational health information for free-text symptom descriptions.\n\n"
            "Design principles:\n"
            "- Answers are educational only and never a diagnosis.\n"
            "- Without an LLM API key the service answers with canned content (mock mode).\n"
            "- Every valid request gets a well-formed answer, even when the LLM provider fails.\n"
            "- Logging and metrics avoid PHI by using route templates and metadata only."
        ),
        lifespan=lifespan,
        docs_url="/swagger",
        redoc_url="/docs",
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "symptoms",
                "description": "Analyze a symptom description (educational, non-diagnostic).",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description="Verifies the API process is running. Does not call the LLM provider.",
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(symptoms_router)
    return app


app = create_app()

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.exceptions import SymptomValidationError

logger = logging.getLogger("app.request_validation")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(SymptomValidationError)
    async def handle_symptom_validation_error(
        request: Request,
        exc: SymptomValidationError,
    ) -> JSONResponse:
        # IMPORTANT: do not log request bodies; symptom text is PHI.
        request_id = getattr(request.state, "request_id", None) or request.headers.get(
            "X-Request-ID"
        )
        logger.info(
            "Symptom request rejected",
            extra={
                "request_id": request_id,
                "http_method": request.method,
                "request_path": request.url.path,  # no query string
                "status_code": 400,
                "error_kind": exc.kind.value,
            },
        )
        return JSONResponse(status_code=400, content={"error": exc.message})

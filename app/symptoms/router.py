from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.api.schemas import ErrorOut
from app.core.llm.deps import get_grok_client
from app.core.metrics import symptom_analysis_responses_total
from app.symptoms.schemas import SymptomAnalysis, SymptomRequest
from app.symptoms.service import SymptomAnalysisHandler

router = APIRouter(prefix="/api", tags=["symptoms"])
logger = logging.getLogger("app.symptom_analysis")


def get_symptom_analysis_handler(
    llm_client=Depends(get_grok_client),
) -> SymptomAnalysisHandler:
    return SymptomAnalysisHandler(llm_client=llm_client)


@router.post(
    "/analyze-symptoms",
    summary="Analyze symptoms",
    response_model=None,
    responses={
        200: {"model": SymptomAnalysis, "description": "Educational symptom information."},
        400: {"model": ErrorOut, "description": "`symptoms` missing or not a string."},
    },
    # The body is parsed by the handler (a malformed body must still get an answer),
    # so document it explicitly.
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": SymptomRequest.model_json_schema()}},
        }
    },
)
async def analyze_symptoms(
    request: Request,
    handler: SymptomAnalysisHandler = Depends(get_symptom_analysis_handler),
) -> Response:
    """
    Return educational (non-diagnostic) information about the described symptoms.

    IMPORTANT (safety):
    - Always answers 200 with a five-field analysis, except for invalid input (400).
    - Symptom text and LLM output are never logged or stored.
    """

    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    body = await request.body()
    outcome = await handler.handle(body, request_id=request_id)

    symptom_analysis_responses_total.labels(variant=outcome.variant).inc()
    logger.info(
        "Symptom analysis returned",
        extra={
            "request_id": request_id,
            "mode": handler.mode,
            "variant": outcome.variant,
            "error_kind": outcome.error_kind.value if outcome.error_kind else None,
        },
    )
    return Response(
        content=outcome.body,
        media_type="application/json",
        headers={"Cache-Control": "no-store"},
    )

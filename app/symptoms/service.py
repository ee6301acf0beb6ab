from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import ValidationError

from app.domain.exceptions import (
    AnalysisErrorKind,
    SymptomAnalysisError,
    SymptomValidationError,
    UnexpectedAnalysisError,
)
from app.symptoms.fallbacks import mock_analysis, payload_for_error
from app.symptoms.prompt import build_symptom_prompts
from app.symptoms.schemas import (
    AnalysisMode,
    AnalysisVariant,
    SymptomRequest,
    decode_analysis,
    encode_analysis,
    loads_json,
    missing_analysis_fields,
    replace_lone_surrogates,
)

logger = logging.getLogger("app.symptom_analysis")

INVALID_SYMPTOMS_MESSAGE = "Symptoms are required and must be a string"


class LLMClient(Protocol):
    async def complete(self, *, system_prompt: str, user_prompt: str) -> str: ...


@dataclass(frozen=True)
class AnalysisOutcome:
    payload: dict[str, Any]
    body: bytes
    variant: AnalysisVariant
    error_kind: AnalysisErrorKind | None = None


def _outcome(
    payload: dict[str, Any],
    variant: AnalysisVariant,
    error_kind: AnalysisErrorKind | None = None,
) -> AnalysisOutcome:
    # Rendered here so unserializable answers fail inside the handler, not in the response.
    return AnalysisOutcome(
        payload=payload, body=encode_analysis(payload), variant=variant, error_kind=error_kind
    )


def parse_symptom_request(body: bytes) -> str:
    """
    Extract the symptom text from a raw JSON request body.

    A body that isn't standard JSON raises ValueError (handled as an unexpected fault);
    a JSON body without a non-empty `symptoms` string is a validation error. Unpaired
    surrogates in the text are replaced, since they can't be validated or sent upstream.
    """

    data = loads_json(body)
    if not isinstance(data, dict):
        raise SymptomValidationError(INVALID_SYMPTOMS_MESSAGE)
    symptoms = data.get("symptoms")
    if isinstance(symptoms, str):
        symptoms = replace_lone_surrogates(symptoms)
    try:
        return SymptomRequest.model_validate({"symptoms": symptoms}).symptoms
    except ValidationError as exc:
        raise SymptomValidationError(INVALID_SYMPTOMS_MESSAGE) from exc


class SymptomAnalysisHandler:
    """
    Turn a symptom description into an educational analysis.

    Mock vs live mode is fixed at construction: with no LLM client every answer is
    the canned mock payload. Only `SymptomValidationError` escapes `handle`; every
    other failure becomes one of the canned payloads.
    """

    def __init__(self, *, llm_client: LLMClient | None):
        self._llm = llm_client

    @property
    def mode(self) -> AnalysisMode:
        return "mock" if self._llm is None else "live"

    async def handle(self, body: bytes, *, request_id: str | None = None) -> AnalysisOutcome:
        try:
            symptoms = parse_symptom_request(body)
            if self._llm is None:
                return _outcome(mock_analysis(symptoms).to_payload(), "mock")
            return await self._analyze_live(self._llm, symptoms, request_id=request_id)
        except SymptomValidationError:
            raise
        except SymptomAnalysisError as exc:
            return self._recover(exc, request_id=request_id)
        except Exception as exc:  # noqa: BLE001 - callers must always get an answer
            error = UnexpectedAnalysisError("Unexpected error while analyzing symptoms")
            error.__cause__ = exc
            return self._recover(error, request_id=request_id)

    async def _analyze_live(
        self, llm: LLMClient, symptoms: str, *, request_id: str | None
    ) -> AnalysisOutcome:
        system_prompt, user_prompt = build_symptom_prompts(symptoms=symptoms)
        content = await llm.complete(system_prompt=system_prompt, user_prompt=user_prompt)
        payload = decode_analysis(content)

        # Passed through as-is; incomplete answers are only flagged for operators.
        missing = missing_analysis_fields(payload)
        if missing:
            logger.warning(
                "LLM analysis is missing expected fields",
                extra={"request_id": request_id, "mode": self.mode, "missing_fields": missing},
            )
        return _outcome(payload, "live")

    def _recover(self, error: SymptomAnalysisError, *, request_id: str | None) -> AnalysisOutcome:
        variant: AnalysisVariant = (
            "degraded_parse" if error.kind is AnalysisErrorKind.RESPONSE_PARSE else "fallback"
        )
        extra = {
            "request_id": request_id,
            "mode": self.mode,
            "variant": variant,
            "error_kind": error.kind.value,
        }
        if error.kind is AnalysisErrorKind.UNEXPECTED:
            logger.error("Error analyzing symptoms", exc_info=error.__cause__ or error, extra=extra)
        else:
            logger.warning("Symptom analysis degraded: %s", error.message, extra=extra)

        return _outcome(payload_for_error(error).to_payload(), variant, error.kind)

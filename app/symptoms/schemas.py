from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr
from pydantic.alias_generators import to_camel

from app.domain.exceptions import ResponseParseError

AnalysisMode = Literal["mock", "live"]
AnalysisVariant = Literal["mock", "live", "degraded_parse", "fallback"]


class SymptomRequest(BaseModel):
    symptoms: StrictStr = Field(
        min_length=1,
        description="Free-text description of the symptoms, as typed by the user.",
        examples=["headache and fever"],
    )


class SymptomAnalysis(BaseModel):
    """Educational (non-diagnostic) answer. Serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    explanation: str = Field(min_length=1, description="Patient-facing explanation (2-3 sentences).")
    possible_causes: list[str] = Field(min_length=1, description="2-3 common possible causes.")
    home_remedies: list[str] = Field(min_length=1, description="3-4 safe home care suggestions.")
    when_to_see_doctor: list[str] = Field(
        min_length=1, description="3-4 situations when medical care is needed."
    )
    urgent_warnings: list[str] = Field(
        min_length=1, description="3-5 warning signs requiring immediate medical attention."
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


ANALYSIS_FIELDS: tuple[str, ...] = tuple(
    field.alias or name for name, field in SymptomAnalysis.model_fields.items()
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_json(data: str | bytes) -> Any:
    """`json.loads` restricted to standard JSON (no NaN/Infinity)."""

    return json.loads(data, parse_constant=_reject_constant)


def replace_lone_surrogates(text: str) -> str:
    """Replace unpaired UTF-16 surrogates (e.g. from a `"\\ud800"` escape) with U+FFFD."""

    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def utf16_prefix(text: str, units: int) -> str:
    """
    First `units` UTF-16 code units of `text`, as JavaScript's `substring` counts.

    An astral character split at the boundary, and any lone surrogate, becomes U+FFFD.
    """

    return text.encode("utf-16-le", "surrogatepass")[: units * 2].decode("utf-16-le", "replace")


def decode_analysis(content: str) -> dict[str, Any]:
    """
    Decode the provider's message content into an analysis payload.

    Only JSON well-formedness is enforced: the decoded object is passed through
    unmodified, without checking field presence or list lengths.
    """

    try:
        parsed = loads_json(content)
    except ValueError as exc:
        raise ResponseParseError("LLM content was not valid JSON", raw_content=content) from exc

    if not isinstance(parsed, dict):
        raise ResponseParseError("LLM content JSON must be an object", raw_content=content)

    return parsed


def encode_analysis(payload: dict[str, Any]) -> bytes:
    """
    Render a response body.

    Non-ASCII is escaped, so lone surrogates in a passed-through answer stay valid
    JSON. Raises ValueError for non-finite floats and RecursionError for very deep
    nesting.
    """

    return json.dumps(payload, ensure_ascii=True, allow_nan=False).encode("ascii")


def missing_analysis_fields(payload: dict[str, Any]) -> list[str]:
    return [name for name in ANALYSIS_FIELDS if name not in payload]

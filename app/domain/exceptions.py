"""Error taxonomy for symptom analysis.

Every failure is tagged with an `AnalysisErrorKind`. Only `VALIDATION` reaches the
caller as an error status; the other kinds are mapped to a canned payload by
`app.symptoms.fallbacks.payload_for_error`.
"""

from __future__ import annotations

from enum import StrEnum


class AnalysisErrorKind(StrEnum):
    VALIDATION = "validation"
    PROVIDER_TRANSPORT = "provider_transport"
    PROVIDER_CONTENT = "provider_content"
    RESPONSE_PARSE = "response_parse"
    UNEXPECTED = "unexpected"


class SymptomAnalysisError(Exception):
    """Base error for the symptom analysis flow."""

    kind: AnalysisErrorKind = AnalysisErrorKind.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SymptomValidationError(SymptomAnalysisError):
    """Raised when the request body has no usable `symptoms` string (HTTP 400)."""

    kind = AnalysisErrorKind.VALIDATION


class ProviderTransportError(SymptomAnalysisError):
    """Raised when the LLM provider can't be reached or answers with a non-2xx status."""

    kind = AnalysisErrorKind.PROVIDER_TRANSPORT


class ProviderContentError(SymptomAnalysisError):
    """Raised when the provider response carries no message content."""

    kind = AnalysisErrorKind.PROVIDER_CONTENT


class ResponseParseError(SymptomAnalysisError):
    """Raised when the provider's message content is not a JSON object.

    Keeps the raw content so a degraded answer can still be built from it.
    """

    kind = AnalysisErrorKind.RESPONSE_PARSE

    def __init__(self, message: str, *, raw_content: str):
        super().__init__(message)
        self.raw_content = raw_content


class UnexpectedAnalysisError(SymptomAnalysisError):
    """Wraps any other exception raised while producing an analysis."""

    kind = AnalysisErrorKind.UNEXPECTED

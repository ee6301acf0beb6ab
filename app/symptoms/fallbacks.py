"""Canned answers.

Three textually distinct payloads exist: the mock answer (no API key), the
degraded answer (provider content was not JSON) and the global fallback (any
other failure). All of them are pure functions of their input.
"""

from __future__ import annotations

from app.domain.exceptions import AnalysisErrorKind, ResponseParseError, SymptomAnalysisError
from app.symptoms.schemas import SymptomAnalysis, utf16_prefix

MOCK_EXPLANATION_TEMPLATE = (
    'Based on your symptoms: "{symptoms}", here\'s what you should know. '
    "Please note this is educational information only and not a medical diagnosis."
)

# Counted in UTF-16 code units.
DEGRADED_EXPLANATION_CHARS = 200
DEGRADED_EXPLANATION_SUFFIX = "..."

_MOCK_LISTS = {
    "possible_causes": [
        "Common viral infection - Often causes similar symptoms and usually resolves on its own",
        "Seasonal allergies - Environmental factors can trigger these symptoms",
        "Minor bacterial infection - May require medical attention if symptoms persist",
    ],
    "home_remedies": [
        "Get plenty of rest and stay hydrated",
        "Use over-the-counter pain relievers as directed",
        "Apply warm or cold compresses as appropriate",
        "Maintain good hygiene practices",
    ],
    "when_to_see_doctor": [
        "Symptoms persist for more than 7-10 days",
        "Symptoms worsen significantly",
        "You develop additional concerning symptoms",
        "You have underlying health conditions",
    ],
    "urgent_warnings": [
        "Difficulty breathing or shortness of breath",
        "Severe chest pain",
        "High fever (over 103°F/39.4°C)",
        "Signs of dehydration",
        "Severe headache with neck stiffness",
    ],
}

_DEGRADED_LISTS = {
    "possible_causes": ["Response parsing error - please try again"],
    "home_remedies": ["Rest and hydration", "Monitor symptoms"],
    "when_to_see_doctor": ["If symptoms persist or worsen"],
    "urgent_warnings": ["Severe symptoms requiring immediate care"],
}

FALLBACK_ANALYSIS = SymptomAnalysis(
    explanation=(
        "I'm having trouble analyzing your symptoms right now. "
        "Please consult with a healthcare professional for proper evaluation."
    ),
    possible_causes=["Unable to analyze at this time - please seek medical advice"],
    home_remedies=[
        "Rest and stay hydrated",
        "Monitor your symptoms carefully",
        "Follow general wellness practices",
    ],
    when_to_see_doctor=[
        "For proper evaluation of your symptoms",
        "If symptoms persist or worsen",
        "For peace of mind and professional assessment",
    ],
    urgent_warnings=[
        "Severe or worsening symptoms",
        "Difficulty breathing",
        "High fever",
        "Severe pain",
        "Any symptoms causing significant concern",
    ],
)


def mock_analysis(symptoms: str) -> SymptomAnalysis:
    # str.format would choke on braces inside user text; substitute literally.
    explanation = MOCK_EXPLANATION_TEMPLATE.replace("{symptoms}", symptoms)
    return SymptomAnalysis(explanation=explanation, **_MOCK_LISTS)


def degraded_analysis(raw_content: str) -> SymptomAnalysis:
    explanation = (
        utf16_prefix(raw_content, DEGRADED_EXPLANATION_CHARS) + DEGRADED_EXPLANATION_SUFFIX
    )
    return SymptomAnalysis(explanation=explanation, **_DEGRADED_LISTS)


def payload_for_error(error: SymptomAnalysisError) -> SymptomAnalysis:
    """Map a non-validation analysis error to the canned answer served with status 200."""

    if error.kind is AnalysisErrorKind.VALIDATION:
        raise ValueError("Validation errors are answered with HTTP 400, not a canned analysis")
    if error.kind is AnalysisErrorKind.RESPONSE_PARSE and isinstance(error, ResponseParseError):
        return degraded_analysis(error.raw_content)
    return FALLBACK_ANALYSIS

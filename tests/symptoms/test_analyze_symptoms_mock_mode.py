from __future__ import annotations

from fastapi.testclient import TestClient

from tests.symptoms._helpers import ANALYZE_URL


def _expected_mock(symptoms: str) -> dict:
    return {
        "explanation": (
            f'Based on your symptoms: "{symptoms}", here\'s what you should know. '
            "Please note this is educational information only and not a medical diagnosis."
        ),
        "possibleCauses": [
            "Common viral infection - Often causes similar symptoms and usually resolves on its own",
            "Seasonal allergies - Environmental factors can trigger these symptoms",
            "Minor bacterial infection - May require medical attention if symptoms persist",
        ],
        "homeRemedies": [
            "Get plenty of rest and stay hydrated",
            "Use over-the-counter pain relievers as directed",
            "Apply warm or cold compresses as appropriate",
            "Maintain good hygiene practices",
        ],
        "whenToSeeDoctor": [
            "Symptoms persist for more than 7-10 days",
            "Symptoms worsen significantly",
            "You develop additional concerning symptoms",
            "You have underlying health conditions",
        ],
        "urgentWarnings": [
            "Difficulty breathing or shortness of breath",
            "Severe chest pain",
            "High fever (over 103°F/39.4°C)",
            "Signs of dehydration",
            "Severe headache with neck stiffness",
        ],
    }


def test_mock_mode_returns_canned_analysis(client: TestClient) -> None:
    res = client.post(ANALYZE_URL, json={"symptoms": "headache and fever"})
    assert res.status_code == 200, res.text
    assert "X-Request-ID" in res.headers
    assert res.headers["Cache-Control"] == "no-store"

    payload = res.json()
    assert payload == _expected_mock("headache and fever")
    assert payload["explanation"] == (
        'Based on your symptoms: "headache and fever", here\'s what you should know. '
        "Please note this is educational information only and not a medical diagnosis."
    )
    assert len(payload["possibleCauses"]) == 3
    assert len(payload["urgentWarnings"]) == 5


def test_mock_mode_interpolates_text_verbatim(client: TestClient) -> None:
    symptoms = 'sore "throat" {and} \n cough'
    res = client.post(ANALYZE_URL, json={"symptoms": symptoms})
    assert res.status_code == 200
    assert res.json() == _expected_mock(symptoms)


def test_mock_mode_is_deterministic(client: TestClient) -> None:
    first = client.post(ANALYZE_URL, json={"symptoms": "dizzy"})
    second = client.post(ANALYZE_URL, json={"symptoms": "dizzy"})
    assert first.json() == second.json()


def test_mock_mode_ignores_extra_fields(client: TestClient) -> None:
    res = client.post(ANALYZE_URL, json={"symptoms": "rash", "age": 30})
    assert res.status_code == 200
    assert res.json() == _expected_mock("rash")


def test_empty_api_key_means_mock_mode(monkeypatch) -> None:
    from app.core.settings import get_settings
    from app.main import create_app

    monkeypatch.setenv("GROK_API_KEY", "")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        res = client.post(ANALYZE_URL, json={"symptoms": "cough"})

    assert res.status_code == 200
    assert res.json() == _expected_mock("cough")


def test_lone_surrogate_in_symptoms_is_accepted(client: TestClient) -> None:
    res = client.post(
        ANALYZE_URL,
        content=b'{"symptoms": "pain \\ud800"}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 200
    assert res.json() == _expected_mock("pain \ufffd")


def test_emoji_in_symptoms_is_kept(client: TestClient) -> None:
    res = client.post(ANALYZE_URL, json={"symptoms": "rash \U0001F915"})
    assert res.status_code == 200
    assert res.json() == _expected_mock("rash \U0001F915")

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.core.llm.deps import get_grok_client
from app.core.llm.grok_client import GrokClient, GrokConfig
from app.core.settings import get_settings
from app.domain.exceptions import ProviderContentError, ProviderTransportError


def _client(handler) -> GrokClient:
    return GrokClient(
        config=GrokConfig(api_key="test-key"), transport=httpx.MockTransport(handler)
    )


def _complete(client: GrokClient) -> str:
    return asyncio.run(client.complete(system_prompt="sys", user_prompt="user"))


def _chat_response(content) -> httpx.Response:
    return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})


def test_request_shape() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return _chat_response('{"explanation": "ok"}')

    assert _complete(_client(handler)) == '{"explanation": "ok"}'

    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.x.ai/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {
        "model": "grok-2",
        "messages": [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ],
        "temperature": 0.7,
        "max_tokens": 1000,
    }


@pytest.mark.parametrize("status_code", [400, 401, 429, 500, 503])
def test_non_success_status_is_transport_error(status_code: int) -> None:
    client = _client(lambda request: httpx.Response(status_code, json={"error": "nope"}))
    with pytest.raises(ProviderTransportError):
        _complete(client)


def test_network_error_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderTransportError):
        _complete(_client(handler))


def test_timeout_is_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ProviderTransportError, match="timed out"):
        _complete(_client(handler))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, content=b"<html>not json</html>"),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"choices": []}),
        httpx.Response(200, json={"choices": [{}]}),
        httpx.Response(200, json={"choices": [{"message": None}]}),
        _chat_response(""),
        _chat_response(None),
        _chat_response(["not", "text"]),
    ],
)
def test_missing_content_is_content_error(response: httpx.Response) -> None:
    with pytest.raises(ProviderContentError):
        _complete(_client(lambda request: response))


def test_non_json_content_is_returned_as_is() -> None:
    assert _complete(_client(lambda request: _chat_response("plain words"))) == "plain words"


def test_get_grok_client_without_key_returns_none() -> None:
    assert get_grok_client() is None


def test_get_grok_client_with_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GROK_API_KEY", "xai-123")
    get_settings.cache_clear()

    client = get_grok_client()
    assert isinstance(client, GrokClient)
    payload = client.build_payload(system_prompt="s", user_prompt="u")
    assert payload["model"] == "grok-2"
    assert payload["temperature"] == 0.7
    assert payload["max_tokens"] == 1000

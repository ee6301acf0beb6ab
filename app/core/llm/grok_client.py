from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from app.domain.exceptions import ProviderContentError, ProviderTransportError

GROK_BASE_URL = "https://api.x.ai/v1"
GROK_MODEL = "grok-2"
GROK_TEMPERATURE = 0.7
GROK_MAX_TOKENS = 1000
GROK_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class GrokConfig:
    api_key: str
    base_url: str = GROK_BASE_URL
    model: str = GROK_MODEL
    temperature: float = GROK_TEMPERATURE
    max_tokens: int = GROK_MAX_TOKENS
    timeout_seconds: float = GROK_TIMEOUT_SECONDS


class GrokClient:
    """
    Minimal xAI chat-completions client.

    Design notes:
    - No logging in this module (prompts/outputs may contain PHI).
    - Returns the raw message content; decoding it is the caller's job, since a
      non-JSON answer still yields a (degraded) response.
    - `transport` exists for tests (httpx.MockTransport).
    """

    def __init__(self, *, config: GrokConfig, transport: httpx.AsyncBaseTransport | None = None):
        self._config = config
        self._transport = transport

    def build_payload(self, *, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        return {
            "model": self._config.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }

    async def complete(self, *, system_prompt: str, user_prompt: str) -> str:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload = self.build_payload(system_prompt=system_prompt, user_prompt=user_prompt)

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise ProviderTransportError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise ProviderTransportError("LLM request failed") from exc

        if not resp.is_success:
            # Status only; upstream bodies may echo the prompt.
            raise ProviderTransportError(f"LLM service returned status {resp.status_code}")

        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, LookupError, TypeError) as exc:
            raise ProviderContentError("No message content in LLM response") from exc

        if not isinstance(content, str) or not content:
            raise ProviderContentError("No message content in LLM response")

        return content

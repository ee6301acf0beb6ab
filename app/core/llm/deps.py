from __future__ import annotations

from app.core.llm.grok_client import GrokClient, GrokConfig
from app.core.settings import get_settings


def get_grok_client() -> GrokClient | None:
    """
    Dependency provider for GrokClient.

    Returns None when no API key is configured; the symptom handler then serves
    canned (mock) answers instead of calling the provider.
    """

    settings = get_settings()
    if not settings.grok_api_key:
        return None

    return GrokClient(config=GrokConfig(api_key=settings.grok_api_key))

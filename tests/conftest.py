from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    # Run from an empty dir so a developer's .env can't switch tests into live mode.
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GROK_API_KEY", raising=False)
    # Settings are cached via @lru_cache; clear so each test sees its own env.
    from app.core.settings import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from app.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c

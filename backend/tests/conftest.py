"""
Lesson Studio - Test Configuration
Fixtures that replace the Gemini API with an in-process httpx transport
"""
import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from lesson_studio.gemini_client import GeminiClient
from lesson_studio.main import app
from lesson_studio.routers import generate as generate_router
from lesson_studio.settings import Settings, get_settings


def gemini_reply(text: str) -> dict[str, Any]:
    """Body of a successful generateContent call carrying ``text``."""
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]}


class GeminiStub:
    """Records every outgoing request and answers with the configured reply."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = gemini_reply("")

    def reply(self, text: str) -> None:
        self.status_code = 200
        self.body = gemini_reply(text)

    def reply_json(self, value: Any) -> None:
        self.reply(json.dumps(value, ensure_ascii=False))

    def fail(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.body = {"error": {"code": status_code, "message": message}}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def gemini() -> GeminiStub:
    return GeminiStub()


@pytest.fixture
def configured_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings resolved from an environment that carries an API key."""
    monkeypatch.delenv("VITE_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "test-key")
    return Settings(_env_file=None)


@pytest.fixture
def unconfigured_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings resolved from an environment without any API key."""
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("VITE_API_KEY", raising=False)
    return Settings(_env_file=None)


@pytest.fixture
def gemini_client(configured_settings: Settings, gemini: GeminiStub) -> GeminiClient:
    return GeminiClient(configured_settings, transport=gemini.transport)


def _client_app(monkeypatch: pytest.MonkeyPatch, config: Settings, gemini: GeminiStub) -> None:
    monkeypatch.setattr(
        generate_router,
        "GeminiClient",
        lambda cfg: GeminiClient(cfg, transport=gemini.transport),
    )
    app.dependency_overrides[get_settings] = lambda: config


@pytest_asyncio.fixture
async def client(
    monkeypatch: pytest.MonkeyPatch,
    configured_settings: Settings,
    gemini: GeminiStub,
) -> AsyncGenerator[AsyncClient, None]:
    """API client wired to the stubbed Gemini transport."""
    _client_app(monkeypatch, configured_settings, gemini)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def keyless_client(
    monkeypatch: pytest.MonkeyPatch,
    unconfigured_settings: Settings,
    gemini: GeminiStub,
) -> AsyncGenerator[AsyncClient, None]:
    """API client whose settings carry no API key."""
    _client_app(monkeypatch, unconfigured_settings, gemini)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

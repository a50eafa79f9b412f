"""Shared test fixtures: fake provider adapters, mocked SDK clients, a tiny contract."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import BaseModel

from rankpilot.config import Settings
from rankpilot.llm.client import GenerationRequest, StructuredLLMClient
from rankpilot.llm.gemini import GeminiStructuredClient
from rankpilot.llm.openai_fallback import OpenAIJsonClient
from rankpilot.llm.schema import SchemaContract


# ── Contract used across tests ───────────────────────────────────────────────

class ScoreCard(BaseModel):
    title: str
    score: float


@pytest.fixture()
def contract():
    return SchemaContract(ScoreCard)


# ── Provider errors ──────────────────────────────────────────────────────────

class ProviderError(Exception):
    """Stand-in for an SDK error exposing an HTTP-style status."""

    def __init__(self, message: str = "", status: int | None = None):
        super().__init__(message)
        if status is not None:
            self.status = status


# ── Fake adapters ────────────────────────────────────────────────────────────

class FakeAdapter(StructuredLLMClient):
    """Returns a canned payload (validated against the request contract) or raises."""

    def __init__(self, name: str, *, payload: dict | None = None, error: BaseException | None = None):
        self.name = name
        self.payload = payload
        self.error = error
        self.calls: list[GenerationRequest] = []

    async def generate(self, request: GenerationRequest) -> BaseModel:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return request.contract.validate(self.payload)


# ── Real adapters with mocked SDK clients ────────────────────────────────────

@pytest.fixture()
def test_settings():
    return Settings(
        gemini_api_key="test-gemini-key",
        google_api_key="",
        openai_api_key="test-openai-key",
        azure_openai_endpoint="",
        openai_base_url="",
    )


def completion(text: str | None):
    """Minimal chat.completions response shape."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


@pytest.fixture()
def openai_client(test_settings):
    """OpenAIJsonClient whose SDK call is an AsyncMock; set .create.return_value per test."""
    client = OpenAIJsonClient(test_settings)
    sdk = MagicMock()
    sdk.chat.completions.create = AsyncMock(return_value=completion("{}"))
    client._client = sdk
    client.create = sdk.chat.completions.create
    return client


@pytest.fixture()
def gemini_client(test_settings):
    """GeminiStructuredClient whose SDK call is an AsyncMock; set .generate_content per test."""
    client = GeminiStructuredClient(test_settings, model_name="gemini-test")
    sdk = MagicMock()
    sdk.aio.models.generate_content = AsyncMock(
        return_value=SimpleNamespace(parsed=None, candidates=[]),
    )
    client._client = sdk
    client.generate_content = sdk.aio.models.generate_content
    return client


@pytest.fixture()
def fake_adapter():
    return FakeAdapter


@pytest.fixture()
def provider_error():
    return ProviderError


@pytest.fixture()
def make_completion():
    return completion

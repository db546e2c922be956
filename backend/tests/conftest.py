"""Shared test configuration, pytest markers and fake Gemini SDK clients."""

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from google.genai import errors, types


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls the real Gemini API (needs GEMINI_API_KEY)"
    )


class FakeGemini:
    """Builders for fake ``genai.Client`` objects and the responses/errors they yield."""

    @staticmethod
    def response(text: str | None) -> types.GenerateContentResponse:
        """Gemini response whose first candidate carries one text part."""
        parts = [] if text is None else [types.Part(text=text)]
        return types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(role="model", parts=parts))]
        )

    @staticmethod
    def server_error(code: int = 503) -> errors.ServerError:
        return errors.ServerError(
            code, {"error": {"code": code, "message": "model overloaded", "status": "UNAVAILABLE"}}
        )

    @staticmethod
    def client_error(code: int = 400) -> errors.ClientError:
        return errors.ClientError(
            code, {"error": {"code": code, "message": "bad request", "status": "INVALID_ARGUMENT"}}
        )

    @staticmethod
    def sdk(*outcomes):
        """Fake client whose ``aio.models.generate_content`` yields ``outcomes`` in turn.

        Exceptions in ``outcomes`` are raised, anything else is returned.
        """
        generate = AsyncMock(side_effect=list(outcomes))
        client = SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))
        return client, generate


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def no_backoff(monkeypatch):
    """Skip retry sleeps and record the requested delays (ms)."""
    from services import gemini_client

    delays: list[float] = []

    async def _record(delay_ms):
        delays.append(delay_ms)

    monkeypatch.setattr(gemini_client, "_backoff", _record)
    return delays

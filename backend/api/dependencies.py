"""Shared dependencies for API routes."""

from services.gemini_client import GeminiJsonClient


def get_gemini_client() -> GeminiJsonClient:
    """Fresh client per request; raises ConfigError when GEMINI_API_KEY is unset."""
    return GeminiJsonClient.from_settings()

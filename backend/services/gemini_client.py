"""Google Gemini structured-output client with timeout, retry and JSON validation.

One call = one ``generate_content`` request per attempt:

    prompt ─► attempt (raced against timeout) ─► first text part
                 │  TransportError 429/500/503 or timeout
                 └─► sleep(delay), delay *= multiplier, retry (at most ``retries`` times)
    text ─► strip ```json fence ─► json.loads ─► dict ─► validator ─► typed record

Schema/validation failures are never retried. There is no module-level client:
every call resolves its own config and builds its own SDK client.
"""

import asyncio
import json
import logging
import math
import re
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from google import genai
from google.genai import errors, types

from config import settings
from services.exceptions import ConfigError, MatcherError, SchemaError, TransportError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_TIMEOUT_MS = 30000
DEFAULT_RETRIES = 2
DEFAULT_RETRY_DELAY_MS = 600
DEFAULT_BACKOFF_MULTIPLIER = 2.0
TEMPERATURE = 0.1

# Browser-hosted interpreters (Pyodide, WASI) would leak the API key to the client
_CLIENT_SIDE_PLATFORMS = frozenset({"emscripten", "wasi"})

_CODE_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


@dataclass(frozen=True)
class GeminiConfig:
    api_key: str = field(repr=False)
    model: str = DEFAULT_MODEL
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    retries: int = DEFAULT_RETRIES
    retry_delay_ms: int = DEFAULT_RETRY_DELAY_MS
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER
    base_url: str = ""


def _first_set(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def resolve_config(
    api_key: str | None = None,
    model: str | None = None,
    timeout_ms: int | None = None,
    retries: int | None = None,
    retry_delay_ms: int | None = None,
    backoff_multiplier: float | None = None,
    base_url: str | None = None,
) -> GeminiConfig:
    """Explicit arguments win, then settings (env / .env), then built-in defaults."""
    resolved_key = api_key or settings.gemini_api_key
    if not resolved_key:
        raise ConfigError("Missing GEMINI_API_KEY.")

    config = GeminiConfig(
        api_key=resolved_key,
        model=model or settings.gemini_model or DEFAULT_MODEL,
        timeout_ms=_first_set(timeout_ms, settings.gemini_timeout_ms, DEFAULT_TIMEOUT_MS),
        retries=_first_set(retries, settings.gemini_retries, DEFAULT_RETRIES),
        retry_delay_ms=_first_set(
            retry_delay_ms, settings.gemini_retry_delay_ms, DEFAULT_RETRY_DELAY_MS
        ),
        backoff_multiplier=_first_set(
            backoff_multiplier, settings.gemini_backoff_multiplier, DEFAULT_BACKOFF_MULTIPLIER
        ),
        base_url=_first_set(base_url, settings.gemini_base_url, ""),
    )

    if config.timeout_ms <= 0:
        raise ConfigError(f"Gemini timeout must be positive, got {config.timeout_ms}ms.")
    if config.retries < 0:
        raise ConfigError(f"Gemini retries must not be negative, got {config.retries}.")
    if config.retry_delay_ms < 0:
        raise ConfigError(f"Gemini retry delay must not be negative, got {config.retry_delay_ms}ms.")
    return config


def is_configured() -> bool:
    return bool(settings.gemini_api_key)


def require_server_runtime(operation: str) -> None:
    if sys.platform in _CLIENT_SIDE_PLATFORMS:
        raise ConfigError(f"{operation} must run on the server.")


def is_retryable(error: BaseException) -> bool:
    """Only transient transport failures (timeout, 429, 500, 503) are retried."""
    return isinstance(error, TransportError) and error.retryable


def _discard_outcome(task: asyncio.Future) -> None:
    if not task.cancelled():
        task.exception()


async def _backoff(delay_ms: float) -> None:
    await asyncio.sleep(delay_ms / 1000)


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    retries: int = DEFAULT_RETRIES,
    delay_ms: int = DEFAULT_RETRY_DELAY_MS,
    backoff_multiplier: float = DEFAULT_BACKOFF_MULTIPLIER,
    should_retry: Callable[[BaseException], bool] = is_retryable,
) -> T:
    """Run ``operation`` up to ``retries + 1`` times with exponential backoff."""
    attempt = 0
    next_delay = delay_ms
    while True:
        try:
            return await operation()
        except MatcherError as e:
            if attempt >= retries or not should_retry(e):
                raise
            attempt += 1
            logger.warning(
                "Gemini attempt %d/%d failed (%s), retrying in %dms",
                attempt, retries + 1, e.message, next_delay,
            )
            await _backoff(next_delay)
            next_delay = math.ceil(next_delay * backoff_multiplier)


def extract_response_text(response: Any) -> str:
    """Return the first text part of ``candidates[0].content.parts``."""
    text = ""
    candidates = getattr(response, "candidates", None) or []
    if candidates:
        content = getattr(candidates[0], "content", None)
        for part in getattr(content, "parts", None) or []:
            part_text = getattr(part, "text", None)
            if isinstance(part_text, str):
                text = part_text
                break

    if not text.strip():
        raise SchemaError("Gemini response did not include text content.")
    return text


def extract_candidate_json(text: str) -> str:
    """Strip a surrounding ``` or ```json code fence, if any."""
    trimmed = text.strip()
    match = _CODE_FENCE_RE.search(trimmed)
    if match and match.group(1):
        return match.group(1).strip()
    return trimmed


def parse_json_object(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise SchemaError(f"LLM response is not valid JSON: {e.msg}") from e
    except RecursionError as e:
        raise SchemaError("LLM response is not valid JSON: nested too deeply") from e
    if not isinstance(parsed, dict):
        raise SchemaError("LLM response must be a JSON object.")
    return parsed


class GeminiJsonClient:
    """Issues prompts to Gemini and returns validated JSON records.

    Construction fails with ``ConfigError`` when no API key is available;
    there is no stub fallback client.
    """

    def __init__(self, config: GeminiConfig, client: Any | None = None) -> None:
        if not config.api_key:
            raise ConfigError("Missing GEMINI_API_KEY.")
        self.config = config
        self._client = client if client is not None else self._build_sdk_client(config)

    @classmethod
    def from_settings(cls, client: Any | None = None, **overrides: Any) -> "GeminiJsonClient":
        return cls(resolve_config(**overrides), client=client)

    @staticmethod
    def _build_sdk_client(config: GeminiConfig) -> genai.Client:
        http_options = types.HttpOptions(base_url=config.base_url) if config.base_url else None
        return genai.Client(api_key=config.api_key, http_options=http_options)

    async def _generate(self, prompt: str) -> types.GenerateContentResponse:
        """Single attempt. Whichever settles first, the response or the deadline, wins."""
        timeout_ms = self.config.timeout_ms
        request = self._client.aio.models.generate_content(
            model=self.config.model,
            contents=[types.Content(role="user", parts=[types.Part(text=prompt)])],
            config=types.GenerateContentConfig(
                temperature=TEMPERATURE,
                response_mime_type="application/json",
            ),
        )
        task = asyncio.ensure_future(request)
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)
        except asyncio.CancelledError:
            task.cancel()
            raise
        if not done:
            # Stop waiting now; the abandoned request unwinds on its own
            task.cancel()
            task.add_done_callback(_discard_outcome)
            raise TransportError(f"Gemini request timed out after {timeout_ms}ms", timed_out=True)

        try:
            return task.result()
        except errors.APIError as e:
            raise TransportError(
                f"Gemini request failed ({e.code}): {e.message or e.status}",
                status_code=e.code,
            ) from e
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Gemini request timed out after {timeout_ms}ms", timed_out=True
            ) from e
        except (httpx.HTTPError, OSError) as e:
            raise TransportError(f"Gemini request failed: {e}") from e

    async def _attempt(self, prompt: str) -> dict[str, Any]:
        response = await self._generate(prompt)
        text = extract_response_text(response)
        return parse_json_object(extract_candidate_json(text))

    async def call_structured(self, prompt: str, validator: Callable[[dict[str, Any]], T]) -> T:
        """Send ``prompt`` and return ``validator(parsed_json)``."""
        require_server_runtime("Gemini API calls")
        payload = await retry_with_backoff(
            lambda: self._attempt(prompt),
            retries=self.config.retries,
            delay_ms=self.config.retry_delay_ms,
            backoff_multiplier=self.config.backoff_multiplier,
        )
        return validator(payload)


async def call_structured(
    prompt: str,
    validator: Callable[[dict[str, Any]], T],
    client: Any | None = None,
    **overrides: Any,
) -> T:
    """One-shot helper: resolve config, build a client, run one structured call."""
    return await GeminiJsonClient.from_settings(client=client, **overrides).call_structured(
        prompt, validator
    )

"""Typed errors raised by the matching engine and the Gemini client.

Taxonomy:
    ValidationError - required input missing or empty (never retried)
    ConfigError     - missing credentials or unsupported runtime (never retried)
    TransportError  - network failure, HTTP error status or timeout
    SchemaError     - LLM reply is not a JSON object or fails field validation
"""

from typing import Any

RETRYABLE_STATUS_CODES: frozenset[int] = frozenset({429, 500, 503})


class MatcherError(Exception):
    """Base class for every error this backend raises on purpose."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "detail": self.message,
            "details": self.details,
        }


class ValidationError(MatcherError):
    """Raised when required caller input is missing or blank."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, error_code="VALIDATION_ERROR", details=details)


class ConfigError(MatcherError):
    """Raised when the Gemini client cannot be configured."""

    def __init__(self, message: str):
        super().__init__(message, error_code="CONFIG_ERROR")


class TransportError(MatcherError):
    """Raised for network failures, non-2xx responses and attempt timeouts."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        timed_out: bool = False,
    ):
        self.status_code = status_code
        self.timed_out = timed_out
        details: dict[str, Any] = {"timed_out": timed_out}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, error_code="TRANSPORT_ERROR", details=details)

    @property
    def retryable(self) -> bool:
        return self.timed_out or self.status_code in RETRYABLE_STATUS_CODES


class SchemaError(MatcherError):
    """Raised when a model reply cannot be turned into the expected record."""

    def __init__(self, message: str, field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(message, error_code="SCHEMA_ERROR", details=details)

"""Text normalization and tokenization shared by every scorer.

Matching is Unicode-aware: ``\\w`` follows Python's default ``str`` regex
semantics, so accented letters and non-Latin scripts count as word
characters and survive normalization.
"""

import re

TOKEN_MIN_LENGTH = 2

_NON_WORD_RE = re.compile(r"[^\w\s]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lowercase, replace punctuation runs with a space, collapse whitespace."""
    if not text:
        return ""
    text = _NON_WORD_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def tokenize(text: str | None) -> list[str]:
    """Split normalized text into tokens of at least TOKEN_MIN_LENGTH characters."""
    return [token for token in normalize(text).split(" ") if len(token) >= TOKEN_MIN_LENGTH]


def token_set(text: str | None) -> set[str]:
    return set(tokenize(text))

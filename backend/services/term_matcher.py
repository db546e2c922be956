"""Phrase presence checks: whole-phrase regex match and token coverage."""

import re
from functools import lru_cache

from services.text_normalizer import tokenize


@lru_cache(maxsize=1024)
def _phrase_pattern(phrase: str) -> re.Pattern:
    # \b is Unicode-aware for str patterns
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


def whole_phrase_match(haystack: str, phrase: str) -> bool:
    """True if ``phrase`` occurs in ``haystack`` bounded by word boundaries."""
    if not phrase:
        return False
    return _phrase_pattern(phrase).search(haystack) is not None


def token_coverage(text_tokens: set[str], phrase: str) -> bool:
    """True if every token of ``phrase`` appears somewhere in ``text_tokens``."""
    tokens = tokenize(phrase)
    if not tokens:
        return False
    return all(token in text_tokens for token in tokens)

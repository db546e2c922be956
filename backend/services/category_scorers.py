"""Per-category scorers: role, skills/keywords, experience.

Each scorer takes the candidate's normalized text, its token set and one
normalized requirement value, and returns a 0.0-1.0 score plus evidence.
None of them raise; an empty requirement simply scores 0.
"""

import re
from dataclasses import dataclass, field

from services.term_matcher import token_coverage, whole_phrase_match
from services.text_normalizer import normalize

# Partial credit when every word of a phrase appears but not contiguously
ROLE_TOKEN_COVERAGE_SCORE = 0.7
EXPERIENCE_TOKEN_COVERAGE_SCORE = 0.75
SCORE_EPSILON = 0.0001

# "5 years", "10+ yrs", "3 year" (run on normalized text, so "+" is usually gone)
YEARS_RE = re.compile(r"\b(\d{1,2})\s*\+?\s*(?:years?|yrs?)\b")


@dataclass(frozen=True)
class CategoryScore:
    matched: bool = False
    score: float = 0.0


@dataclass(frozen=True)
class TermScore:
    matched: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
    score: float = 0.0


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def term_present(text: str, text_tokens: set[str], term: str) -> bool:
    return whole_phrase_match(text, term) or token_coverage(text_tokens, term)


def score_role(text: str, text_tokens: set[str], role: str) -> CategoryScore:
    if not role:
        return CategoryScore()
    if whole_phrase_match(text, role):
        return CategoryScore(matched=True, score=1.0)
    if token_coverage(text_tokens, role):
        # partial credit only, not a role match
        return CategoryScore(matched=False, score=ROLE_TOKEN_COVERAGE_SCORE)
    return CategoryScore()


def score_terms(text: str, text_tokens: set[str], terms: list[str]) -> TermScore:
    """Score a skills or keywords list as the fraction of terms present."""
    if not terms:
        return TermScore()

    matched: list[str] = []
    missing: list[str] = []
    for term in terms:
        if term_present(text, text_tokens, term):
            matched.append(term)
        else:
            missing.append(term)
    return TermScore(matched=matched, missing=missing, score=len(matched) / len(terms))


def find_years(text: str) -> list[int]:
    """Extract unique "N years" figures from text, in first-seen order."""
    years: dict[int, None] = {}
    for match in YEARS_RE.finditer(normalize(text)):
        years.setdefault(int(match.group(1)), None)
    return list(years)


def score_experience(text: str, text_tokens: set[str], requirement: str) -> CategoryScore:
    """Score experience by phrase match, then by years ratio, then by token coverage."""
    if not requirement:
        return CategoryScore()
    if whole_phrase_match(text, requirement):
        return CategoryScore(matched=True, score=1.0)

    required_years = find_years(requirement)
    resume_years = find_years(text)
    if required_years and resume_years:
        required = max(required_years)
        available = max(resume_years)
        if required == 0:
            return CategoryScore(matched=True, score=1.0)
        score = _clamp(available / required)
        return CategoryScore(matched=score >= 1 - SCORE_EPSILON, score=score)

    if token_coverage(text_tokens, requirement):
        return CategoryScore(matched=False, score=EXPERIENCE_TOKEN_COVERAGE_SCORE)
    return CategoryScore()

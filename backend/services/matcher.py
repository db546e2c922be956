"""Matcher orchestrator: score a batch of resumes and rank them.

Flow per candidate:
    extracted_text -> normalize -> token set
      ├─ score_role
      ├─ score_terms(skills)
      ├─ score_experience
      └─ score_terms(keywords)
            ↓
    aggregate -> confidence_band -> MatchResult

Candidates are scored independently; ordering comes from the final sort only.
"""

import logging
from collections.abc import Iterable

from models.schemas.match_result import CategoryBreakdown, MatchResult
from models.schemas.requirements import Candidate, Requirements
from services.aggregator import aggregate, confidence_band
from services.category_scorers import score_experience, score_role, score_terms
from services.text_normalizer import normalize, token_set

logger = logging.getLogger(__name__)


def score_candidate(candidate: Candidate, requirements: Requirements) -> MatchResult:
    """Score a single resume. Missing text yields zero in every category."""
    text = normalize(candidate.extracted_text or "")
    text_tokens = token_set(text)

    role = score_role(text, text_tokens, requirements.role)
    skills = score_terms(text, text_tokens, requirements.skills)
    experience = score_experience(text, text_tokens, requirements.experience)
    keywords = score_terms(text, text_tokens, requirements.keywords)

    breakdown = CategoryBreakdown(
        role=role.score,
        skills=skills.score,
        experience=experience.score,
        keywords=keywords.score,
    )
    score = aggregate(breakdown, requirements)

    return MatchResult(
        resume_id=candidate.id,
        file_name=candidate.file_name,
        score=score,
        confidence=confidence_band(score),
        matched_skills=skills.matched,
        missing_skills=skills.missing,
        matched_keywords=keywords.matched,
        missing_keywords=keywords.missing,
        role_matched=role.matched,
        experience_matched=experience.matched,
        breakdown=breakdown,
    )


def _rank_key(result: MatchResult) -> tuple[int, int, str]:
    return (-result.score, -result.match_count, result.file_name)


def match_resumes(
    candidates: Iterable[Candidate], requirements: Requirements
) -> list[MatchResult]:
    """Score every candidate and sort by score, match count, then file name."""
    results = [score_candidate(candidate, requirements) for candidate in candidates]
    results.sort(key=_rank_key)

    if results:
        logger.debug(
            "Scored %d resumes, top %s=%d", len(results), results[0].file_name, results[0].score
        )
    return results

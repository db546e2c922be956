"""Weighted aggregation of category scores into a 0-100 match score.

Categories the caller left empty drop out and the remaining weights are
rescaled to sum to 1, so a search on skills alone can still reach 100.
"""

import math

from models.schemas.match_result import CategoryBreakdown, Confidence
from models.schemas.requirements import Requirements

ROLE_WEIGHT = 0.25
SKILLS_WEIGHT = 0.35
EXPERIENCE_WEIGHT = 0.15
KEYWORDS_WEIGHT = 0.25

STRONG_THRESHOLD = 80
MODERATE_THRESHOLD = 55


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (72.5 -> 73)."""
    return int(math.floor(value + 0.5))


def category_weights(requirements: Requirements) -> dict[str, float]:
    """Base weights with empty categories zeroed, renormalized to sum to 1."""
    weights = {
        "role": ROLE_WEIGHT if requirements.role else 0.0,
        "skills": SKILLS_WEIGHT if requirements.skills else 0.0,
        "experience": EXPERIENCE_WEIGHT if requirements.experience else 0.0,
        "keywords": KEYWORDS_WEIGHT if requirements.keywords else 0.0,
    }
    total = sum(weights.values())
    if total <= 0:
        return {name: 0.0 for name in weights}
    return {name: weight / total for name, weight in weights.items()}


def aggregate(breakdown: CategoryBreakdown, requirements: Requirements) -> int:
    weights = category_weights(requirements)
    raw = (
        breakdown.role * weights["role"]
        + breakdown.skills * weights["skills"]
        + breakdown.experience * weights["experience"]
        + breakdown.keywords * weights["keywords"]
    )
    return round_half_up(max(0.0, min(1.0, raw)) * 100)


def confidence_band(score: int) -> Confidence:
    if score >= STRONG_THRESHOLD:
        return "strong"
    if score >= MODERATE_THRESHOLD:
        return "moderate"
    return "low"

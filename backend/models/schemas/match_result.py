"""Deterministic scoring output: one explainable result per candidate."""

from typing import Literal

from pydantic import BaseModel, Field

Confidence = Literal["strong", "moderate", "low"]


class CategoryBreakdown(BaseModel):
    """Per-category scores, each 0.0-1.0, before weighting."""
    role: float = Field(default=0.0, ge=0.0, le=1.0)
    skills: float = Field(default=0.0, ge=0.0, le=1.0)
    experience: float = Field(default=0.0, ge=0.0, le=1.0)
    keywords: float = Field(default=0.0, ge=0.0, le=1.0)


class MatchResult(BaseModel):
    resume_id: str
    file_name: str
    score: int = Field(default=0, ge=0, le=100)
    confidence: Confidence = "low"
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    role_matched: bool = False
    experience_matched: bool = False
    breakdown: CategoryBreakdown = CategoryBreakdown()

    @property
    def match_count(self) -> int:
        """Matched skills plus matched keywords; secondary sort key."""
        return len(self.matched_skills) + len(self.matched_keywords)

"""LLM-based match evaluation output."""

from pydantic import BaseModel, Field


class LLMMatchResult(BaseModel):
    """Validated model judgment of one resume against the requirements."""
    score: int = Field(default=0, ge=0, le=100)
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    summary: str = Field(..., min_length=1)

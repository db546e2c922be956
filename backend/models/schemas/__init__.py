"""Pydantic records shared by the scoring engine and the Gemini client."""

from models.schemas.requirements import Candidate, Requirements
from models.schemas.match_result import CategoryBreakdown, MatchResult
from models.schemas.enrichment import EnrichmentResult, ResumeStructuredData
from models.schemas.llm_match import LLMMatchResult

__all__ = [
    "Candidate",
    "Requirements",
    "CategoryBreakdown",
    "MatchResult",
    "EnrichmentResult",
    "ResumeStructuredData",
    "LLMMatchResult",
]

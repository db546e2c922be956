"""LLM enrichment output and the structured resume data fed back into match prompts."""

from pydantic import BaseModel, Field


class EnrichmentResult(BaseModel):
    """Validated enrichment of a single resume.

    Only built by ``response_validators.validate_enrichment``; raw model JSON
    never leaves the validation boundary.
    """
    summary: str = Field(..., min_length=1)
    skills: list[str] = []
    roles: list[str] = []
    experience_years: float | None = None


class ResumeStructuredData(BaseModel):
    """Prior enrichment fields plus extracted text, as stored for a resume."""
    llm_summary: str | None = None
    llm_skills: list[str] | None = None
    llm_roles: list[str] | None = None
    llm_experience_years: float | None = None
    extracted_text: str | None = None

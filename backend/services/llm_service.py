"""LLM-backed operations: resume enrichment and semantic match evaluation."""

import logging
from typing import Any

from models.schemas.enrichment import EnrichmentResult, ResumeStructuredData
from models.schemas.llm_match import LLMMatchResult
from models.schemas.requirements import Requirements
from services import prompt_builder
from services.exceptions import ValidationError
from services.gemini_client import GeminiJsonClient
from services.response_validators import validate_enrichment, validate_match

logger = logging.getLogger(__name__)


def _client_for(client: GeminiJsonClient | None, overrides: dict[str, Any]) -> GeminiJsonClient:
    return client if client is not None else GeminiJsonClient.from_settings(**overrides)


async def enrich_resume(
    resume_text: str | None,
    client: GeminiJsonClient | None = None,
    **overrides: Any,
) -> EnrichmentResult:
    """Extract summary, skills, roles and years of experience from resume text."""
    text = (resume_text or "").strip()
    if not text:
        raise ValidationError("Cannot enrich empty resume text.", field="resume_text")

    gemini = _client_for(client, overrides)
    result = await gemini.call_structured(prompt_builder.build_enrichment_prompt(text), validate_enrichment)
    logger.info(
        "Enriched resume: %d skills, %d roles, years=%s",
        len(result.skills), len(result.roles), result.experience_years,
    )
    return result


async def match_resume_llm(
    requirements: Requirements,
    resume_data: ResumeStructuredData,
    client: GeminiJsonClient | None = None,
    **overrides: Any,
) -> LLMMatchResult:
    """Ask Gemini to score one resume against the requirements."""
    gemini = _client_for(client, overrides)
    prompt = prompt_builder.build_match_prompt(requirements, resume_data)
    result = await gemini.call_structured(prompt, validate_match)
    logger.info("LLM match score=%d (%d matched skills)", result.score, len(result.matched_skills))
    return result

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_gemini_client
from models.requests import EnrichRequest, LLMMatchRequest, MatchRequest
from models.responses import MatchResponse
from models.schemas.enrichment import EnrichmentResult
from models.schemas.llm_match import LLMMatchResult
from services import gemini_client, llm_service, matcher
from services.gemini_client import GeminiJsonClient
from services.requirements_builder import build_requirements

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": gemini_client.is_configured(),
    }


@router.post("/match", response_model=MatchResponse)
@limiter.limit("30/minute")
async def match(request: Request, body: MatchRequest):
    requirements = build_requirements(body.role, body.skills, body.experience, body.keywords)
    if requirements.is_empty:
        raise HTTPException(status_code=400, detail="Add at least one requirement before running match.")

    # Only resumes whose extraction produced text are worth scoring
    candidates = [resume for resume in body.resumes if resume.has_text]
    skipped = [resume.id for resume in body.resumes if not resume.has_text]
    if not candidates:
        raise HTTPException(
            status_code=400,
            detail="No extracted text found yet. Upload a resume and wait for extraction.",
        )

    results = matcher.match_resumes(candidates, requirements)
    logger.info("Scored %d resumes (%d skipped without text)", len(results), len(skipped))

    return MatchResponse(requirements=requirements, results=results, skipped_resume_ids=skipped)


@router.post("/enrich", response_model=EnrichmentResult)
@limiter.limit("10/minute")
async def enrich(
    request: Request,
    body: EnrichRequest,
    client: GeminiJsonClient = Depends(get_gemini_client),
):
    return await llm_service.enrich_resume(body.resume_text, client=client)


@router.post("/match/llm", response_model=LLMMatchResult)
@limiter.limit("10/minute")
async def match_llm(
    request: Request,
    body: LLMMatchRequest,
    client: GeminiJsonClient = Depends(get_gemini_client),
):
    fields = body.requirements
    requirements = build_requirements(fields.role, fields.skills, fields.experience, fields.keywords)
    return await llm_service.match_resume_llm(requirements, body.resume, client=client)

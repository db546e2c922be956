"""All prompt templates for Gemini API calls."""

import json

from models.schemas.enrichment import ResumeStructuredData
from models.schemas.requirements import Requirements

ENRICHMENT_SCHEMA = (
    '{ "llm_summary": string, "llm_skills": string[], "llm_roles": string[], '
    '"llm_experience_years": number | null }'
)

MATCH_SCHEMA = (
    '{ "match_score": number, "matched_skills": string[], "missing_skills": string[], '
    '"match_summary": string }'
)


def build_enrichment_prompt(resume_text: str) -> str:
    """Call A: structured profile extraction from raw resume text."""
    return "\n".join([
        "Extract structured candidate information from the resume text.",
        "Return strict JSON only with this exact shape:",
        ENRICHMENT_SCHEMA,
        "Rules:",
        "- llm_summary: 2-4 sentence concise profile summary.",
        "- llm_skills: unique list of technical/professional skills.",
        "- llm_roles: unique list of inferred job roles/titles.",
        "- llm_experience_years: best estimate as a number, or null if unknown.",
        "- Do not include markdown/code fences.",
        "",
        "Resume Text:",
        resume_text,
    ])


def build_match_prompt(
    requirements: Requirements, resume_data: ResumeStructuredData
) -> str:
    """Call B: semantic match evaluation of one resume against the requirements.

    Requirements and resume data are embedded as literal JSON so the model
    sees exactly the values the deterministic scorer worked from.
    """
    safe_requirements = {
        "role": requirements.role or "",
        "skills": list(requirements.skills or []),
        "experience": requirements.experience or "",
        "keywords": list(requirements.keywords or []),
    }
    safe_resume_data = {
        "llm_summary": resume_data.llm_summary or "",
        "llm_skills": resume_data.llm_skills or [],
        "llm_roles": resume_data.llm_roles or [],
        "llm_experience_years": resume_data.llm_experience_years,
        "extracted_text": resume_data.extracted_text or "",
    }

    return "\n".join([
        "You are an AI resume matching assistant. Evaluate how well a resume matches job requirements.",
        "Return strict JSON only with this exact shape:",
        MATCH_SCHEMA,
        "Scoring guidance:",
        "- match_score must be 0 to 100.",
        "- Evaluate semantic alignment across role, skills, experience, and overall relevance.",
        "- matched_skills should contain only skills present in both requirements and resume.",
        "- missing_skills should contain required skills not evident in the resume.",
        "- match_summary should be concise and specific.",
        "- Do not include markdown/code fences.",
        "",
        "Job Requirements:",
        json.dumps(safe_requirements, ensure_ascii=False, separators=(",", ":")),
        "",
        "Resume Data:",
        json.dumps(safe_resume_data, ensure_ascii=False, separators=(",", ":")),
    ])

from pydantic import BaseModel, Field

from models.schemas.enrichment import ResumeStructuredData
from models.schemas.requirements import Candidate


class RequirementFields(BaseModel):
    """Raw requirement form fields; skills/keywords are comma or newline separated."""
    role: str = Field("", max_length=500)
    skills: str = Field("", max_length=5000)
    experience: str = Field("", max_length=500)
    keywords: str = Field("", max_length=5000)


class MatchRequest(RequirementFields):
    resumes: list[Candidate] = Field(..., max_length=500)


class EnrichRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")


class LLMMatchRequest(BaseModel):
    requirements: RequirementFields
    resume: ResumeStructuredData

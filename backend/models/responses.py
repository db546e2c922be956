from pydantic import BaseModel

from models.schemas.match_result import MatchResult
from models.schemas.requirements import Requirements


class MatchResponse(BaseModel):
    requirements: Requirements
    results: list[MatchResult] = []
    skipped_resume_ids: list[str] = []  # no usable extracted text

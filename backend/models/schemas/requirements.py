"""Normalized job requirements and the candidate resumes they are scored against."""

from pydantic import BaseModel, ConfigDict


class Requirements(BaseModel):
    """Normalized requirement record built by ``build_requirements``.

    All strings are lowercased with punctuation stripped. ``skills`` and
    ``keywords`` are deduplicated, keeping the order the caller typed them in.
    """
    model_config = ConfigDict(frozen=True)

    role: str = ""
    skills: list[str] = []
    experience: str = ""
    keywords: list[str] = []

    @property
    def is_empty(self) -> bool:
        return not (self.role or self.skills or self.experience or self.keywords)


class Candidate(BaseModel):
    """A resume as read from the external store. Never mutated by scoring.

    ``status`` follows the store lifecycle uploaded -> extracting -> ready | error.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    file_name: str
    extracted_text: str | None = None
    status: str | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.extracted_text and self.extracted_text.strip())

"""Build a normalized Requirements record from raw form fields."""

import re

from models.schemas.requirements import Requirements
from services.text_normalizer import normalize

_LIST_SEPARATOR_RE = re.compile(r"[,\n]+")


def parse_list_field(value: str | None) -> list[str]:
    """Split a comma/newline separated field into unique normalized entries.

    "React, react,\\nTypeScript" -> ["react", "typescript"]
    """
    if not value:
        return []
    seen: dict[str, None] = {}
    for segment in _LIST_SEPARATOR_RE.split(value):
        item = normalize(segment)
        if item:
            seen.setdefault(item, None)
    return list(seen)


def build_requirements(
    role: str | None = "",
    skills: str | None = "",
    experience: str | None = "",
    keywords: str | None = "",
) -> Requirements:
    return Requirements(
        role=normalize(role),
        skills=parse_list_field(skills),
        experience=normalize(experience),
        keywords=parse_list_field(keywords),
    )

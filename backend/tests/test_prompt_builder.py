import json

from models.schemas.enrichment import ResumeStructuredData
from models.schemas.requirements import Requirements
from services.prompt_builder import (
    ENRICHMENT_SCHEMA,
    MATCH_SCHEMA,
    build_enrichment_prompt,
    build_match_prompt,
)


def test_enrichment_prompt_contains_schema_and_text():
    prompt = build_enrichment_prompt("Jane Smith, React developer")
    assert (
        '{ "llm_summary": string, "llm_skills": string[], "llm_roles": string[], '
        '"llm_experience_years": number | null }'
    ) in prompt
    assert ENRICHMENT_SCHEMA in prompt
    assert "Do not include markdown/code fences." in prompt
    assert prompt.endswith("Resume Text:\nJane Smith, React developer")


def test_enrichment_prompt_is_deterministic():
    assert build_enrichment_prompt("abc") == build_enrichment_prompt("abc")


def test_match_prompt_embeds_literal_json():
    requirements = Requirements(role="data engineer", skills=["spark", "sql"], keywords=["remote"])
    resume = ResumeStructuredData(llm_summary="Data engineer", llm_skills=["spark"], extracted_text="Spark, SQL")
    prompt = build_match_prompt(requirements, resume)

    assert MATCH_SCHEMA in prompt
    lines = prompt.split("\n")
    req_json = json.loads(lines[lines.index("Job Requirements:") + 1])
    resume_json = json.loads(lines[lines.index("Resume Data:") + 1])

    assert req_json == {
        "role": "data engineer",
        "skills": ["spark", "sql"],
        "experience": "",
        "keywords": ["remote"],
    }
    assert resume_json == {
        "llm_summary": "Data engineer",
        "llm_skills": ["spark"],
        "llm_roles": [],
        "llm_experience_years": None,
        "extracted_text": "Spark, SQL",
    }


def test_match_prompt_keeps_multiline_text_on_one_json_line():
    resume = ResumeStructuredData(extracted_text="line one\nline two")
    prompt = build_match_prompt(Requirements(), resume)
    lines = prompt.split("\n")
    resume_json = json.loads(lines[lines.index("Resume Data:") + 1])
    assert resume_json["extracted_text"] == "line one\nline two"

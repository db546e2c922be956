import pytest

from models.schemas.enrichment import EnrichmentResult
from models.schemas.llm_match import LLMMatchResult
from services.exceptions import SchemaError
from services.response_validators import (
    clamp_score,
    normalize_string_list,
    to_number_or_none,
    validate_enrichment,
    validate_match,
)


def test_normalize_string_list():
    assert normalize_string_list([" Python ", "python", "", "  ", 3, None, "Go", "Python"]) == [
        "Python",
        "python",
        "Go",
    ]
    assert normalize_string_list("not-a-list") == []
    assert normalize_string_list(None) == []
    assert normalize_string_list({"a": 1}) == []


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, 5.0),
        (4.5, 4.5),
        ("7", 7.0),
        (" 3.5 years", 3.5),
        ("", None),
        ("abc", None),
        (None, None),
        (True, None),
        (float("nan"), None),
        (float("inf"), None),
        ("Infinity", None),
        ([5], None),
    ],
)
def test_to_number_or_none(value, expected):
    assert to_number_or_none(value) == expected


def test_clamp_score():
    assert clamp_score(150) == 100
    assert clamp_score(-3) == 0
    assert clamp_score(72.5) == 73
    assert clamp_score(float("nan")) == 0


class TestValidateEnrichment:
    def test_valid_payload(self):
        result = validate_enrichment(
            {
                "llm_summary": "  Backend engineer with cloud focus.  ",
                "llm_skills": ["Python", "AWS", "Python"],
                "llm_roles": ["Backend Engineer"],
                "llm_experience_years": "6",
            }
        )
        assert isinstance(result, EnrichmentResult)
        assert result.summary == "Backend engineer with cloud focus."
        assert result.skills == ["Python", "AWS"]
        assert result.roles == ["Backend Engineer"]
        assert result.experience_years == 6.0

    def test_missing_summary_raises(self):
        with pytest.raises(SchemaError, match="llm_summary"):
            validate_enrichment({"llm_skills": ["Python"]})

    def test_blank_summary_raises(self):
        with pytest.raises(SchemaError):
            validate_enrichment({"llm_summary": "   "})

    def test_non_list_skills_coerced_to_empty(self):
        result = validate_enrichment({"llm_summary": "ok", "llm_skills": "not-a-list"})
        assert result.skills == []
        assert result.roles == []
        assert result.experience_years is None

    def test_non_object_raises(self):
        with pytest.raises(SchemaError):
            validate_enrichment(["llm_summary"])


class TestValidateMatch:
    def test_valid_payload(self):
        result = validate_match(
            {
                "match_score": 87.4,
                "matched_skills": ["React"],
                "missing_skills": ["GraphQL", " "],
                "match_summary": "Strong frontend fit.",
            }
        )
        assert isinstance(result, LLMMatchResult)
        assert result.score == 87
        assert result.matched_skills == ["React"]
        assert result.missing_skills == ["GraphQL"]
        assert result.summary == "Strong frontend fit."

    def test_score_clamped_and_defaulted(self):
        assert validate_match({"match_score": 250, "match_summary": "x"}).score == 100
        assert validate_match({"match_score": "-5", "match_summary": "x"}).score == 0
        assert validate_match({"match_summary": "x"}).score == 0
        assert validate_match({"match_score": "n/a", "match_summary": "x"}).score == 0

    def test_missing_summary_raises(self):
        with pytest.raises(SchemaError, match="match_summary"):
            validate_match({"match_score": 50})

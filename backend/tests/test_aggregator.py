import pytest

from models.schemas.match_result import CategoryBreakdown
from models.schemas.requirements import Requirements
from services.aggregator import (
    aggregate,
    category_weights,
    confidence_band,
    round_half_up,
)


def test_weights_all_categories():
    req = Requirements(role="dev", skills=["python"], experience="5 years", keywords=["remote"])
    weights = category_weights(req)
    assert weights == pytest.approx(
        {"role": 0.25, "skills": 0.35, "experience": 0.15, "keywords": 0.25}
    )


def test_weights_renormalized_when_categories_empty():
    req = Requirements(skills=["python"], keywords=["remote"])
    weights = category_weights(req)
    assert weights["role"] == 0.0
    assert weights["experience"] == 0.0
    assert weights["skills"] == pytest.approx(0.35 / 0.6)
    assert weights["keywords"] == pytest.approx(0.25 / 0.6)
    assert sum(weights.values()) == pytest.approx(1.0)


def test_weights_all_empty():
    assert sum(category_weights(Requirements()).values()) == 0.0


def test_aggregate_all_empty_is_zero():
    breakdown = CategoryBreakdown(role=1.0, skills=1.0, experience=1.0, keywords=1.0)
    assert aggregate(breakdown, Requirements()) == 0


def test_aggregate_single_category_reaches_100():
    req = Requirements(skills=["python", "go"])
    assert aggregate(CategoryBreakdown(skills=1.0), req) == 100
    assert aggregate(CategoryBreakdown(skills=0.5), req) == 50


def test_aggregate_weighted_sum():
    req = Requirements(role="dev", skills=["a", "b", "c"], experience="5 years", keywords=["x"])
    breakdown = CategoryBreakdown(role=1.0, skills=2 / 3, experience=1.0, keywords=1.0)
    # 0.25 + 0.35 * 2/3 + 0.15 + 0.25 = 0.8833
    assert aggregate(breakdown, req) == 88


def test_round_half_up():
    assert round_half_up(72.5) == 73
    assert round_half_up(72.49) == 72
    assert round_half_up(0.0) == 0


@pytest.mark.parametrize(
    "score,band",
    [(100, "strong"), (80, "strong"), (79, "moderate"), (55, "moderate"), (54, "low"), (0, "low")],
)
def test_confidence_band(score, band):
    assert confidence_band(score) == band

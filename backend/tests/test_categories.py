import pytest

from core.scoring_table import RECOMMENDATIONS
from services.categories import categorize


@pytest.mark.parametrize(
    "score,category",
    [
        (0.0, "Very Low Risk"),
        (5.0, "Very Low Risk"),
        (5.1, "Low Risk"),
        (10.0, "Low Risk"),
        (10.1, "Moderate Risk"),
        (15.0, "Moderate Risk"),
        (15.1, "High Risk"),
        (20.0, "High Risk"),
        (20.1, "Very High Risk"),
        (1000.0, "Very High Risk"),
        (-1.0, "Very Low Risk"),
    ],
)
def test_band_boundaries(score, category):
    assert categorize(score)[0] == category


def test_every_category_has_recommendations():
    for score in (0, 7, 12, 18, 25):
        category, recommendations = categorize(score)
        assert recommendations == RECOMMENDATIONS[category]
        assert recommendations


def test_recommendations_are_copies():
    _, recommendations = categorize(3)
    recommendations.append("mutated")
    assert "mutated" not in categorize(3)[1]


def test_more_severe_bands_give_at_least_as_much_advice():
    counts = [len(categorize(score)[1]) for score in (0, 7, 12, 18, 25)]
    assert counts == sorted(counts)

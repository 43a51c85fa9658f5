from core.scoring_table import RECOMMENDATIONS, RISK_BANDS, TOP_CATEGORY


def categorize(score: float) -> tuple[str, list[str]]:
    """Map a score to (category, recommendations). Upper bounds are inclusive."""
    category = TOP_CATEGORY
    for upper, label in RISK_BANDS:
        if score <= upper:
            category = label
            break
    return category, list(RECOMMENDATIONS[category])

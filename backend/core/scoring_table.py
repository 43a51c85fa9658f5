"""
Versioned scoring weights, risk bands and recommendation copy.

Bump SCORING_VERSION whenever a weight, threshold or band changes so results
from different deployments can be compared.
"""
from core.config import MALE_GENDER_WEIGHT

SCORING_VERSION = "2.0"

# (exclusive upper age, points); ages past the last band score AGE_POINTS_OLDEST
AGE_BANDS = [(30, 1), (50, 2)]
AGE_POINTS_OLDEST = 3

# Gender weighting carried over from earlier scoring versions. Kept as
# configuration (MALE_GENDER_WEIGHT) pending product review.
GENDER_WEIGHTS = {"male": MALE_GENDER_WEIGHT}

SMOKE_WEIGHTS = {"Yes": 3}
ALCOHOL_WEIGHTS = {"Regularly": 2, "Occasionally": 1}
EXERCISE_WEIGHTS = {"Never": 3, "1-2 times": 1}
CONDITION_WEIGHT = 2
RELAXATION_WEIGHTS = {"Never": 2, "Rarely": 2}
SCREEN_TIME_WEIGHTS = {">6h": 2}

LOW_SOCIAL_CONNECTION_BELOW = 5
LOW_SOCIAL_CONNECTION_POINTS = 2

# Mental-health sub-score.
# "High" thresholds: value > bound. "Low" thresholds: value < bound.
STRESS_HIGH = [(7, 3), (5, 2)]
ANXIETY_HIGH = [(7, 3), (5, 1)]
WELLBEING_LOW = [(4, 3), (6, 1)]
SLEEP_QUALITY_LOW = [(4, 2), (6, 1)]
MENTAL_HEALTH_ISSUE_WEIGHT = 1.5
NO_MENTAL_SUPPORT_POINTS = 1

# (inclusive upper score, category); anything above the last band is TOP_CATEGORY
RISK_BANDS = [
    (5, "Very Low Risk"),
    (10, "Low Risk"),
    (15, "Moderate Risk"),
    (20, "High Risk"),
]
TOP_CATEGORY = "Very High Risk"

RECOMMENDATIONS: dict[str, list[str]] = {
    "Very Low Risk": [
        "Maintain your current healthy lifestyle!",
        "Continue with regular health checkups.",
    ],
    "Low Risk": [
        "Consider adding more physical activity to your routine.",
        "Maintain a balanced diet with plenty of fruits and vegetables.",
        "Practice stress management techniques.",
    ],
    "Moderate Risk": [
        "Increase your weekly exercise frequency.",
        "Limit screen time and take regular breaks.",
        "Consider consulting a health professional for a checkup.",
        "Practice mindfulness or meditation.",
    ],
    "High Risk": [
        "Quit smoking if applicable and limit unhealthy habits.",
        "Schedule a comprehensive health checkup soon.",
        "Establish a regular exercise routine (3-5 times weekly).",
        "Consider professional mental health support if needed.",
    ],
    "Very High Risk": [
        "Consult a healthcare professional immediately for evaluation.",
        "Implement significant lifestyle changes with professional guidance.",
        "Prioritize stress reduction and mental health support.",
        "Establish regular medical follow-ups for monitoring.",
    ],
}

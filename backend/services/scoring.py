"""
Deterministic additive risk score from a validated assessment.

Every factor contributes independently and non-negatively; weights come from
core.scoring_table. No I/O, no shared state.
"""
import math

from core.scoring_table import (
    AGE_BANDS,
    AGE_POINTS_OLDEST,
    ALCOHOL_WEIGHTS,
    ANXIETY_HIGH,
    CONDITION_WEIGHT,
    EXERCISE_WEIGHTS,
    GENDER_WEIGHTS,
    LOW_SOCIAL_CONNECTION_BELOW,
    LOW_SOCIAL_CONNECTION_POINTS,
    MENTAL_HEALTH_ISSUE_WEIGHT,
    NO_MENTAL_SUPPORT_POINTS,
    RELAXATION_WEIGHTS,
    SCREEN_TIME_WEIGHTS,
    SLEEP_QUALITY_LOW,
    SMOKE_WEIGHTS,
    STRESS_HIGH,
    WELLBEING_LOW,
)
from schemas.assessment import AssessmentInput, RiskResult
from services.categories import categorize


def round_score(score: float) -> float:
    """One decimal place, halves rounded up."""
    return math.floor(score * 10 + 0.5) / 10


def _above(value: int, thresholds: list[tuple[int, int]]) -> int:
    for bound, points in thresholds:
        if value > bound:
            return points
    return 0


def _below(value: int, thresholds: list[tuple[int, int]]) -> int:
    for bound, points in thresholds:
        if value < bound:
            return points
    return 0


def _age_points(age: int) -> int:
    for upper, points in AGE_BANDS:
        if age < upper:
            return points
    return AGE_POINTS_OLDEST


def compute_mental_health_score(record: AssessmentInput) -> float:
    score = 0.0
    score += _above(record.stress, STRESS_HIGH)
    score += _below(record.mentalWellbeing, WELLBEING_LOW)
    score += _above(record.anxiety, ANXIETY_HIGH)
    score += _below(record.sleepQuality, SLEEP_QUALITY_LOW)
    score += MENTAL_HEALTH_ISSUE_WEIGHT * len(record.mentalHealthIssues)
    if record.mentalSupport == "No":
        score += NO_MENTAL_SUPPORT_POINTS
    return score


def compute_lifestyle_score(record: AssessmentInput) -> float:
    """Everything except the mental-health sub-score."""
    score = 0.0
    score += _age_points(record.age)
    score += max(0.0, GENDER_WEIGHTS.get(record.gender, 0))
    score += SMOKE_WEIGHTS.get(record.smoke, 0)
    score += ALCOHOL_WEIGHTS.get(record.alcohol, 0)
    score += EXERCISE_WEIGHTS.get(record.exercise, 0)
    score += CONDITION_WEIGHT * len(record.conditions)
    score += RELAXATION_WEIGHTS.get(record.relaxationFrequency, 0)
    score += SCREEN_TIME_WEIGHTS.get(record.screenTime, 0)
    if (
        record.socialConnection is not None
        and record.socialConnection < LOW_SOCIAL_CONNECTION_BELOW
    ):
        score += LOW_SOCIAL_CONNECTION_POINTS
    return score


def compute_risk_score(record: AssessmentInput) -> float:
    return round_score(compute_lifestyle_score(record) + compute_mental_health_score(record))


def assess(record: AssessmentInput) -> RiskResult:
    """Score a validated assessment and attach its category and recommendations."""
    score = compute_risk_score(record)
    category, recommendations = categorize(score)
    return RiskResult(
        score=score,
        category=category,
        recommendations=recommendations,
    )

from schemas.assessment import AssessmentInput, AssessmentResponse, ErrorResponse, RiskResult
from schemas.health import HealthResponse

__all__ = [
    "AssessmentInput",
    "AssessmentResponse",
    "ErrorResponse",
    "RiskResult",
    "HealthResponse",
]

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AssessmentInput(BaseModel):
    """Validated, normalized assessment. Built by services.validation only."""

    model_config = ConfigDict(frozen=True)

    age: int = Field(..., ge=1, le=120)
    gender: Literal["male", "female", "other"] | None = None
    smoke: Literal["Yes", "No"] = "No"
    alcohol: Literal["None", "Occasionally", "Regularly"] = "None"
    exercise: Literal["Never", "1-2 times", "3-5 times", "Daily"] | None = None
    conditions: tuple[str, ...] = ()
    stress: int = Field(5, ge=0, le=10)
    mentalWellbeing: int = Field(5, ge=0, le=10)
    anxiety: int = Field(5, ge=0, le=10)
    sleepQuality: int = Field(5, ge=0, le=10)
    mentalHealthIssues: tuple[str, ...] = ()
    mentalSupport: Literal["Yes", "No"] = "No"
    relaxationFrequency: Literal["Never", "Rarely", "Sometimes", "Often"] | None = None
    screenTime: Literal["<2h", "2-6h", ">6h"] | None = None
    socialConnection: int | None = Field(None, ge=0, le=10)


class RiskResult(BaseModel):
    score: float
    category: str
    recommendations: list[str]


class AssessmentResponse(BaseModel):
    success: bool = True
    riskCategory: str
    recommendations: list[str]
    score: float


class ErrorResponse(BaseModel):
    error: str
    missingFields: list[str] | None = None
    message: str | None = None
